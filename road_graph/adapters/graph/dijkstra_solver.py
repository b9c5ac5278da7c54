"""Dijkstra route solver adapter.

This adapter wraps the shortest-path engine and adds:
- Town name resolution
- Domain model output (RouteResult)
- Typed errors for unknown towns and missing routes
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError, TownNotFoundError
from ...domain.models import RouteResult, Town
from ...graph.dijkstra import dijkstra_shortest_paths
from ...ports.graph import RoadGraphPort


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: RoadGraphPort,
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest route between two towns.

        Args:
            graph: The road graph.
            source: Departure town name.
            destination: Arrival town name.

        Returns:
            RouteResult with the hops and total distance. A route from a
            town to itself has no hops and a distance of 0.

        Raises:
            TownNotFoundError: If either town is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        start = self._resolve(graph, source, "Departure")
        end = self._resolve(graph, destination, "Arrival")

        if start == end:
            return RouteResult(source=source, destination=destination, total_distance=0)

        tree = dijkstra_shortest_paths(graph, start)
        steps = tree.steps_to(end)

        if not steps:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        route = RouteResult(
            source=source,
            destination=destination,
            steps=tuple(steps),
            total_distance=tree.distance_to(end),
        )

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "hops": route.num_hops,
                "distance": route.total_distance,
            },
        )
        return route

    def solve_safe(
        self,
        graph: RoadGraphPort,
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest route, returning an empty result on failure.

        Like solve(), but unknown towns and missing routes give an empty
        RouteResult with no total distance instead of raising.
        """
        try:
            return self.solve(graph, source, destination)
        except (TownNotFoundError, NoRouteFoundError) as e:
            self._logger.debug("Route unavailable", extra={"reason": e.message})
            return RouteResult(source=source, destination=destination)

    @staticmethod
    def _resolve(graph: RoadGraphPort, name: str, role: str) -> Town:
        town = graph.get_vertex(name)
        if town is None:
            raise TownNotFoundError(
                f"{role} town not in graph: {name}",
                town_name=name,
            )
        return town
