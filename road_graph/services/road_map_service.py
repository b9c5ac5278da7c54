"""Road map service - name-based facade over the road graph.

Front-ends (menus, GUIs, loaders) work with town and road names rather
than Town/Road objects. This service translates between the two and
keeps every structural change going through the graph's mutation
surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..adapters.graph.csv_repository import CSVRoadRepository
from ..adapters.graph.dijkstra_solver import DijkstraRouteSolver
from ..domain.errors import TownNotFoundError
from ..domain.models import DEFAULT_DISTANCE_UNIT, RouteResult, Town
from ..graph.dijkstra import shortest_path
from ..graph.road_graph import RoadGraph
from ..ports.graph import GraphRepositoryPort, RoadGraphPort, RouteSolverPort


@dataclass
class RoadMapService:
    """Manage towns and roads by name and answer path queries.

    Attributes:
        graph: The road graph being managed
        route_solver: Computes routes for find_route()
        repository: Reads road files for populate_from_file()
        distance_unit: Unit label used in path descriptions
    """

    graph: RoadGraphPort = field(default_factory=RoadGraph)
    route_solver: RouteSolverPort = field(default_factory=DijkstraRouteSolver)
    repository: GraphRepositoryPort = field(default_factory=CSVRoadRepository)
    distance_unit: str = DEFAULT_DISTANCE_UNIT

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ---------- towns ----------

    def add_town(self, name: str) -> bool:
        """Add a town; False if a town with that name already exists.

        Raises:
            InvalidArgumentError: If ``name`` is empty.
        """
        return self.graph.add_vertex(Town(name))

    def get_town(self, name: str) -> Optional[Town]:
        return self.graph.get_vertex(name)

    def contains_town(self, name: str) -> bool:
        return self.graph.get_vertex(name) is not None

    def delete_town(self, name: str) -> bool:
        """Remove a town and every road touching it.

        Returns:
            False if no such town exists.
        """
        town = self.graph.get_vertex(name)
        if town is None:
            return False
        return self.graph.remove_vertex(town)

    def all_towns(self) -> List[str]:
        """Town names in alphabetical order."""
        return sorted(town.name for town in self.graph.vertex_set())

    # ---------- roads ----------

    def add_road(self, town1: str, town2: str, distance: int, road_name: str) -> bool:
        """Connect two existing towns with a road.

        Returns:
            True if the towns were not connected before, False if an
            existing road between them was replaced.

        Raises:
            TownNotFoundError: If either town does not exist.
            InvalidArgumentError: If the road is invalid.
        """
        source = self._require_town(town1)
        destination = self._require_town(town2)

        was_connected = self.graph.contains_edge(source, destination)
        self.graph.add_edge(source, destination, distance, road_name)
        return not was_connected

    def get_road(self, town1: str, town2: str) -> Optional[str]:
        """Name of the road joining two towns, or None."""
        road = self.graph.get_edge(
            self.graph.get_vertex(town1), self.graph.get_vertex(town2)
        )
        return road.name if road is not None else None

    def contains_road_connection(self, town1: str, town2: str) -> bool:
        return self.get_road(town1, town2) is not None

    def delete_road_connection(
        self, town1: str, town2: str, road_name: Optional[str] = None
    ) -> bool:
        """Remove the road joining two towns.

        When ``road_name`` is given, the road is only removed if its name
        matches.

        Returns:
            True if a road was removed.

        Raises:
            TownNotFoundError: If either town does not exist.
        """
        source = self._require_town(town1)
        destination = self._require_town(town2)

        road = self.graph.get_edge(source, destination)
        if road is None:
            return False
        if road_name is not None and road.name != road_name:
            self._logger.debug(
                "Road name mismatch, nothing removed",
                extra={"expected": road_name, "actual": road.name},
            )
            return False

        return self.graph.remove_edge(source, destination, road.distance, road.name) is not None

    def all_roads(self) -> List[str]:
        """Road names in alphabetical order."""
        return sorted(road.name for road in self.graph.edge_set())

    # ---------- paths ----------

    def get_path(self, town1: str, town2: str) -> List[str]:
        """Describe the shortest path between two towns, one line per hop.

        Returns an empty list when the towns are the same or not connected.

        Raises:
            TownNotFoundError: If either town does not exist.
        """
        source = self._require_town(town1)
        destination = self._require_town(town2)
        return shortest_path(self.graph, source, destination, unit=self.distance_unit)

    def find_route(self, town1: str, town2: str) -> RouteResult:
        """Shortest route between two towns as a RouteResult.

        Raises:
            TownNotFoundError: If either town does not exist.
            NoRouteFoundError: If the towns are not connected.
        """
        return self.route_solver.solve(self.graph, town1, town2)

    # ---------- loading ----------

    def populate_from_file(self, path: Optional[Union[str, Path]] = None) -> int:
        """Add the roads of a road file to the managed graph.

        Returns:
            Number of road records applied.

        Raises:
            GraphLoadError: If the file cannot be read or is malformed.
        """
        count = self.repository.populate(self.graph, path)
        self._logger.info(
            "Road file applied",
            extra={
                "path": str(path) if path is not None else None,
                "roads": count,
                "towns": len(self.graph.vertex_set()),
            },
        )
        return count

    def _require_town(self, name: str) -> Town:
        town = self.graph.get_vertex(name)
        if town is None:
            raise TownNotFoundError(f"Town not found: {name}", town_name=name)
        return town
