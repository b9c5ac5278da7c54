"""Graph ports - Abstractions for the road graph, loading and routing.

These protocols define the contracts between the graph core and its
collaborators: loaders build graphs through the mutation surface,
route solvers and front-ends read them through the query surface.
"""

from __future__ import annotations

from pathlib import Path
from typing import (
    TYPE_CHECKING,
    AbstractSet,
    FrozenSet,
    List,
    Optional,
    Protocol,
    Set,
    Union,
)

if TYPE_CHECKING:
    from ..domain.models import Road, RouteResult, ShortestPathTree, Town


class RoadGraphPort(Protocol):
    """Port for an undirected road graph.

    Implementation: graph/road_graph.py (RoadGraph)
    """

    # Mutation surface

    def add_vertex(self, town: Town) -> bool:
        """Add a town by name; False if it is already present.

        The graph stores its own Town, never the caller's instance.
        """
        ...

    def remove_vertex(self, town: Town) -> bool:
        """Remove a town and its roads; False if it is absent."""
        ...

    def add_edge(
        self, source: Town, destination: Town, distance: int, name: str
    ) -> Road:
        """Create a road between two towns already in the graph."""
        ...

    def remove_edge(
        self, source: Town, destination: Town, distance: int, name: str
    ) -> Optional[Road]:
        """Remove the road joining two towns, if any."""
        ...

    # Query surface

    def contains_vertex(self, town: Optional[Town]) -> bool:
        ...

    def get_vertex(self, name: str) -> Optional[Town]:
        """Return the stored town called ``name``, if any."""
        ...

    def neighbors(self, town: Optional[Town]) -> FrozenSet[Town]:
        """Towns directly connected to ``town``."""
        ...

    def contains_edge(self, source: Optional[Town], destination: Optional[Town]) -> bool:
        ...

    def get_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[Road]:
        ...

    def edges_of(self, town: Town) -> Set[Road]:
        ...

    def vertex_set(self) -> AbstractSet[Town]:
        ...

    def edge_set(self) -> AbstractSet[Road]:
        ...

    # Algorithm surface

    def dijkstra_shortest_path(self, source: Town) -> ShortestPathTree:
        ...

    def shortest_path(self, source: Town, destination: Town) -> List[str]:
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading road graphs from storage.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self, path: Optional[Union[str, Path]] = None) -> RoadGraphPort:
        """Build a new graph from a road file.

        Args:
            path: Road file to read; the configured file when omitted.

        Returns:
            The populated graph.
        """
        ...

    def populate(
        self, graph: RoadGraphPort, path: Optional[Union[str, Path]] = None
    ) -> int:
        """Add the roads of a file to an existing graph.

        Returns:
            Number of roads added.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation between named towns.

    Implementation: adapters/graph/dijkstra_solver.py
    """

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
            RouteResult with the hops and the total distance.
        """
        ...
