"""In-memory undirected road graph.

The graph owns its towns and roads and keeps every town's adjacency set
consistent with the road set. Callers may pass any Town equal to a stored
one; the graph always resolves it to the stored instance before mutating
adjacency.

Not thread-safe: mutating the graph while a shortest-path computation or
an iteration over ``vertex_set()`` / ``edge_set()`` is in progress gives
undefined results. Synchronise externally when sharing a graph.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Dict, FrozenSet, List, Optional, Set, Tuple

from ..domain.errors import InvalidArgumentError, NullReferenceError
from ..domain.models import DEFAULT_DISTANCE_UNIT, Road, ShortestPathTree, Town
from .dijkstra import dijkstra_shortest_paths, shortest_path


class RoadGraph:
    """Undirected weighted graph of towns joined by named roads.

    At most one road joins a given pair of towns: adding a road between
    towns that are already connected replaces the stored road. Note that
    a hash set of roads would keep the first road instead; here the
    latest road wins.
    """

    def __init__(self) -> None:
        # Keys and values are the same objects; the dict keeps insertion
        # order and gives live set-like views.
        self._towns: Dict[Town, Town] = {}
        self._roads: Dict[Road, Road] = {}
        self._logger = logging.getLogger(__name__)

    # ----------------- towns -----------------

    def add_vertex(self, town: Optional[Town]) -> bool:
        """Add ``town`` unless a town with the same name is present.

        Returns:
            True if the town was added, False if it was already there.

        Raises:
            InvalidArgumentError: If ``town`` is None.
        """
        if town is None:
            raise InvalidArgumentError("Town not given", argument="town")

        if town in self._towns:
            return False

        # Stored towns carry this graph's adjacency only.
        stored = Town(town.name)
        self._towns[stored] = stored
        self._logger.debug("Town added", extra={"town": stored.name})
        return True

    def remove_vertex(self, town: Optional[Town]) -> bool:
        """Remove ``town`` together with every road touching it.

        Returns:
            True if the town was in the graph, False otherwise.

        Raises:
            InvalidArgumentError: If ``town`` is None.
        """
        if town is None:
            raise InvalidArgumentError("Town not given", argument="town")

        stored = self._towns.get(town)
        if stored is None:
            return False

        for road in self.edges_of(stored):
            self._detach(road)
        del self._towns[stored]

        self._logger.debug("Town removed", extra={"town": stored.name})
        return True

    def contains_vertex(self, town: Optional[Town]) -> bool:
        return town is not None and town in self._towns

    def get_vertex(self, name: str) -> Optional[Town]:
        """Return the stored town called ``name``, if any."""
        if not name or not name.strip():
            return None
        return self._towns.get(Town(name))

    def vertex_set(self) -> AbstractSet[Town]:
        """Live, read-only view of the towns."""
        return self._towns.keys()

    def neighbors(self, town: Optional[Town]) -> FrozenSet[Town]:
        """Towns directly connected to ``town`` (empty if unknown)."""
        stored = self._towns.get(town) if town is not None else None
        if stored is None:
            return frozenset()
        return frozenset(stored.adjacent_towns)

    # ----------------- roads -----------------

    def add_edge(
        self,
        source: Optional[Town],
        destination: Optional[Town],
        distance: int,
        name: str,
    ) -> Road:
        """Create a road between two towns already in the graph.

        Returns:
            The newly created road.

        Raises:
            NullReferenceError: If either town is None.
            InvalidArgumentError: If either town is not in the graph, or the
                road itself is invalid (same town twice, negative distance).
        """
        src, dst = self._require_endpoints(source, destination)
        road = Road(source=src, destination=dst, distance=distance, name=name)

        replaced = self._roads.pop(road, None)
        if replaced is not None:
            self._logger.debug(
                "Road replaced",
                extra={"road": replaced.name, "replacement": road.name},
            )

        self._roads[road] = road
        src.add_adjacent_town(dst)
        dst.add_adjacent_town(src)

        self._logger.debug(
            "Road added",
            extra={
                "road": road.name,
                "source": src.name,
                "destination": dst.name,
                "distance": road.distance,
            },
        )
        return road

    def remove_edge(
        self,
        source: Optional[Town],
        destination: Optional[Town],
        distance: Optional[int] = None,
        name: Optional[str] = None,
    ) -> Optional[Road]:
        """Remove the road joining ``source`` and ``destination``.

        The road is looked up by its towns only. ``distance`` and ``name``
        are carried by the returned value; when omitted the stored road's
        values are used.

        Returns:
            A road describing what was removed, or None if the towns were
            not connected.

        Raises:
            NullReferenceError: If either town is None.
            InvalidArgumentError: If either town is not in the graph, or the
                requested distance is invalid. The graph is left unchanged.
        """
        src, dst = self._require_endpoints(source, destination)

        existing = self._find_road(src, dst)
        if existing is None:
            return None

        removed = Road(
            source=src,
            destination=dst,
            distance=existing.distance if distance is None else distance,
            name=existing.name if name is None else name,
        )

        self._detach(existing)
        self._logger.debug(
            "Road removed",
            extra={"road": existing.name, "source": src.name, "destination": dst.name},
        )
        return removed

    def get_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[Road]:
        """Return the road joining two towns in either direction, if any."""
        if source is None or destination is None:
            return None

        src = self._towns.get(source)
        dst = self._towns.get(destination)
        if src is None or dst is None:
            return None
        return self._find_road(src, dst)

    def contains_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> bool:
        return self.get_edge(source, destination) is not None

    def edges_of(self, town: Optional[Town]) -> Set[Road]:
        """Roads touching ``town``; empty if it has none or is unknown."""
        stored = self._towns.get(town) if town is not None else None
        if stored is None:
            return set()

        roads: Set[Road] = set()
        for neighbor in stored.adjacent_towns:
            road = self._find_road(stored, neighbor)
            if road is not None:
                roads.add(road)
        return roads

    def edge_set(self) -> AbstractSet[Road]:
        """Live, read-only view of the roads."""
        return self._roads.keys()

    # ----------------- shortest paths -----------------

    def dijkstra_shortest_path(self, source: Town) -> ShortestPathTree:
        """Shortest distances and predecessors from ``source`` to every town."""
        return dijkstra_shortest_paths(self, source)

    def shortest_path(
        self,
        source: Town,
        destination: Town,
        unit: str = DEFAULT_DISTANCE_UNIT,
    ) -> List[str]:
        """Describe the shortest path as ``"<A> via <road> to <B> <n> mi"`` lines."""
        return shortest_path(self, source, destination, unit=unit)

    # ----------------- helpers -----------------

    def _require_endpoints(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Tuple[Town, Town]:
        if source is None or destination is None:
            raise NullReferenceError(
                "Towns not given. Both road ends are required",
                argument="source" if source is None else "destination",
            )

        missing = [t.name for t in (source, destination) if t not in self._towns]
        if missing:
            raise InvalidArgumentError(
                f"Towns not in graph: {', '.join(missing)}. Add the towns first",
                argument="source" if source.name in missing else "destination",
            )

        return self._towns[source], self._towns[destination]

    def _find_road(self, source: Town, destination: Town) -> Optional[Road]:
        if source == destination:
            return None
        return self._roads.get(Road(source, destination, 0, ""))

    def _detach(self, road: Road) -> None:
        self._roads.pop(road, None)
        road.source.remove_adjacent_town(road.destination)
        road.destination.remove_adjacent_town(road.source)

    def __len__(self) -> int:
        return len(self._towns)

    def __contains__(self, town: object) -> bool:
        return town in self._towns

    def __repr__(self) -> str:
        return f"RoadGraph(towns={len(self._towns)}, roads={len(self._roads)})"
