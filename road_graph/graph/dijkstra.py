"""Shortest-path computation using Dijkstra's algorithm.

The frontier is a binary heap keyed on ``(distance, town name)``, so
ties between equally distant towns are settled in name order and the
results do not depend on set iteration order. All run state is local
to one call and handed back as a ShortestPathTree.

Road distances are assumed non-negative (Road enforces it).
"""

from __future__ import annotations

import heapq
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, List, Set, Tuple

from ..domain.errors import InvalidArgumentError, NullReferenceError
from ..domain.models import DEFAULT_DISTANCE_UNIT, PathStep, Road, ShortestPathTree, Town

if TYPE_CHECKING:
    from ..ports.graph import RoadGraphPort


def dijkstra_shortest_paths(graph: RoadGraphPort, source: Town) -> ShortestPathTree:
    """Compute shortest distances from ``source`` to every reachable town.

    Parameters
    ----------
    graph:
        Road graph to search.
    source:
        Departure town; must be in ``graph``.

    Returns
    -------
    ShortestPathTree
        Distances, predecessors and the road used to reach each town.

    Raises
    ------
    NullReferenceError
        If ``source`` is None.
    InvalidArgumentError
        If ``source`` is not in ``graph``.
    """
    if source is None:
        raise NullReferenceError("Source town not given", argument="source")
    if not graph.contains_vertex(source):
        raise InvalidArgumentError(
            f"Source town not in graph: {source.name}", argument="source"
        )

    distances: Dict[Town, int] = {source: 0}
    predecessors: Dict[Town, Town] = {}
    roads: Dict[Town, Road] = {}
    settled: Set[Town] = set()

    frontier: List[Tuple[int, str, Town]] = [(0, source.name, source)]

    while frontier:
        current_distance, _, current = heapq.heappop(frontier)

        # Stale entry left behind by a later improvement
        if current in settled:
            continue

        settled.add(current)

        for neighbor in graph.neighbors(current):
            if neighbor in settled:
                continue

            road = graph.get_edge(current, neighbor)
            if road is None:
                continue

            candidate = current_distance + road.distance
            known = distances.get(neighbor)
            if known is None or candidate < known:
                distances[neighbor] = candidate
                predecessors[neighbor] = current
                roads[neighbor] = road
                heapq.heappush(frontier, (candidate, neighbor.name, neighbor))

    return ShortestPathTree(
        source=source,
        distances=MappingProxyType(distances),
        predecessors=MappingProxyType(predecessors),
        roads=MappingProxyType(roads),
    )


def shortest_path_steps(
    graph: RoadGraphPort, source: Town, destination: Town
) -> List[PathStep]:
    """Hops of the shortest path from ``source`` to ``destination``.

    Returns an empty list when both towns are the same or when
    ``destination`` cannot be reached (including when it is not in the
    graph).
    """
    if destination is None:
        raise NullReferenceError("Destination town not given", argument="destination")

    tree = dijkstra_shortest_paths(graph, source)
    return tree.steps_to(destination)


def shortest_path(
    graph: RoadGraphPort,
    source: Town,
    destination: Town,
    unit: str = DEFAULT_DISTANCE_UNIT,
) -> List[str]:
    """Describe the shortest path from ``source`` to ``destination``.

    Each hop is rendered as ``"<from> via <road> to <to> <distance> mi"``,
    in travel order. Empty when there is no path or both towns are the same.
    """
    return [
        step.format(unit)
        for step in shortest_path_steps(graph, source, destination)
    ]
