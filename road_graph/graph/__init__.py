"""Graph core: the road graph store and the shortest-path engine."""

from .dijkstra import dijkstra_shortest_paths, shortest_path, shortest_path_steps
from .road_graph import RoadGraph

__all__ = [
    "RoadGraph",
    "dijkstra_shortest_paths",
    "shortest_path",
    "shortest_path_steps",
]
