"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVRoadRepository: Loads road graphs from delimited text files
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .csv_repository import CSVRoadRepository, RoadRecord
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVRoadRepository", "RoadRecord", "DijkstraRouteSolver"]
