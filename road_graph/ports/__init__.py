"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph core and the adapters
around it, so loaders, solvers and front-ends can be swapped in tests.
"""

from .graph import GraphRepositoryPort, RoadGraphPort, RouteSolverPort

__all__ = [
    "RoadGraphPort",
    "GraphRepositoryPort",
    "RouteSolverPort",
]
