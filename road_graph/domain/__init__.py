"""Domain layer - Core models and errors.

This module contains the town/road models, the result types of the
shortest-path engine and the typed errors used throughout the package.
No external dependencies.
"""

from .errors import (
    GraphLoadError,
    InvalidArgumentError,
    NoRouteFoundError,
    NullReferenceError,
    RoadGraphError,
    TownNotFoundError,
)
from .models import (
    DEFAULT_DISTANCE_UNIT,
    PathStep,
    Road,
    RouteResult,
    ShortestPathTree,
    Town,
)

__all__ = [
    # Models
    "DEFAULT_DISTANCE_UNIT",
    "Town",
    "Road",
    "PathStep",
    "ShortestPathTree",
    "RouteResult",
    # Errors
    "RoadGraphError",
    "InvalidArgumentError",
    "NullReferenceError",
    "GraphLoadError",
    "TownNotFoundError",
    "NoRouteFoundError",
]
