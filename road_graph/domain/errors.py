"""Typed domain errors for the road graph.

Validation problems are raised immediately by the call that would break a
graph invariant. "No path" conditions are not errors for the graph itself
(they come back as empty results); only the route solver turns them into
``NoRouteFoundError`` when asked to.

All errors inherit from RoadGraphError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadGraphError(Exception):
    """Base error for the road graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(RoadGraphError):
    """An argument is not acceptable for the requested operation.

    Raised when a town referenced by a road operation is not in the
    graph, when ``None`` is given as a town to add or remove, and when a
    Town or Road value would be malformed.

    Attributes:
        argument: Name of the offending argument, if known
    """

    argument: str = ""


@dataclass
class NullReferenceError(RoadGraphError):
    """A required town argument was ``None``.

    Attributes:
        argument: Name of the missing argument
    """

    argument: str = ""


@dataclass
class GraphLoadError(RoadGraphError):
    """A road file could not be read or contains a malformed record.

    Attributes:
        file_path: Path to the road file
        line_number: 1-based line of the bad record, if relevant
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class TownNotFoundError(RoadGraphError):
    """A town name is not known to the graph.

    Attributes:
        town_name: The name that was looked up
    """

    town_name: str = ""


@dataclass
class NoRouteFoundError(RoadGraphError):
    """No path exists between the requested towns.

    Attributes:
        source: Name of the departure town
        destination: Name of the arrival town
    """

    source: str = ""
    destination: str = ""
