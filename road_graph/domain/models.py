"""Domain models for the road graph.

Towns are identified by name alone; roads are undirected, so a road
compares equal to the same road taken in the opposite direction. All
models are frozen dataclasses. The only mutable state is a town's
adjacency set, which belongs to the graph that holds the town.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Mapping, Optional, Set

from .errors import InvalidArgumentError, NullReferenceError

DEFAULT_DISTANCE_UNIT = "mi"


@dataclass(frozen=True, slots=True, order=True)
class Town:
    """A named location (graph vertex).

    Attributes:
        name: Unique town name
        adjacent_towns: Towns directly connected to this one by a road.
            Maintained by RoadGraph; not part of equality or hashing.
    """

    name: str
    adjacent_towns: Set[Town] = field(
        default_factory=set, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError(
                f"Town name must be a non-empty string, got {self.name!r}",
                argument="name",
            )

    def add_adjacent_town(self, town: Town) -> None:
        self.adjacent_towns.add(town)

    def remove_adjacent_town(self, town: Town) -> None:
        self.adjacent_towns.discard(town)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Road:
    """An undirected, weighted road between two distinct towns.

    Two roads are equal when they join the same pair of towns, whatever
    the direction, distance or name.

    Attributes:
        source: One endpoint
        destination: The other endpoint
        distance: Length in whole miles, never negative
        name: Display label of the road
    """

    source: Town
    destination: Town
    distance: int
    name: str

    def __post_init__(self) -> None:
        if self.source is None:
            raise NullReferenceError("Road source town is missing", argument="source")
        if self.destination is None:
            raise NullReferenceError(
                "Road destination town is missing", argument="destination"
            )
        if self.source == self.destination:
            raise InvalidArgumentError(
                f"A road must join two distinct towns, got {self.source.name!r} twice",
                argument="destination",
            )
        if (
            isinstance(self.distance, bool)
            or not isinstance(self.distance, int)
            or self.distance < 0
        ):
            raise InvalidArgumentError(
                f"Road distance must be a non-negative integer, got {self.distance!r}",
                argument="distance",
            )

    @property
    def endpoints(self) -> FrozenSet[Town]:
        """The unordered pair of towns joined by this road."""
        return frozenset((self.source, self.destination))

    def contains(self, town: Optional[Town]) -> bool:
        """Check if ``town`` is one of the endpoints."""
        return town == self.source or town == self.destination

    def other(self, town: Town) -> Town:
        """Return the endpoint opposite ``town``.

        Raises:
            InvalidArgumentError: If ``town`` is not an endpoint.
        """
        if town == self.source:
            return self.destination
        if town == self.destination:
            return self.source
        raise InvalidArgumentError(
            f"Town {town.name!r} is not on road {self.name!r}", argument="town"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class PathStep:
    """One hop of a path: ``origin`` to ``target`` along ``road``."""

    origin: Town
    road: Road
    target: Town

    @property
    def distance(self) -> int:
        return self.road.distance

    def format(self, unit: str = DEFAULT_DISTANCE_UNIT) -> str:
        """Render the step as ``"<origin> via <road> to <target> <distance> mi"``."""
        return (
            f"{self.origin.name} via {self.road.name} to {self.target.name} "
            f"{self.road.distance} {unit}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class ShortestPathTree:
    """Result of one single-source shortest-path computation.

    Attributes:
        source: Town the distances are measured from
        distances: Shortest distance to every reachable town (source included)
        predecessors: Previous town on a shortest path, for every reached
            town other than the source
        roads: Road used to reach each town in ``predecessors``
    """

    source: Town
    distances: Mapping[Town, int]
    predecessors: Mapping[Town, Town]
    roads: Mapping[Town, Road]

    def distance_to(self, town: Town) -> Optional[int]:
        """Return the shortest distance to ``town``, or None if unreachable."""
        return self.distances.get(town)

    def is_reachable(self, town: Town) -> bool:
        return town in self.distances

    def path_to(self, town: Town) -> List[Town]:
        """Towns from the source to ``town`` (both included).

        Returns an empty list when ``town`` is the source or cannot be
        reached. The walk stops on a missing predecessor or a repeated
        town, so it always terminates.
        """
        if town == self.source or town not in self.predecessors:
            return []

        path: List[Town] = [town]
        seen = {town}
        current = town
        while current != self.source:
            previous = self.predecessors.get(current)
            if previous is None or previous in seen:
                return []
            path.append(previous)
            seen.add(previous)
            current = previous

        path.reverse()
        return path

    def steps_to(self, town: Town) -> List[PathStep]:
        """Hops from the source to ``town``; empty when there is no path."""
        path = self.path_to(town)
        return [
            PathStep(origin=origin, road=self.roads[target], target=target)
            for origin, target in zip(path, path[1:])
        ]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Route between two towns as returned by the route solver.

    Attributes:
        source: Name of the departure town
        destination: Name of the arrival town
        steps: Hops in travel order
        total_distance: Sum of the hop distances, or None if no route exists
    """

    source: str
    destination: str
    steps: tuple[PathStep, ...] = field(default_factory=tuple)
    total_distance: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """Check if the route has no hops."""
        return len(self.steps) == 0

    @property
    def num_hops(self) -> int:
        return len(self.steps)

    @property
    def towns(self) -> tuple[str, ...]:
        """Town names along the route, departure and arrival included."""
        if not self.steps:
            return ()
        return (self.steps[0].origin.name,) + tuple(
            step.target.name for step in self.steps
        )

    def describe(self, unit: str = DEFAULT_DISTANCE_UNIT) -> List[str]:
        """Return one formatted line per hop."""
        return [step.format(unit) for step in self.steps]
