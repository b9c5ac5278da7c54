"""CSV road repository adapter.

Reads road files with one road per line::

    town,town,distance,description

and builds graphs through the graph's mutation surface only
(``add_vertex`` then ``add_edge``). Blank lines and lines starting with
``#`` are skipped; a header row is skipped when configured. Extra
delimiters after the distance are kept as part of the description.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import Town
from ...graph.road_graph import RoadGraph
from ...ports.graph import RoadGraphPort


@dataclass(frozen=True, slots=True)
class RoadRecord:
    """One parsed line of a road file.

    Attributes:
        source: Name of the first town
        destination: Name of the second town
        distance: Road length in whole miles
        name: Road description
        line_number: 1-based line in the file
    """

    source: str
    destination: str
    distance: int
    name: str
    line_number: int


@dataclass
class CSVRoadRepository:
    """Graph repository that loads roads from delimited text files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, delimiter, header)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[RoadGraph] = field(default=None, repr=False)
    _graph_path: Optional[Path] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Optional[Union[str, Path]] = None) -> RoadGraph:
        """Build a graph from a road file.

        The graph of the last file loaded is cached until clear_cache().

        Args:
            path: Road file to read; the configured file when omitted.

        Returns:
            The populated graph.

        Raises:
            GraphLoadError: If the file cannot be read or is malformed.
        """
        resolved = self._resolve_path(path)
        if self._graph is not None and self._graph_path == resolved:
            return self._graph

        graph = RoadGraph()
        roads = self.populate(graph, resolved)

        self._graph = graph
        self._graph_path = resolved
        self._logger.info(
            "Graph loaded",
            extra={"path": str(resolved), "towns": len(graph), "roads": roads},
        )
        return graph

    def populate(
        self, graph: RoadGraphPort, path: Optional[Union[str, Path]] = None
    ) -> int:
        """Add the roads of a file to an existing graph.

        Towns are created as needed. A road between towns that are already
        connected replaces the existing one.

        Returns:
            Number of road records applied.

        Raises:
            GraphLoadError: If the file cannot be read or is malformed.
        """
        records = self.read_records(path)

        for record in records:
            source = Town(record.source)
            destination = Town(record.destination)
            graph.add_vertex(source)
            graph.add_vertex(destination)
            graph.add_edge(source, destination, record.distance, record.name)

        return len(records)

    def read_records(self, path: Optional[Union[str, Path]] = None) -> List[RoadRecord]:
        """Parse a road file without building a graph.

        Raises:
            GraphLoadError: If the file cannot be read or is malformed.
        """
        resolved = self._resolve_path(path)
        self._logger.debug("Reading road file", extra={"path": str(resolved)})

        try:
            with resolved.open(newline="", encoding="utf-8") as f:
                reader = csv.reader(f, delimiter=self.config.delimiter)
                return self._parse_rows(reader, resolved)
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise GraphLoadError(
                f"Failed to read road file {resolved}",
                file_path=str(resolved),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._graph_path = None
        self._logger.debug("Graph cache cleared")

    def _resolve_path(self, path: Optional[Union[str, Path]]) -> Path:
        return Path(path) if path is not None else self.config.roads_path

    def _parse_rows(self, reader: Iterable[Sequence[str]], path: Path) -> List[RoadRecord]:
        records: List[RoadRecord] = []
        header_pending = self.config.has_header

        for line_number, row in enumerate(reader, start=1):
            if not any(cell.strip() for cell in row):
                continue
            if row[0].lstrip().startswith("#"):
                continue
            if header_pending:
                header_pending = False
                continue

            records.append(self._parse_row(row, line_number, path))

        return records

    def _parse_row(self, row: Sequence[str], line_number: int, path: Path) -> RoadRecord:
        cells = [cell.strip() for cell in row]

        def fail(reason: str, cause: Optional[Exception] = None) -> GraphLoadError:
            return GraphLoadError(
                f"{path}:{line_number}: {reason}",
                file_path=str(path),
                line_number=line_number,
                cause=cause,
            )

        if len(cells) < 4:
            raise fail(
                f"expected town{self.config.delimiter}town{self.config.delimiter}"
                f"distance{self.config.delimiter}description, got {len(cells)} field(s)"
            )

        source, destination, distance_str = cells[:3]
        name = self.config.delimiter.join(row[3:]).strip()

        if not source or not destination:
            raise fail("town name is empty")
        if source == destination:
            raise fail(f"road joins {source!r} to itself")
        if not name:
            raise fail("road description is empty")

        try:
            distance = int(distance_str)
        except ValueError as e:
            raise fail(f"distance {distance_str!r} is not an integer", e)
        if distance < 0:
            raise fail(f"distance {distance} is negative")

        return RoadRecord(
            source=source,
            destination=destination,
            distance=distance,
            name=name,
            line_number=line_number,
        )
