"""Tests for the CSV road repository adapter."""

import pytest

from road_graph.adapters.graph.csv_repository import CSVRoadRepository, RoadRecord
from road_graph.config import GraphConfig
from road_graph.domain.errors import GraphLoadError
from road_graph.domain.models import Town
from road_graph.graph.road_graph import RoadGraph

ROADS = """\
# Central Maryland
Baltimore,Annapolis,30,I-97
Baltimore,Columbia,15,US-29

Columbia,Annapolis,25,MD-32
"""


@pytest.fixture
def roads_file(tmp_path):
    path = tmp_path / "roads.csv"
    path.write_text(ROADS, encoding="utf-8")
    return path


@pytest.fixture
def repository(tmp_path):
    return CSVRoadRepository(GraphConfig(data_dir=tmp_path))


def write(tmp_path, text, name="roads.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_records_skips_comments_and_blank_lines(repository, roads_file):
    records = repository.read_records(roads_file)

    assert records == [
        RoadRecord("Baltimore", "Annapolis", 30, "I-97", 2),
        RoadRecord("Baltimore", "Columbia", 15, "US-29", 3),
        RoadRecord("Columbia", "Annapolis", 25, "MD-32", 5),
    ]


def test_load_builds_graph(repository, roads_file):
    graph = repository.load(roads_file)

    assert {town.name for town in graph.vertex_set()} == {
        "Baltimore",
        "Annapolis",
        "Columbia",
    }
    assert len(graph.edge_set()) == 3
    assert graph.get_edge(Town("Annapolis"), Town("Columbia")).distance == 25
    assert graph.shortest_path(Town("Baltimore"), Town("Annapolis")) == [
        "Baltimore via I-97 to Annapolis 30 mi"
    ]


def test_load_uses_configured_path_and_caches(repository, roads_file):
    first = repository.load()
    second = repository.load()

    assert first is second

    repository.clear_cache()
    assert repository.load() is not first


def test_populate_extends_existing_graph(repository, roads_file):
    graph = RoadGraph()
    graph.add_vertex(Town("Ocean City"))

    added = repository.populate(graph, roads_file)

    assert added == 3
    assert len(graph) == 4
    assert graph.contains_vertex(Town("Ocean City"))


def test_whitespace_is_stripped_and_description_keeps_commas(repository, tmp_path):
    path = write(tmp_path, " Cumberland , Hagerstown , 68 , I-68, then I-70 \n")

    [record] = repository.read_records(path)

    assert record.source == "Cumberland"
    assert record.destination == "Hagerstown"
    assert record.distance == 68
    assert record.name == "I-68, then I-70"


def test_header_row_is_skipped_when_configured(tmp_path):
    path = write(tmp_path, "town,town,distance,description\nA,B,1,Main St\n")
    repository = CSVRoadRepository(GraphConfig(data_dir=tmp_path, has_header=True))

    assert [r.name for r in repository.read_records(path)] == ["Main St"]


def test_custom_delimiter(tmp_path):
    path = write(tmp_path, "A;B;4;Route 1\n")
    repository = CSVRoadRepository(GraphConfig(data_dir=tmp_path, delimiter=";"))

    graph = repository.load(path)

    assert graph.get_edge(Town("A"), Town("B")).name == "Route 1"


@pytest.mark.parametrize(
    "line, reason",
    [
        ("A,B,5", "field"),
        ("A,B,five,Main St", "not an integer"),
        ("A,B,-3,Main St", "negative"),
        ("A,A,3,Main St", "itself"),
        (",B,3,Main St", "empty"),
        ("A,B,3,  ", "description is empty"),
    ],
)
def test_malformed_records_raise_with_line_number(repository, tmp_path, line, reason):
    path = write(tmp_path, f"X,Y,1,Good Road\n{line}\n")

    with pytest.raises(GraphLoadError) as exc_info:
        repository.read_records(path)

    error = exc_info.value
    assert error.line_number == 2
    assert error.file_path == str(path)
    assert reason in error.message


def test_missing_file_raises_graph_load_error(repository, tmp_path):
    with pytest.raises(GraphLoadError) as exc_info:
        repository.load(tmp_path / "missing.csv")

    assert isinstance(exc_info.value.cause, OSError)


def test_malformed_file_leaves_graph_untouched(repository, tmp_path):
    path = write(tmp_path, "A,B,1,AB\nB,C,oops,BC\n")
    graph = RoadGraph()

    with pytest.raises(GraphLoadError):
        repository.populate(graph, path)

    assert len(graph) == 0
