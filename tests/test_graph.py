import pytest

from road_graph.domain.errors import InvalidArgumentError, NullReferenceError
from road_graph.domain.models import Road, Town
from road_graph.graph.road_graph import RoadGraph


@pytest.fixture
def graph():
    g = RoadGraph()
    for name in ("A", "B", "C", "D"):
        g.add_vertex(Town(name))
    return g


def test_add_vertex_twice_returns_true_then_false():
    graph = RoadGraph()
    town = Town("Rockville")

    assert graph.add_vertex(town) is True
    assert graph.contains_vertex(town)
    assert graph.add_vertex(Town("Rockville")) is False
    assert len(graph.vertex_set()) == 1


def test_add_vertex_none_raises():
    with pytest.raises(InvalidArgumentError):
        RoadGraph().add_vertex(None)


def test_contains_vertex_never_raises():
    graph = RoadGraph()
    assert not graph.contains_vertex(None)
    assert not graph.contains_vertex(Town("Nowhere"))


def test_add_edge_is_symmetric(graph):
    road = graph.add_edge(Town("A"), Town("B"), 3, "Road1")

    assert road.name == "Road1"
    assert graph.contains_edge(Town("A"), Town("B"))
    assert graph.contains_edge(Town("B"), Town("A"))
    assert graph.get_edge(Town("B"), Town("A")) == road


def test_add_edge_updates_stored_adjacency(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Road1")

    a = graph.get_vertex("A")
    b = graph.get_vertex("B")
    assert b in a.adjacent_towns
    assert a in b.adjacent_towns
    assert graph.neighbors(Town("A")) == frozenset({b})


def test_add_edge_with_unknown_town_raises(graph):
    with pytest.raises(InvalidArgumentError) as exc_info:
        graph.add_edge(Town("A"), Town("Z"), 1, "Nowhere Rd")

    assert "Z" in str(exc_info.value)
    assert not graph.edge_set()


def test_add_edge_with_none_raises(graph):
    with pytest.raises(NullReferenceError):
        graph.add_edge(None, Town("A"), 1, "x")
    with pytest.raises(NullReferenceError):
        graph.add_edge(Town("A"), None, 1, "x")


def test_add_edge_rejects_self_loop_and_negative_distance(graph):
    with pytest.raises(InvalidArgumentError):
        graph.add_edge(Town("A"), Town("A"), 1, "Loop")
    with pytest.raises(InvalidArgumentError):
        graph.add_edge(Town("A"), Town("B"), -1, "Backwards")
    assert not graph.edge_set()


def test_add_edge_between_connected_towns_replaces_road(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Old Road")
    graph.add_edge(Town("B"), Town("A"), 5, "New Road")

    assert len(graph.edge_set()) == 1
    road = graph.get_edge(Town("A"), Town("B"))
    assert road.name == "New Road"
    assert road.distance == 5


def test_remove_edge_round_trip(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Road1")

    removed = graph.remove_edge(Town("A"), Town("B"), 3, "Road1")

    assert removed == Road(Town("A"), Town("B"), 3, "Road1")
    assert not graph.contains_edge(Town("A"), Town("B"))
    assert graph.get_vertex("B") not in graph.get_vertex("A").adjacent_towns
    assert graph.get_vertex("A") not in graph.get_vertex("B").adjacent_towns


def test_remove_edge_returns_requested_values(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Road1")

    removed = graph.remove_edge(Town("B"), Town("A"), 42, "Other label")

    assert removed.distance == 42
    assert removed.name == "Other label"


def test_remove_edge_defaults_to_stored_values(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Road1")

    removed = graph.remove_edge(Town("A"), Town("B"))

    assert removed.distance == 3
    assert removed.name == "Road1"


def test_remove_missing_edge_returns_none(graph):
    assert graph.remove_edge(Town("A"), Town("B"), 1, "x") is None


def test_remove_edge_checks_towns(graph):
    with pytest.raises(InvalidArgumentError):
        graph.remove_edge(Town("A"), Town("Z"), 1, "x")
    with pytest.raises(NullReferenceError):
        graph.remove_edge(Town("A"), None, 1, "x")


def test_get_edge_returns_none_for_missing_or_none(graph):
    assert graph.get_edge(None, Town("A")) is None
    assert graph.get_edge(Town("A"), Town("B")) is None
    assert graph.get_edge(Town("A"), Town("Z")) is None
    assert not graph.contains_edge(Town("A"), None)


def test_edges_of(graph):
    ab = graph.add_edge(Town("A"), Town("B"), 1, "AB")
    ac = graph.add_edge(Town("A"), Town("C"), 2, "AC")
    graph.add_edge(Town("B"), Town("C"), 3, "BC")

    assert graph.edges_of(Town("A")) == {ab, ac}
    assert graph.edges_of(Town("D")) == set()
    assert graph.edges_of(Town("Z")) == set()


def test_remove_vertex_removes_incident_roads(graph):
    graph.add_edge(Town("A"), Town("B"), 1, "AB")
    graph.add_edge(Town("A"), Town("C"), 2, "AC")
    graph.add_edge(Town("B"), Town("C"), 3, "BC")

    assert graph.remove_vertex(Town("A")) is True

    assert not graph.contains_vertex(Town("A"))
    assert {road.name for road in graph.edge_set()} == {"BC"}
    assert graph.neighbors(Town("B")) == frozenset({Town("C")})
    assert graph.neighbors(Town("C")) == frozenset({Town("B")})


def test_remove_vertex_absent_and_none(graph):
    assert graph.remove_vertex(Town("Z")) is False
    with pytest.raises(InvalidArgumentError):
        graph.remove_vertex(None)


def test_views_are_live(graph):
    towns = graph.vertex_set()
    roads = graph.edge_set()

    graph.add_vertex(Town("E"))
    graph.add_edge(Town("A"), Town("E"), 7, "AE")

    assert Town("E") in towns
    assert Road(Town("E"), Town("A"), 0, "") in roads
    assert len(roads) == 1


def test_get_vertex_returns_stored_instance(graph):
    assert graph.get_vertex("A") is next(t for t in graph.vertex_set() if t.name == "A")
    assert graph.get_vertex("Z") is None
    assert graph.get_vertex("") is None


def test_len_contains_and_repr(graph):
    graph.add_edge(Town("A"), Town("B"), 1, "AB")

    assert len(graph) == 4
    assert Town("C") in graph
    assert repr(graph) == "RoadGraph(towns=4, roads=1)"


def test_remove_edge_with_invalid_distance_leaves_road_in_place(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Road1")

    with pytest.raises(InvalidArgumentError):
        graph.remove_edge(Town("A"), Town("B"), -1, "Road1")

    assert graph.contains_edge(Town("A"), Town("B"))
    assert graph.get_vertex("B") in graph.get_vertex("A").adjacent_towns
    assert graph.get_vertex("A") in graph.get_vertex("B").adjacent_towns


def test_town_from_another_graph_brings_no_neighbors(graph):
    graph.add_edge(Town("A"), Town("B"), 3, "Road1")
    other = RoadGraph()

    assert other.add_vertex(graph.get_vertex("A")) is True

    assert other.neighbors(Town("A")) == frozenset()
    assert other.get_vertex("A").adjacent_towns == set()
    assert other.get_vertex("A") is not graph.get_vertex("A")
    assert other.edges_of(Town("A")) == set()


def test_add_vertex_does_not_adopt_caller_instance():
    graph = RoadGraph()
    town = Town("A")
    graph.add_vertex(town)
    graph.add_vertex(Town("B"))

    graph.add_edge(town, Town("B"), 1, "AB")

    assert town.adjacent_towns == set()
    assert graph.neighbors(town) == frozenset({Town("B")})
