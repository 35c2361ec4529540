import sys

import pytest

from city_astar.domain.errors import (
    DuplicateNodeError,
    GraphClosedError,
    InvalidNodeError,
    ResourceExhaustedError,
)
from city_astar.domain.graph import Graph


def _square() -> Graph:
    g = Graph(4)
    for i, (lat, lon) in enumerate([(0, 0), (1, 0), (1, 1), (0, 1)]):
        g.add_node(i, f"c{i}", lat, lon)
    return g


def test_add_node_populates_slot_with_clean_state():
    g = Graph.create(2)
    n = g.add_node(1, "Pittsburgh", 40.44, -79.99)
    assert g.node(1) is n
    assert (n.lat, n.lon, n.name) == (40.44, -79.99, "Pittsburgh")
    assert n.neighbors == []
    assert (n.g_cost, n.h_cost, n.f_cost, n.parent) == (0.0, 0.0, 0.0, None)
    assert 1 in g and 0 not in g
    assert len(g) == g.node_count == 2


def test_coordinates_are_immutable():
    g = _square()
    with pytest.raises(AttributeError):
        g.node(0).coord.lat = 5.0


@pytest.mark.parametrize("bad", [-1, 4, 100, True, "1", 1.0])
def test_add_node_rejects_invalid_ids(bad):
    g = Graph(4)
    with pytest.raises(InvalidNodeError):
        g.add_node(bad, "x", 0.0, 0.0)


def test_invalid_node_error_is_a_value_error():
    with pytest.raises(ValueError):
        Graph(1).add_node(3, "x", 0.0, 0.0)


def test_add_node_twice_is_rejected():
    g = Graph(1)
    g.add_node(0, "a", 0.0, 0.0)
    with pytest.raises(DuplicateNodeError):
        g.add_node(0, "b", 1.0, 1.0)
    assert g.node(0).name == "a"


@pytest.mark.parametrize("count", [-1, 2.5, "3", None])
def test_bad_node_count(count):
    with pytest.raises(InvalidNodeError):
        Graph(count)


def test_allocation_failure_is_propagated_as_resource_exhaustion():
    with pytest.raises(ResourceExhaustedError) as ei:
        Graph(sys.maxsize)
    assert isinstance(ei.value, MemoryError)


def test_add_edge_is_symmetric_and_keeps_insertion_order():
    g = _square()
    g.add_edge(0, 1)
    g.add_edge(0, 3)
    g.add_edge(2, 0)
    assert g.neighbors(0) == [1, 3, 2]
    assert g.neighbors(1) == [0]
    assert g.neighbors(3) == [0]
    assert g.neighbors(2) == [0]


def test_add_edge_does_not_deduplicate():
    g = _square()
    g.add_edge(0, 1)
    g.add_edge(0, 1)
    assert g.neighbors(0) == [1, 1]
    assert g.neighbors(1) == [0, 0]


def test_add_edge_rejects_dangling_endpoints():
    g = Graph(3)
    g.add_node(0, "a", 0.0, 0.0)
    with pytest.raises(InvalidNodeError):
        g.add_edge(0, 1)  # slot 1 never populated
    with pytest.raises(InvalidNodeError):
        g.add_edge(0, 7)
    assert g.neighbors(0) == []


def test_neighbors_is_restartable_and_detached():
    g = _square()
    g.add_edge(0, 1)
    first = g.neighbors(0)
    first.append(99)
    assert g.neighbors(0) == [1]
    assert list(g.neighbors(0)) == list(g.neighbors(0))


def test_iter_yields_populated_nodes_in_id_order():
    g = Graph(4)
    g.add_node(3, "d", 0.0, 0.0)
    g.add_node(1, "b", 0.0, 0.0)
    assert [n.id for n in g] == [1, 3]


def test_reset_search_state_and_path_to():
    g = _square()
    g.node(1).parent = 0
    g.node(2).parent = 1
    g.node(2).g_cost = 2.0
    assert g.path_to(2) == [0, 1, 2]
    assert g.path_to(0) == [0]

    g.reset_search_state()
    assert all(n.parent is None and n.g_cost == 0.0 for n in g)
    assert g.path_to(2) == [2]


def test_path_to_detects_parent_cycle():
    g = _square()
    g.node(0).parent = 1
    g.node(1).parent = 0
    with pytest.raises(RuntimeError):
        g.path_to(1)


def test_close_releases_nodes():
    g = _square()
    g.close()
    assert g.closed
    assert 0 not in g
    with pytest.raises(GraphClosedError):
        g.node(0)
    with pytest.raises(GraphClosedError):
        g.add_node(0, "a", 0.0, 0.0)


def test_context_manager_tears_down():
    with Graph(2) as g:
        g.add_node(0, "a", 0.0, 0.0)
        g.add_node(1, "b", 0.0, 1.0)
        g.add_edge(0, 1)
    assert g.closed
    with pytest.raises(GraphClosedError):
        g.neighbors(0)


def test_self_loops_are_rejected():
    g = _square()
    with pytest.raises(InvalidNodeError):
        g.add_edge(2, 2)
    assert g.neighbors(2) == []


@pytest.mark.parametrize(
    "lat,lon", [(float("nan"), 0.0), (0.0, float("inf")), (float("-inf"), 1.0)]
)
def test_non_finite_coordinates_are_rejected(lat, lon):
    g = Graph(1)
    with pytest.raises(InvalidNodeError):
        g.add_node(0, "nowhere", lat, lon)
    assert 0 not in g
