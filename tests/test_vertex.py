"""
Unit tests for the Vertex record.
"""

from vertex import Vertex


def test_new_vertex_has_no_neighbors():
    v = Vertex("a")

    assert v.key == "a"
    assert v.neighbors == []
    assert v.out_degree() == 0
    assert not v.adjacent_key("b")


def test_neighbor_queries():
    v = Vertex(0)
    v.add_neighbor(1, 5)
    v.add_neighbor(2, 0)
    v.add_neighbor(1, 9)

    assert v.get_neighbors() == [1, 2, 1]
    assert v.adjacent_key(2)
    assert v.get_neighbor_weight(1) == 5
    assert v.get_neighbor_weight(2) == 0
    assert v.get_neighbor_weight(3) is None


def test_remove_neighbor_drops_all_matching_entries():
    v = Vertex(0)
    v.add_neighbor(1, 5)
    v.add_neighbor(2, 4)
    v.add_neighbor(1, 9)

    assert v.remove_neighbor(1) == 2
    assert v.neighbors == [(2, 4)]
    assert v.remove_neighbor(1) == 0
