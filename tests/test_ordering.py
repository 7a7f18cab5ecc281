import networkx as nx
import pytest

from chromatic.algorithms.ordering import DegreeOrderedNodes


def _star_plus_edge():
    # hub has degree 3, x and y degree 2, leaf degree 1
    G = nx.Graph()
    G.add_nodes_from(["leaf", "x", "hub", "y"])
    G.add_edges_from([("hub", "leaf"), ("hub", "x"), ("hub", "y"), ("x", "y")])
    return G


def test_iterates_highest_degree_first():
    ordered = DegreeOrderedNodes.from_graph(_star_plus_edge())
    assert list(ordered) == ["hub", "x", "y", "leaf"]
    assert ordered.degrees() == [3, 2, 1]
    assert ordered.degree_count() == 3
    assert len(ordered) == 4


def test_ties_keep_insertion_order():
    ordered = DegreeOrderedNodes()
    for node in ["c", "a", "b"]:
        ordered.add_node_degree(node, 5)
    ordered.add_node_degree("z", 7)
    assert list(ordered) == ["z", "c", "a", "b"]


def test_cursor_removal_is_seen_by_fresh_iteration():
    ordered = DegreeOrderedNodes.from_graph(_star_plus_edge())
    cursor = ordered.cursor()
    seen = []
    for node in cursor:
        seen.append(node)
        if node in ("hub", "y"):
            cursor.remove()
    assert seen == ["hub", "x", "y", "leaf"]
    assert list(ordered) == ["x", "leaf"]
    assert "hub" not in ordered
    assert len(ordered) == 2
    assert ordered.degree_count() == 2


def test_emptied_structure_is_falsy():
    ordered = DegreeOrderedNodes()
    ordered.add_node_degree("a", 0)
    assert ordered
    cursor = ordered.cursor()
    next(cursor)
    cursor.remove()
    assert not ordered
    assert list(ordered) == []


def test_remove_requires_a_yielded_node():
    ordered = DegreeOrderedNodes()
    ordered.add_node_degree("a", 1)
    cursor = ordered.cursor()
    with pytest.raises(RuntimeError):
        cursor.remove()
    next(cursor)
    cursor.remove()
    with pytest.raises(RuntimeError):
        cursor.remove()


def test_remove_outside_cursor():
    ordered = DegreeOrderedNodes.from_graph(_star_plus_edge())
    assert ordered.remove("x")
    assert not ordered.remove("x")
    assert list(ordered) == ["hub", "y", "leaf"]
