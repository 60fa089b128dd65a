"""Tests for the pure graph editing operations."""

import random

import pytest

from pathtrace.core import editor
from pathtrace.core.errors import DuplicateEdgeError, GraphValidationError
from pathtrace.core.graph import Graph, Node
from pathtrace.core.graph_io import sample_graph


def test_duplicate_edge_rejected_and_cost_kept():
    graph = sample_graph()
    with pytest.raises(DuplicateEdgeError):
        editor.add_edge(graph, "S", "A", cost=1)
    assert graph.edge("S", "A").cost == 3


def test_add_edge():
    graph = sample_graph()
    edited = editor.add_edge(graph, "A", "B", cost=2)
    assert edited.edge("A", "B").cost == 2
    assert not graph.has_edge("A", "B")  # input untouched


def test_add_edge_random_cost_in_range():
    edited = editor.add_edge(sample_graph(), "A", "D", rng=random.Random(7))
    assert 1 <= edited.edge("A", "D").cost <= 5


def test_add_edge_unknown_node():
    with pytest.raises(KeyError):
        editor.add_edge(sample_graph(), "S", "Z", cost=1)


def test_add_node_picks_next_free_letter():
    edited = editor.add_node(sample_graph(), 10, 20, heuristic=4)
    node = edited.node("E")
    assert (node.x, node.y, node.heuristic) == (10.0, 20.0, 4.0)
    assert not node.is_start and not node.is_goal


def test_add_node_random_heuristic_in_range():
    edited = editor.add_node(sample_graph(), 0, 0, rng=random.Random(1))
    assert 1 <= edited.node("E").heuristic <= 10


def test_add_node_skips_reserved_ids():
    graph = Graph((Node("A"),), ())
    assert editor.next_node_id(graph) == "B"
    full = Graph(tuple(Node(chr(c)) for c in range(ord("A"), ord("Z") + 1)), ())
    with pytest.raises(GraphValidationError):
        editor.next_node_id(full)


def test_add_node_existing_id_rejected():
    with pytest.raises(GraphValidationError):
        editor.add_node(sample_graph(), 0, 0, heuristic=1, node_id="A")


def test_delete_node_cascades():
    edited = editor.delete_node(sample_graph(), "A")
    assert "A" not in edited
    assert not edited.has_edge("S", "A")
    assert not edited.has_edge("A", "C")
    assert len(edited.edges) == 4


def test_delete_edge():
    edited = editor.delete_edge(sample_graph(), "C", "G")
    assert not edited.has_edge("C", "G")
    with pytest.raises(KeyError):
        editor.delete_edge(edited, "C", "G")


def test_update_heuristic():
    edited = editor.update_heuristic(sample_graph(), "B", 1.5)
    assert edited.node("B").heuristic == 1.5
    with pytest.raises(GraphValidationError):
        editor.update_heuristic(sample_graph(), "B", -1)
    with pytest.raises(GraphValidationError, match="finite"):
        editor.update_heuristic(sample_graph(), "B", float("nan"))


def test_update_edge_cost():
    edited = editor.update_edge_cost(sample_graph(), "S", "B", 1)
    assert edited.edge("S", "B").cost == 1
    with pytest.raises(GraphValidationError):
        editor.update_edge_cost(sample_graph(), "S", "B", 0)
    with pytest.raises(GraphValidationError, match="finite"):
        editor.update_edge_cost(sample_graph(), "S", "B", float("inf"))
    with pytest.raises(KeyError):
        editor.update_edge_cost(sample_graph(), "B", "S", 2)


def test_move_node():
    edited = editor.move_node(sample_graph(), "C", 1, 2)
    assert (edited.node("C").x, edited.node("C").y) == (1.0, 2.0)


def test_set_start_moves_flag():
    edited = editor.set_start(sample_graph(), "A")
    assert edited.start.id == "A"
    assert not edited.node("S").is_start
    assert edited.goal.id == "G"


def test_set_start_on_goal_clears_goal():
    edited = editor.set_start(sample_graph(), "G")
    assert edited.start.id == "G"
    assert edited.goal is None


def test_set_goal_moves_flag():
    edited = editor.set_goal(sample_graph(), "D")
    assert edited.goal.id == "D"
    assert not edited.node("G").is_goal
    edited = editor.set_goal(edited, "S")
    assert edited.goal.id == "S"
    assert edited.start is None


def test_apply_edit_dispatch():
    edited = editor.apply_edit(sample_graph(), "update_edge_cost", source="D", target="G", cost=1)
    assert edited.edge("D", "G").cost == 1
    assert "set_goal" in editor.list_edit_operations()


def test_apply_edit_unknown_op():
    with pytest.raises(KeyError, match="Unknown edit operation"):
        editor.apply_edit(sample_graph(), "rename_node", node_id="A")
