"""Tests for the Graph model and the JSON codec."""

import json
import os
import pathlib

import pytest

from pathtrace.config import SAMPLE_GRAPH_PATH
from pathtrace.core import graph_io
from pathtrace.core.errors import DuplicateEdgeError, GraphValidationError
from pathtrace.core.graph import Edge, Graph, Node
from pathtrace.core.graph_io import (
    dump_graph,
    graph_from_dict,
    graph_from_json,
    graph_to_dict,
    load_graph,
    sample_graph,
)

SAMPLE_PATH = os.path.join(
    os.path.dirname(__file__), "..", "pathtrace", "samples", "sample_graph.json"
)


def _load_sample() -> dict:
    with open(SAMPLE_PATH) as f:
        return json.load(f)


# ── Graph model ────────────────────────────────────────────────────

def test_lookup_helpers():
    graph = graph_from_dict(_load_sample())
    assert graph.start.id == "S"
    assert graph.goal.id == "G"
    assert graph.node("C").heuristic == 4
    assert graph.edge("A", "C").cost == 4
    assert graph.has_edge("S", "A")
    assert not graph.has_edge("A", "S")
    assert [e.target for e in graph.outgoing("S")] == ["A", "B"]
    assert "D" in graph
    assert len(graph) == 6


def test_missing_lookups_raise_key_error():
    graph = sample_graph()
    with pytest.raises(KeyError):
        graph.node("Z")
    with pytest.raises(KeyError):
        graph.edge("G", "S")


def test_to_digraph_keeps_edge_order():
    g = sample_graph().to_digraph()
    assert list(g.successors("S")) == ["A", "B"]
    assert g["S"]["B"]["cost"] == 5
    assert g.nodes["S"]["heuristic"] == 10


def test_duplicate_node_id_rejected():
    with pytest.raises(GraphValidationError, match="Duplicate node"):
        Graph((Node("A"), Node("A")), ())


def test_negative_heuristic_rejected():
    with pytest.raises(GraphValidationError, match="non-finite heuristic"):
        Graph((Node("A", heuristic=-1),), ())


def test_two_start_nodes_rejected():
    with pytest.raises(GraphValidationError, match="start"):
        Graph((Node("A", is_start=True), Node("B", is_start=True)), ())


def test_dangling_edge_rejected():
    with pytest.raises(GraphValidationError, match="unknown node"):
        Graph((Node("A"),), (Edge("A", "B", 1),))


@pytest.mark.parametrize("cost", [0, -2])
def test_non_positive_cost_rejected(cost):
    with pytest.raises(GraphValidationError, match="positive finite cost"):
        Graph((Node("A"), Node("B")), (Edge("A", "B", cost),))


def test_self_loop_rejected():
    with pytest.raises(GraphValidationError, match="Self-loop"):
        Graph((Node("A"),), (Edge("A", "A", 1),))


def test_duplicate_edge_rejected():
    with pytest.raises(DuplicateEdgeError):
        Graph((Node("A"), Node("B")), (Edge("A", "B", 1), Edge("A", "B", 2)))


def test_reverse_edge_is_not_a_duplicate():
    graph = Graph((Node("A"), Node("B")), (Edge("A", "B", 1), Edge("B", "A", 2)))
    assert len(graph.edges) == 2


# ── Codec ──────────────────────────────────────────────────────────

def test_round_trip_sample():
    data = _load_sample()
    assert graph_from_dict(graph_to_dict(graph_from_dict(data))) == graph_from_dict(data)


def test_to_dict_format():
    data = graph_to_dict(sample_graph())
    assert data["nodes"][0] == {
        "id": "S", "x": 100.0, "y": 200.0, "heuristic": 10.0, "isStart": True,
    }
    assert "isStart" not in data["nodes"][1]
    assert data["edges"][0] == {"from": "S", "to": "A", "cost": 3.0}


def test_source_target_keys_accepted():
    graph = graph_from_dict({
        "nodes": [{"id": "a"}, {"id": "b"}],
        "edges": [{"source": "a", "target": "b", "cost": 2}],
    })
    assert graph.edge("a", "b").cost == 2


def test_missing_lists_rejected():
    with pytest.raises(GraphValidationError, match="nodes"):
        graph_from_dict({"edges": []})
    with pytest.raises(GraphValidationError):
        graph_from_dict([])


def test_bad_entries_rejected():
    with pytest.raises(GraphValidationError, match="id"):
        graph_from_dict({"nodes": [{"x": 1}], "edges": []})
    with pytest.raises(GraphValidationError, match="endpoints"):
        graph_from_dict({"nodes": [{"id": "a"}], "edges": [{"from": "a", "cost": 1}]})
    with pytest.raises(GraphValidationError, match="no cost"):
        graph_from_dict({
            "nodes": [{"id": "a"}, {"id": "b"}],
            "edges": [{"from": "a", "to": "b"}],
        })
    with pytest.raises(GraphValidationError, match="number"):
        graph_from_dict({"nodes": [{"id": "a", "heuristic": "far"}], "edges": []})
    with pytest.raises(GraphValidationError, match="number"):
        graph_from_dict({"nodes": [{"id": "a", "x": True}], "edges": []})


def test_invalid_json_rejected():
    with pytest.raises(GraphValidationError, match="Invalid graph JSON"):
        graph_from_json("{nodes: ")


def test_dump_and_load(tmp_path):
    path = tmp_path / "graph.json"
    dump_graph(sample_graph(), path)
    assert load_graph(path) == sample_graph()


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_non_finite_values_rejected(bad):
    with pytest.raises(GraphValidationError, match="non-finite heuristic"):
        Graph((Node("A", heuristic=bad),), ())
    with pytest.raises(GraphValidationError, match="positive finite cost"):
        Graph((Node("A"), Node("B")), (Edge("A", "B", bad),))


@pytest.mark.parametrize("bad", ["nan", "inf", "-Infinity"])
def test_non_finite_document_fields_rejected(bad):
    with pytest.raises(GraphValidationError, match="finite"):
        graph_from_dict({"nodes": [{"id": "a", "heuristic": bad}], "edges": []})
    with pytest.raises(GraphValidationError, match="finite"):
        graph_from_dict({
            "nodes": [{"id": "a"}, {"id": "b"}],
            "edges": [{"from": "a", "to": "b", "cost": bad}],
        })


def test_sample_graph_ships_inside_package():
    package_dir = pathlib.Path(graph_io.__file__).resolve().parent.parent
    assert package_dir in SAMPLE_GRAPH_PATH.resolve().parents
    assert SAMPLE_GRAPH_PATH.is_file()
    assert sample_graph() == graph_from_dict(_load_sample())
