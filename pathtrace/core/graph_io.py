"""
Graph codec — converts between the Graph model and its JSON document form.

Document format (import / export):
{
  "nodes": [
    {"id": "S", "x": 100, "y": 200, "heuristic": 10, "isStart": true},
    {"id": "G", "x": 500, "y": 200, "heuristic": 0, "isGoal": true},
    ...
  ],
  "edges": [
    {"from": "S", "to": "G", "cost": 3},
    ...
  ]
}

Edges may also use React Flow style ``source`` / ``target`` keys.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from pathtrace.config import SAMPLE_GRAPH_PATH
from pathtrace.core.errors import GraphValidationError
from pathtrace.core.graph import Edge, Graph, Node

logger = logging.getLogger(__name__)


# ── dict <-> Graph ─────────────────────────────────────────────────

def graph_from_dict(data: dict[str, Any]) -> Graph:
    """
    Build a validated Graph from a ``{"nodes": [...], "edges": [...]}``
    document.  Raises GraphValidationError on malformed input.
    """
    if not isinstance(data, dict):
        raise GraphValidationError("Graph document must be a JSON object.")
    for key in ("nodes", "edges"):
        if not isinstance(data.get(key), list):
            raise GraphValidationError(f"Graph document needs a {key!r} list.")

    nodes = [_parse_node(raw) for raw in data["nodes"]]
    edges = [_parse_edge(raw) for raw in data["edges"]]
    graph = Graph(tuple(nodes), tuple(edges))

    logger.debug("Parsed graph: %d nodes, %d edges", len(nodes), len(edges))
    return graph


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """Serialize *graph* to the document form."""
    nodes: list[dict[str, Any]] = []
    for node in graph.nodes:
        raw: dict[str, Any] = {
            "id": node.id,
            "x": node.x,
            "y": node.y,
            "heuristic": node.heuristic,
        }
        if node.is_start:
            raw["isStart"] = True
        if node.is_goal:
            raw["isGoal"] = True
        nodes.append(raw)

    edges = [
        {"from": edge.source, "to": edge.target, "cost": edge.cost}
        for edge in graph.edges
    ]
    return {"nodes": nodes, "edges": edges}


# ── JSON text / files ──────────────────────────────────────────────

def graph_from_json(text: str) -> Graph:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphValidationError(f"Invalid graph JSON: {exc}") from exc
    return graph_from_dict(data)


def graph_to_json(graph: Graph, indent: int | None = 2) -> str:
    return json.dumps(graph_to_dict(graph), indent=indent)


def load_graph(path: str | Path) -> Graph:
    """Read a graph document from *path*."""
    with open(path, encoding="utf-8") as f:
        return graph_from_json(f.read())


def dump_graph(graph: Graph, path: str | Path) -> None:
    """Write *graph* to *path* as an indented JSON document."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(graph_to_json(graph))
        f.write("\n")


def sample_graph() -> Graph:
    """The bundled six-node example graph (S → … → G)."""
    return load_graph(SAMPLE_GRAPH_PATH)


# ── Parsing helpers ────────────────────────────────────────────────

def _parse_node(raw: Any) -> Node:
    if not isinstance(raw, dict) or "id" not in raw:
        raise GraphValidationError(f"Node entry must be an object with an id: {raw!r}")
    return Node(
        id=str(raw["id"]),
        x=_number(raw, "x", 0.0),
        y=_number(raw, "y", 0.0),
        heuristic=_number(raw, "heuristic", 0.0),
        is_start=bool(raw.get("isStart", False)),
        is_goal=bool(raw.get("isGoal", False)),
    )


def _parse_edge(raw: Any) -> Edge:
    if not isinstance(raw, dict):
        raise GraphValidationError(f"Edge entry must be an object: {raw!r}")
    source = raw.get("from", raw.get("source"))
    target = raw.get("to", raw.get("target"))
    if source is None or target is None:
        raise GraphValidationError(f"Edge entry needs from/to endpoints: {raw!r}")
    if "cost" not in raw:
        raise GraphValidationError(f"Edge {source!r} -> {target!r} has no cost.")
    return Edge(str(source), str(target), _number(raw, "cost", 0.0))


def _number(raw: dict[str, Any], key: str, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool):
        raise GraphValidationError(f"Field {key!r} must be a number, got {value!r}.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise GraphValidationError(
            f"Field {key!r} must be a number, got {value!r}."
        ) from exc
    if not math.isfinite(number):
        raise GraphValidationError(f"Field {key!r} must be finite, got {value!r}.")
    return number
