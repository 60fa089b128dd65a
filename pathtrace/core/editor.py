"""
Graph editor — pure transformations behind the editing UI.

Every operation takes a Graph and returns a new one; the input is never
touched.  The caller decides whether and when to re-run the search on
the result.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import Any, Callable

from pathtrace.config import (
    NEW_EDGE_COST_RANGE,
    NEW_NODE_HEURISTIC_RANGE,
    NODE_ID_ALPHABET,
    RESERVED_NODE_IDS,
)
from pathtrace.core.errors import DuplicateEdgeError, GraphValidationError
from pathtrace.core.graph import Edge, Graph, Node

logger = logging.getLogger(__name__)


# ── Nodes ──────────────────────────────────────────────────────────

def next_node_id(graph: Graph) -> str:
    """
    First letter of the alphabet that is neither used nor reserved.

    Raises GraphValidationError when every candidate is taken.
    """
    for candidate in NODE_ID_ALPHABET:
        if candidate not in graph and candidate not in RESERVED_NODE_IDS:
            return candidate
    raise GraphValidationError("No free node id left; name the node explicitly.")


def add_node(
    graph: Graph,
    x: float,
    y: float,
    heuristic: float | None = None,
    node_id: str | None = None,
    rng: random.Random | None = None,
) -> Graph:
    """
    Add a node at (x, y).

    Without *node_id* the next free letter is used; without *heuristic*
    a random integer from NEW_NODE_HEURISTIC_RANGE is drawn.
    """
    node_id = node_id if node_id is not None else next_node_id(graph)
    if node_id in graph:
        raise GraphValidationError(f"Node {node_id!r} already exists.")
    if heuristic is None:
        heuristic = (rng or random).randint(*NEW_NODE_HEURISTIC_RANGE)

    node = Node(id=node_id, x=float(x), y=float(y), heuristic=float(heuristic))
    logger.debug("add_node %s at (%g, %g) h=%g", node_id, node.x, node.y, node.heuristic)
    return Graph(graph.nodes + (node,), graph.edges)


def delete_node(graph: Graph, node_id: str) -> Graph:
    """Remove *node_id* and every edge touching it."""
    graph.node(node_id)
    nodes = tuple(n for n in graph.nodes if n.id != node_id)
    edges = tuple(
        e for e in graph.edges if e.source != node_id and e.target != node_id
    )
    return Graph(nodes, edges)


def move_node(graph: Graph, node_id: str, x: float, y: float) -> Graph:
    return _replace_node(graph, node_id, x=float(x), y=float(y))


def update_heuristic(graph: Graph, node_id: str, heuristic: float) -> Graph:
    """Set h(node).  Negative values are rejected."""
    if not math.isfinite(heuristic) or heuristic < 0:
        raise GraphValidationError(
            f"Heuristic must be finite and non-negative, got {heuristic}."
        )
    return _replace_node(graph, node_id, heuristic=float(heuristic))


def set_start(graph: Graph, node_id: str) -> Graph:
    """Make *node_id* the only start node; it stops being the goal."""
    graph.node(node_id)
    nodes = tuple(
        replace(
            n,
            is_start=n.id == node_id,
            is_goal=n.is_goal and n.id != node_id,
        )
        for n in graph.nodes
    )
    return Graph(nodes, graph.edges)


def set_goal(graph: Graph, node_id: str) -> Graph:
    """Make *node_id* the only goal node; it stops being the start."""
    graph.node(node_id)
    nodes = tuple(
        replace(
            n,
            is_goal=n.id == node_id,
            is_start=n.is_start and n.id != node_id,
        )
        for n in graph.nodes
    )
    return Graph(nodes, graph.edges)


# ── Edges ──────────────────────────────────────────────────────────

def add_edge(
    graph: Graph,
    source: str,
    target: str,
    cost: float | None = None,
    rng: random.Random | None = None,
) -> Graph:
    """
    Add the directed edge ``source → target``.

    Raises DuplicateEdgeError when that ordered pair already has an edge
    (the existing edge keeps its cost), KeyError for unknown endpoints.
    Without *cost* a random integer from NEW_EDGE_COST_RANGE is drawn.
    """
    graph.node(source)
    graph.node(target)
    if graph.has_edge(source, target):
        raise DuplicateEdgeError(source, target)
    if cost is None:
        cost = (rng or random).randint(*NEW_EDGE_COST_RANGE)

    edge = Edge(source, target, float(cost))
    logger.debug("add_edge %s -> %s cost=%g", source, target, edge.cost)
    return Graph(graph.nodes, graph.edges + (edge,))


def delete_edge(graph: Graph, source: str, target: str) -> Graph:
    graph.edge(source, target)
    edges = tuple(e for e in graph.edges if e.key != (source, target))
    return Graph(graph.nodes, edges)


def update_edge_cost(graph: Graph, source: str, target: str, cost: float) -> Graph:
    """Set the cost of ``source → target``.  Must be strictly positive."""
    if not math.isfinite(cost) or cost <= 0:
        raise GraphValidationError(f"Edge cost must be positive and finite, got {cost}.")
    graph.edge(source, target)
    edges = tuple(
        replace(e, cost=float(cost)) if e.key == (source, target) else e
        for e in graph.edges
    )
    return Graph(graph.nodes, edges)


# ── Dispatch ───────────────────────────────────────────────────────

_OPERATIONS: dict[str, Callable[..., Graph]] = {
    "add_node": add_node,
    "delete_node": delete_node,
    "move_node": move_node,
    "update_heuristic": update_heuristic,
    "set_start": set_start,
    "set_goal": set_goal,
    "add_edge": add_edge,
    "delete_edge": delete_edge,
    "update_edge_cost": update_edge_cost,
}


def list_edit_operations() -> list[str]:
    return list(_OPERATIONS.keys())


def apply_edit(graph: Graph, op: str, **params: Any) -> Graph:
    """
    Apply the editor operation named *op* with keyword *params*.

    Raises KeyError for an unknown operation, TypeError when *params*
    do not match the operation's signature.
    """
    if op not in _OPERATIONS:
        raise KeyError(
            f"Unknown edit operation {op!r}. "
            f"Available operations: {list_edit_operations()}"
        )
    result = _OPERATIONS[op](graph, **params)
    logger.info(
        "Applied %s: %d nodes, %d edges", op, len(result.nodes), len(result.edges)
    )
    return result


# ── Helpers ────────────────────────────────────────────────────────

def _replace_node(graph: Graph, node_id: str, **changes: Any) -> Graph:
    graph.node(node_id)
    nodes = tuple(
        replace(n, **changes) if n.id == node_id else n for n in graph.nodes
    )
    return Graph(nodes, graph.edges)
