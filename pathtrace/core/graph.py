"""
Graph model — the node/edge collection a search runs over.

Graphs are immutable values.  The editor builds a new Graph for every
change, and the search engine only ever reads one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import networkx as nx

from pathtrace.core.errors import DuplicateEdgeError, GraphValidationError


# ── Nodes & edges ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes
    ----------
    id : str
        Unique identifier.
    x, y : float
        Canvas position.  Display-only, never read by the search.
    heuristic : float
        Estimated remaining cost to the goal (h ≥ 0).
    is_start, is_goal : bool
        Endpoint flags.
    """

    id: str
    x: float = 0.0
    y: float = 0.0
    heuristic: float = 0.0
    is_start: bool = False
    is_goal: bool = False


@dataclass(frozen=True)
class Edge:
    """Directed, positively weighted edge ``source → target``."""

    source: str
    target: str
    cost: float

    @property
    def key(self) -> tuple[str, str]:
        return (self.source, self.target)


# ── Graph ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Graph:
    """
    Immutable node and edge collection.

    Both collections keep their insertion order; the search expands
    outgoing edges in that order, so it decides tie-breaking.

    Construction validates the shape:
      - node ids are unique
      - heuristics are finite and non-negative
      - at most one start and at most one goal node
      - edges reference existing nodes, are not self-loops and have
        strictly positive, finite cost
      - at most one edge per ordered pair (DuplicateEdgeError)
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    _index: dict[str, Node] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

        index: dict[str, Node] = {}
        for node in self.nodes:
            if node.id in index:
                raise GraphValidationError(f"Duplicate node id {node.id!r}.")
            if not math.isfinite(node.heuristic) or node.heuristic < 0:
                raise GraphValidationError(
                    f"Node {node.id!r} has negative or non-finite heuristic "
                    f"{node.heuristic}."
                )
            index[node.id] = node
        object.__setattr__(self, "_index", index)

        for role, flag in (("start", "is_start"), ("goal", "is_goal")):
            flagged = [n.id for n in self.nodes if getattr(n, flag)]
            if len(flagged) > 1:
                raise GraphValidationError(
                    f"More than one {role} node: {flagged}."
                )

        seen: set[tuple[str, str]] = set()
        for edge in self.edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in index:
                    raise GraphValidationError(
                        f"Edge {edge.source!r} -> {edge.target!r} references "
                        f"unknown node {endpoint!r}."
                    )
            if edge.source == edge.target:
                raise GraphValidationError(
                    f"Self-loop on node {edge.source!r} is not allowed."
                )
            if not math.isfinite(edge.cost) or edge.cost <= 0:
                raise GraphValidationError(
                    f"Edge {edge.source!r} -> {edge.target!r} must have a "
                    f"positive finite cost, got {edge.cost}."
                )
            if edge.key in seen:
                raise DuplicateEdgeError(edge.source, edge.target)
            seen.add(edge.key)

    # ── Lookup ─────────────────────────────────────────────────────

    def node(self, node_id: str) -> Node:
        """Return the node with *node_id*. Raises KeyError if missing."""
        if node_id not in self._index:
            raise KeyError(f"Node {node_id!r} not found.")
        return self._index[node_id]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._index

    def edge(self, source: str, target: str) -> Edge:
        """Return the edge ``source → target``. Raises KeyError if missing."""
        for edge in self.edges:
            if edge.key == (source, target):
                return edge
        raise KeyError(f"Edge {source!r} -> {target!r} not found.")

    def has_edge(self, source: str, target: str) -> bool:
        return any(edge.key == (source, target) for edge in self.edges)

    def outgoing(self, node_id: str) -> list[Edge]:
        """Edges leaving *node_id*, in insertion order."""
        return [edge for edge in self.edges if edge.source == node_id]

    @property
    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    @property
    def start(self) -> Node | None:
        return next((n for n in self.nodes if n.is_start), None)

    @property
    def goal(self) -> Node | None:
        return next((n for n in self.nodes if n.is_goal), None)

    # ── Conversion ─────────────────────────────────────────────────

    def to_digraph(self) -> nx.DiGraph:
        """
        Build a NetworkX DiGraph carrying ``heuristic`` on nodes and
        ``cost`` on edges.  Successor order follows edge insertion order.
        """
        g = nx.DiGraph()
        for node in self.nodes:
            g.add_node(node.id, heuristic=node.heuristic)
        for edge in self.edges:
            g.add_edge(edge.source, edge.target, cost=edge.cost)
        return g

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index
