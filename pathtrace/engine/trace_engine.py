"""
TraceEngine — Top-level orchestrator.

Accepts graph JSON, builds the Graph model, runs the selected search
strategy and serializes the resulting trace.  Can also run every
registered algorithm on the same graph and compare them against the
true shortest path.
"""

from __future__ import annotations

import logging
from typing import Any

import networkx as nx

from pathtrace.config import DEFAULT_ALGORITHM, MAX_STEPS
from pathtrace.core.errors import MissingEndpointError
from pathtrace.core.graph import Graph
from pathtrace.core.graph_io import graph_from_dict
from pathtrace.core.step import Trace
from pathtrace.search.best_first import BestFirstSearch
from pathtrace.search.registry import create_strategy, list_algorithms

logger = logging.getLogger(__name__)

# Float tolerance when comparing a path cost to the Dijkstra optimum
_COST_TOLERANCE = 1e-9


class TraceEngine:
    """
    Main entry-point for search traces.

    Usage
    -----
    >>> engine = TraceEngine()
    >>> result = engine.run(graph_json, "astar")
    >>> print(result["final_path"])
    """

    def __init__(self, max_steps: int = MAX_STEPS) -> None:
        self.max_steps = max_steps

    # ── Public API ─────────────────────────────────────────────────

    def trace(
        self,
        graph_json: dict[str, Any] | Graph,
        algorithm: str = DEFAULT_ALGORITHM,
        max_steps: int | None = None,
    ) -> Trace:
        """
        Run *algorithm* on the graph and return the raw Trace.

        Raises KeyError for an unknown algorithm, GraphValidationError for
        a malformed graph and MissingEndpointError without start/goal.
        """
        graph = self._parse_graph(graph_json)
        search = BestFirstSearch(
            create_strategy(algorithm),
            max_steps if max_steps is not None else self.max_steps,
        )
        return search.search(graph)

    def run(
        self,
        graph_json: dict[str, Any] | Graph,
        algorithm: str = DEFAULT_ALGORITHM,
        max_steps: int | None = None,
    ) -> dict[str, Any]:
        """
        Parse a graph document, search it, and return the serialized
        trace plus summary metadata.

        Returns
        -------
        dict with keys: algorithm, steps, step_count, found, final_path,
        total_cost, budget_exhausted, node_count, edge_count
        """
        graph = self._parse_graph(graph_json)
        trace = self.trace(graph, algorithm, max_steps)

        return {
            "algorithm": trace.algorithm,
            "steps": trace.to_dicts(),
            "step_count": len(trace),
            "found": trace.found,
            "final_path": list(trace.final_path),
            "total_cost": trace.total_cost,
            "budget_exhausted": trace.budget_exhausted,
            "node_count": len(graph.nodes),
            "edge_count": len(graph.edges),
        }

    def compare(
        self,
        graph_json: dict[str, Any] | Graph,
        max_steps: int | None = None,
    ) -> dict[str, Any]:
        """
        Run every registered algorithm on the same graph.

        Each result is checked against the Dijkstra shortest-path cost so
        the caller can see which policies returned an optimal path.

        Returns
        -------
        dict with keys: optimal_cost, results (one entry per algorithm with
        algorithm, found, final_path, total_cost, step_count,
        visited_count, budget_exhausted, optimal)
        """
        graph = self._parse_graph(graph_json)
        optimal_cost = self.shortest_path_cost(graph)

        results: list[dict[str, Any]] = []
        for key in list_algorithms():
            trace = self.trace(graph, key, max_steps)
            optimal = (
                trace.found
                and optimal_cost is not None
                and abs(trace.total_cost - optimal_cost) <= _COST_TOLERANCE
            )
            results.append({
                "algorithm": key,
                "found": trace.found,
                "final_path": list(trace.final_path),
                "total_cost": trace.total_cost,
                "step_count": len(trace),
                "visited_count": len(trace.visited),
                "budget_exhausted": trace.budget_exhausted,
                "optimal": optimal,
            })

        logger.info(
            "Compared %d algorithms, optimal cost=%s",
            len(results),
            optimal_cost,
        )
        return {"optimal_cost": optimal_cost, "results": results}

    @staticmethod
    def shortest_path_cost(graph: Graph) -> float | None:
        """
        Reference start → goal cost via NetworkX Dijkstra, or None when
        the goal is unreachable.
        """
        start, goal = graph.start, graph.goal
        if start is None:
            raise MissingEndpointError("start")
        if goal is None:
            raise MissingEndpointError("goal")
        try:
            return float(
                nx.dijkstra_path_length(
                    graph.to_digraph(), start.id, goal.id, weight="cost"
                )
            )
        except nx.NetworkXNoPath:
            return None

    # ── JSON parsing ───────────────────────────────────────────────

    @staticmethod
    def _parse_graph(graph_json: dict[str, Any] | Graph) -> Graph:
        """Accept either an already built Graph or its document form."""
        if isinstance(graph_json, Graph):
            return graph_json
        graph = graph_from_dict(graph_json)
        logger.info(
            "Parsed graph: %d nodes, %d edges",
            len(graph.nodes),
            len(graph.edges),
        )
        return graph
