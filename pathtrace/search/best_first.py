"""
BestFirstSearch — the trace-producing search loop shared by UCS, Greedy
and A*, with the frontier ranking delegated to a SearchStrategy.
"""

from __future__ import annotations

import logging
from typing import Iterable

import networkx as nx

from pathtrace.config import DEFAULT_ALGORITHM, MAX_STEPS, MAX_STEPS_CEILING
from pathtrace.core.errors import MissingEndpointError
from pathtrace.core.graph import Edge, Graph, Node
from pathtrace.core.step import FrontierEntry, Step, StepAction, Trace
from pathtrace.search.frontier import Frontier
from pathtrace.search.interface import SearchStrategy
from pathtrace.search.registry import create_strategy

logger = logging.getLogger(__name__)


class BestFirstSearch:
    """
    Runs one best-first search over a Graph and records every step.

    The run owns its frontier, visited set, parent map and explored-edge
    set; none of them outlive ``search()``.  The input graph is never
    modified.
    """

    def __init__(
        self,
        strategy: SearchStrategy,
        max_steps: int = MAX_STEPS,
    ) -> None:
        if not 1 <= max_steps <= MAX_STEPS_CEILING:
            raise ValueError(
                f"max_steps must be between 1 and {MAX_STEPS_CEILING}, "
                f"got {max_steps}."
            )
        self.strategy = strategy
        self.max_steps = max_steps

    # ── Public API ─────────────────────────────────────────────────

    def search(self, graph: Graph) -> Trace:
        """
        Run the search from the graph's start node to its goal node.

        Step budget: the initialize step is step 0, every visit consumes
        one more, and visits stop once ``max_steps`` is reached.  Entries
        popped for an already visited node are dropped without a step.

        Raises MissingEndpointError when the start or goal is missing;
        no partial trace is produced in that case.
        """
        start = graph.start
        if start is None:
            raise MissingEndpointError("start")
        goal = graph.goal
        if goal is None:
            raise MissingEndpointError("goal")

        digraph = self._build_graph(graph)
        strategy = self.strategy

        frontier = Frontier()
        visited: dict[str, None] = {}
        parents: dict[str, str] = {}
        explored: dict[tuple[str, str], None] = {}
        steps: list[Step] = []

        # 1. Initialize
        root = strategy.make_entry(start.id, 0.0, start.heuristic)
        frontier.push(root)
        steps.append(
            Step(
                index=0,
                action=StepAction.INITIALIZE,
                current_node=start.id,
                frontier=frontier.snapshot(),
                visited=(),
                description=f"Initialize the frontier with node {start.id}",
                current_path=(start.id,),
                explored_edges=(),
                path_cost=root.path_cost,
                heuristic=root.heuristic,
                total_cost=root.f_cost,
            )
        )

        # 2. Select, visit, expand
        counter = 1
        while frontier and counter < self.max_steps:
            current = frontier.pop_min()
            if current.node_id in visited:
                logger.debug("Dropping stale frontier entry for %s", current.node_id)
                continue

            visited[current.node_id] = None
            current_path = self._reconstruct_path(current.node_id, parents)
            steps.append(
                Step(
                    index=counter,
                    action=StepAction.VISIT,
                    current_node=current.node_id,
                    frontier=frontier.snapshot(),
                    visited=tuple(visited),
                    description=(
                        f"Visit node {current.node_id} "
                        f"({strategy.describe(current)})"
                    ),
                    current_path=current_path,
                    explored_edges=tuple(explored),
                    path_cost=current.path_cost,
                    heuristic=current.heuristic,
                    total_cost=current.f_cost,
                )
            )
            logger.debug(
                "Step %d: visit %s g=%.4g h=%.4g f=%.4g",
                counter,
                current.node_id,
                current.path_cost,
                current.heuristic,
                current.f_cost,
            )

            if current.node_id == goal.id:
                return self._found(
                    counter + 1, current, current_path, visited, explored, steps
                )

            self._expand(digraph, current, frontier, visited, parents, explored)
            counter += 1

        # 3. Frontier or step budget exhausted
        budget_exhausted = bool(frontier)
        if budget_exhausted:
            description = (
                f"Step budget of {self.max_steps} exhausted before reaching "
                f"goal {goal.id}"
            )
            logger.warning(
                "%s: step budget of %d exhausted with %d frontier entries left",
                strategy.key,
                self.max_steps,
                len(frontier),
            )
        else:
            description = f"No path to goal {goal.id} found"
            logger.info("%s: frontier exhausted, goal %s unreachable", strategy.key, goal.id)

        steps.append(
            Step(
                index=counter,
                action=StepAction.FAILED,
                current_node=None,
                frontier=frontier.snapshot(),
                visited=tuple(visited),
                description=description,
                current_path=(),
                explored_edges=tuple(explored),
                final_path=(),
            )
        )
        return Trace(strategy.key, steps, budget_exhausted=budget_exhausted)

    # ── Expansion ──────────────────────────────────────────────────

    def _expand(
        self,
        digraph: nx.DiGraph,
        current: FrontierEntry,
        frontier: Frontier,
        visited: dict[str, None],
        parents: dict[str, str],
        explored: dict[tuple[str, str], None],
    ) -> None:
        """
        Push or relax every unvisited successor of *current*.

        A queued neighbour is replaced only by a strictly cheaper path;
        its parent moves with it.
        """
        for neighbor in digraph.successors(current.node_id):
            if neighbor in visited:
                continue
            new_cost = current.path_cost + digraph[current.node_id][neighbor]["cost"]
            candidate = self.strategy.make_entry(
                neighbor,
                new_cost,
                digraph.nodes[neighbor]["heuristic"],
                parent=current.node_id,
            )
            if frontier.relax(candidate):
                parents[neighbor] = current.node_id
            explored[(current.node_id, neighbor)] = None

    # ── Termination ────────────────────────────────────────────────

    def _found(
        self,
        index: int,
        goal_entry: FrontierEntry,
        final_path: tuple[str, ...],
        visited: dict[str, None],
        explored: dict[tuple[str, str], None],
        steps: list[Step],
    ) -> Trace:
        route = " → ".join(final_path)
        steps.append(
            Step(
                index=index,
                action=StepAction.FOUND,
                current_node=goal_entry.node_id,
                frontier=(),
                visited=tuple(visited),
                description=(
                    f"Goal found! Path: {route} "
                    f"(cost: {goal_entry.path_cost:g})"
                ),
                current_path=final_path,
                explored_edges=tuple(explored),
                path_cost=goal_entry.path_cost,
                final_path=final_path,
            )
        )
        logger.info(
            "%s: reached %s in %d steps, path=%s cost=%g",
            self.strategy.key,
            goal_entry.node_id,
            len(steps),
            route,
            goal_entry.path_cost,
        )
        return Trace(self.strategy.key, steps)

    # ── Helpers ────────────────────────────────────────────────────

    @staticmethod
    def _reconstruct_path(node_id: str, parents: dict[str, str]) -> tuple[str, ...]:
        """Walk the parent map back to the start and return start → node."""
        path: list[str] = []
        current: str | None = node_id
        while current is not None:
            path.append(current)
            current = parents.get(current)
        path.reverse()
        return tuple(path)

    @staticmethod
    def _build_graph(graph: Graph) -> nx.DiGraph:
        """Build the adjacency the loop expands over."""
        return graph.to_digraph()


def run(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    algorithm: str = DEFAULT_ALGORITHM,
    max_steps: int = MAX_STEPS,
) -> Trace:
    """
    Functional entry point: search ``nodes``/``edges`` with *algorithm*
    (``"ucs"``, ``"greedy"`` or ``"astar"``) and return the trace.
    """
    graph = Graph(tuple(nodes), tuple(edges))
    return BestFirstSearch(create_strategy(algorithm), max_steps).search(graph)
