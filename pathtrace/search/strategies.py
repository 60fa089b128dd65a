"""
Strategy classes — one per frontier-selection policy.

Each ranks a frontier entry by its evaluation cost f(n):

    UCS     f(n) = g(n)
    Greedy  f(n) = h(n)
    A*      f(n) = g(n) + h(n)
"""

from __future__ import annotations

from pathtrace.core.step import FrontierEntry
from pathtrace.search.interface import SearchStrategy


def _fmt(value: float) -> str:
    """Render a cost without a trailing ``.0`` for whole numbers."""
    return f"{value:g}"


class UniformCostSearch(SearchStrategy):
    """
    Uniform Cost Search.

    Expands the cheapest path found so far and ignores the heuristic.
    Optimal and complete for strictly positive edge costs.
    """

    key = "ucs"
    name = "Uniform Cost Search"
    formula = "f(n) = g(n)"
    description = "Expands the node with the lowest path cost."
    optimal = True
    complete = True
    time_complexity = "O(b^(C*/ε))"
    space_complexity = "O(b^(C*/ε))"

    def evaluate(self, path_cost: float, heuristic: float) -> float:
        return path_cost

    def describe(self, entry: FrontierEntry) -> str:
        return f"g={_fmt(entry.path_cost)}"


class GreedySearch(SearchStrategy):
    """
    Greedy best-first search.

    Expands the node that looks closest to the goal by heuristic alone.
    Neither optimal nor complete in general.
    """

    key = "greedy"
    name = "Greedy Search"
    formula = "f(n) = h(n)"
    description = "Expands the node with the lowest heuristic estimate."
    optimal = False
    complete = False
    time_complexity = "O(b^m)"
    space_complexity = "O(b^m)"

    def evaluate(self, path_cost: float, heuristic: float) -> float:
        return heuristic

    def describe(self, entry: FrontierEntry) -> str:
        return f"h={_fmt(entry.heuristic)}"


class AStarSearch(SearchStrategy):
    """
    A* search.

    Combines the real path cost with the heuristic estimate.  Optimal
    when the heuristic is admissible and consistent.
    """

    key = "astar"
    name = "A* Search"
    formula = "f(n) = g(n) + h(n)"
    description = "Combines the path cost so far with the heuristic estimate."
    optimal = True
    complete = True
    time_complexity = "O(b^d)"
    space_complexity = "O(b^d)"

    def evaluate(self, path_cost: float, heuristic: float) -> float:
        return path_cost + heuristic

    def describe(self, entry: FrontierEntry) -> str:
        return (
            f"f={_fmt(entry.f_cost)}, g={_fmt(entry.path_cost)}, "
            f"h={_fmt(entry.heuristic)}"
        )
