"""
Algorithm catalogue — resolves the ``algorithm`` selector of a search
request ("ucs", "greedy", "astar") to the frontier-ranking policy that
BestFirstSearch runs with.

Order matters: ``list_algorithms`` and ``algorithm_info`` follow it, so
the comparison table and the API catalogue list UCS, Greedy, A*.
"""

from __future__ import annotations

from typing import Any, Type

from pathtrace.search.interface import SearchStrategy
from pathtrace.search.strategies import AStarSearch, GreedySearch, UniformCostSearch

# ── Built-in policies ──────────────────────────────────────────────

_REGISTRY: dict[str, Type[SearchStrategy]] = {
    cls.key: cls for cls in (UniformCostSearch, GreedySearch, AStarSearch)
}


def register_algorithm(key: str, cls: Type[SearchStrategy]) -> None:
    """
    Make *cls* selectable as *key*, replacing any policy already there.
    Only SearchStrategy subclasses can rank a frontier.
    """
    if not (isinstance(cls, type) and issubclass(cls, SearchStrategy)):
        raise TypeError(f"{cls!r} is not a SearchStrategy subclass.")
    if not key:
        raise ValueError("Algorithm selector must be a non-empty string.")
    _REGISTRY[key] = cls


def get_strategy_class(key: str) -> Type[SearchStrategy]:
    """Policy class behind a selector; KeyError for unknown selectors."""
    if key not in _REGISTRY:
        raise KeyError(
            f"Unknown algorithm {key!r}. "
            f"Registered algorithms: {list(_REGISTRY.keys())}"
        )
    return _REGISTRY[key]


def list_algorithms() -> list[str]:
    return list(_REGISTRY.keys())


def create_strategy(key: str) -> SearchStrategy:
    """Fresh policy instance for one search run."""
    return get_strategy_class(key)()


def algorithm_info() -> list[dict[str, Any]]:
    """Name, f(n) formula and optimality/completeness of every policy."""
    return [create_strategy(key).info() for key in list_algorithms()]
