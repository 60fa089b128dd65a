"""
Search strategy interface — abstract base for frontier-selection policies.

Design: Strategy pattern.  BestFirstSearch owns the loop (selection,
expansion, relaxation, path reconstruction) and asks the configured
SearchStrategy only how to rank a frontier entry, so a new policy is
one small subclass plus a registry entry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pathtrace.core.step import FrontierEntry


class SearchStrategy(ABC):
    """
    Maps (path cost g, heuristic h) to the evaluation cost f used to rank
    the frontier, and carries the descriptive metadata shown to users.
    """

    key: str = ""
    name: str = ""
    formula: str = ""
    description: str = ""
    optimal: bool = False
    complete: bool = False
    time_complexity: str = ""
    space_complexity: str = ""

    @abstractmethod
    def evaluate(self, path_cost: float, heuristic: float) -> float:
        """Return f for a frontier entry with cost *path_cost* and *heuristic*."""
        ...

    @abstractmethod
    def describe(self, entry: FrontierEntry) -> str:
        """Return the cost fragment shown when *entry* is visited."""
        ...

    def make_entry(
        self,
        node_id: str,
        path_cost: float,
        heuristic: float,
        parent: str | None = None,
    ) -> FrontierEntry:
        return FrontierEntry(
            node_id=node_id,
            path_cost=path_cost,
            heuristic=heuristic,
            f_cost=self.evaluate(path_cost, heuristic),
            parent=parent,
        )

    def info(self) -> dict[str, Any]:
        """Catalogue entry for this algorithm."""
        return {
            "key": self.key,
            "name": self.name,
            "formula": self.formula,
            "description": self.description,
            "optimal": self.optimal,
            "complete": self.complete,
            "time_complexity": self.time_complexity,
            "space_complexity": self.space_complexity,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} key={self.key!r}>"
