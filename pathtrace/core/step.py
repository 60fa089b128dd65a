"""
Trace records — what a search run hands to the renderer.

A Step is a frozen snapshot of one algorithmic moment.  A Trace is the
ordered, immutable sequence of Steps produced by one run.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class StepAction(str, Enum):
    INITIALIZE = "initialize"
    VISIT = "visit"
    FOUND = "found"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (StepAction.FOUND, StepAction.FAILED)


@dataclass(frozen=True)
class FrontierEntry:
    """A discovered-but-unsettled node with its costs and parent."""

    node_id: str
    path_cost: float
    heuristic: float
    f_cost: float
    parent: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "node_id": self.node_id,
            "path_cost": self.path_cost,
            "heuristic": self.heuristic,
            "f_cost": self.f_cost,
            "parent": self.parent,
        }


@dataclass(frozen=True)
class Step:
    """
    One record of the trace.

    Attributes
    ----------
    index : int
        Position in the trace, consecutive from 0.
    action : StepAction
    current_node : str | None
        Node being initialized / visited; None on a failed step.
    frontier : tuple[FrontierEntry, ...]
        Frontier contents after the action, in frontier order.
    visited : tuple[str, ...]
        Settled nodes in the order they were visited.
    description : str
        Human readable summary.
    path_cost, heuristic, total_cost : float | None
        g, h and f of the current node (when meaningful).
    current_path : tuple[str, ...]
        Start-to-current path reconstructed from the parent map.
    explored_edges : tuple[tuple[str, str], ...]
        Edges traversed during expansion so far (rendering only).
    final_path : tuple[str, ...] | None
        Set on the terminal step: the solution path, or () on failure.
    """

    index: int
    action: StepAction
    current_node: str | None
    frontier: tuple[FrontierEntry, ...]
    visited: tuple[str, ...]
    description: str
    current_path: tuple[str, ...] = ()
    explored_edges: tuple[tuple[str, str], ...] = ()
    path_cost: float | None = None
    heuristic: float | None = None
    total_cost: float | None = None
    final_path: tuple[str, ...] | None = None

    @property
    def is_terminal(self) -> bool:
        return self.action.is_terminal

    def to_dict(self) -> dict[str, Any]:
        """Plain-JSON form used by the API."""
        return {
            "index": self.index,
            "action": self.action.value,
            "current_node": self.current_node,
            "frontier": [entry.to_dict() for entry in self.frontier],
            "visited": list(self.visited),
            "description": self.description,
            "path_cost": self.path_cost,
            "heuristic": self.heuristic,
            "total_cost": self.total_cost,
            "current_path": list(self.current_path),
            "explored_edges": [list(e) for e in self.explored_edges],
            "final_path": (
                list(self.final_path) if self.final_path is not None else None
            ),
        }


class Trace(Sequence):
    """
    Immutable step sequence produced by one search run.

    Supports ``len()``, indexing and iteration; the summary properties
    read the terminal step.
    """

    def __init__(
        self,
        algorithm: str,
        steps: Sequence[Step],
        budget_exhausted: bool = False,
    ) -> None:
        self._algorithm = algorithm
        self._steps: tuple[Step, ...] = tuple(steps)
        self._budget_exhausted = budget_exhausted

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def terminal(self) -> Step:
        return self._steps[-1]

    @property
    def found(self) -> bool:
        return self.terminal.action is StepAction.FOUND

    @property
    def final_path(self) -> tuple[str, ...]:
        return self.terminal.final_path or ()

    @property
    def total_cost(self) -> float | None:
        """Path cost of the goal, or None when no path was found."""
        return self.terminal.path_cost if self.found else None

    @property
    def budget_exhausted(self) -> bool:
        return self._budget_exhausted

    @property
    def visited(self) -> tuple[str, ...]:
        return self.terminal.visited

    # ── Sequence protocol ──────────────────────────────────────────

    def __getitem__(self, index):
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        return (
            self._algorithm == other._algorithm
            and self._steps == other._steps
            and self._budget_exhausted == other._budget_exhausted
        )

    def __hash__(self) -> int:
        return hash((self._algorithm, self._steps, self._budget_exhausted))

    def __repr__(self) -> str:
        outcome = self.terminal.action.value if self._steps else "empty"
        return f"<Trace algorithm={self._algorithm!r} steps={len(self)} {outcome}>"

    def to_dicts(self) -> list[dict[str, Any]]:
        return [step.to_dict() for step in self._steps]
