"""
Pydantic schemas for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from pathtrace.config import DEFAULT_ALGORITHM, MAX_STEPS, MAX_STEPS_CEILING

AlgorithmKey = Literal["ucs", "greedy", "astar"]


# ── Graph ──────────────────────────────────────────────────────────

class GraphInput(BaseModel):
    """Graph document: ``{"nodes": [...], "edges": [...]}``."""

    nodes: list[dict[str, Any]] = Field(..., description="Node objects (id, x, y, heuristic, isStart, isGoal)")
    edges: list[dict[str, Any]] = Field(..., description="Edge objects (from, to, cost)")


class GraphOutput(BaseModel):
    """Graph document returned after an edit or for the sample."""

    nodes: list[dict[str, Any]]
    edges: list[dict[str, Any]]


class EditInput(GraphInput):
    """A graph plus one editor operation to apply to it."""

    op: str = Field(..., description="Editor operation, e.g. add_edge or set_goal")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Keyword arguments for the operation",
    )


# ── Search ─────────────────────────────────────────────────────────

class SearchInput(GraphInput):
    """Search request: graph + algorithm selector + step budget."""

    algorithm: AlgorithmKey = DEFAULT_ALGORITHM
    max_steps: int = Field(default=MAX_STEPS, ge=1, le=MAX_STEPS_CEILING)


class FrontierEntryModel(BaseModel):
    node_id: str
    path_cost: float
    heuristic: float
    f_cost: float
    parent: str | None = None


class StepModel(BaseModel):
    """One step of a search trace."""

    index: int
    action: Literal["initialize", "visit", "found", "failed"]
    current_node: str | None
    frontier: list[FrontierEntryModel]
    visited: list[str]
    description: str
    path_cost: float | None = None
    heuristic: float | None = None
    total_cost: float | None = None
    current_path: list[str]
    explored_edges: list[list[str]]
    final_path: list[str] | None = None


class SearchResult(BaseModel):
    """Full trace of one search run."""

    algorithm: str
    steps: list[StepModel]
    step_count: int
    found: bool
    final_path: list[str]
    total_cost: float | None
    budget_exhausted: bool
    node_count: int
    edge_count: int


# ── Comparison ─────────────────────────────────────────────────────

class CompareInput(GraphInput):
    max_steps: int = Field(default=MAX_STEPS, ge=1, le=MAX_STEPS_CEILING)


class ComparisonEntry(BaseModel):
    algorithm: str
    found: bool
    final_path: list[str]
    total_cost: float | None
    step_count: int
    visited_count: int
    budget_exhausted: bool
    optimal: bool


class CompareResult(BaseModel):
    """Every algorithm on the same graph, against the true optimum."""

    optimal_cost: float | None
    results: list[ComparisonEntry] = Field(default_factory=list)


# ── Catalogue ──────────────────────────────────────────────────────

class AlgorithmInfo(BaseModel):
    key: str
    name: str
    formula: str
    description: str
    optimal: bool
    complete: bool
    time_complexity: str
    space_complexity: str
