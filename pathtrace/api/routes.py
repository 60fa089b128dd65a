"""
FastAPI routes for the Pathtrace backend.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from pathtrace.api.schemas import (
    AlgorithmInfo,
    CompareInput,
    CompareResult,
    EditInput,
    GraphOutput,
    SearchInput,
    SearchResult,
)
from pathtrace.core.editor import apply_edit
from pathtrace.core.errors import DuplicateEdgeError
from pathtrace.core.graph_io import graph_from_dict, graph_to_dict, sample_graph
from pathtrace.engine.trace_engine import TraceEngine
from pathtrace.search.registry import algorithm_info

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Shared instances ───────────────────────────────────────────────
# The engine is stateless between calls; every request carries its graph.

engine = TraceEngine()


# ── Catalogue ──────────────────────────────────────────────────────

@router.get("/algorithms", response_model=list[AlgorithmInfo])
async def list_algorithms() -> list[AlgorithmInfo]:
    """Name, formula and properties of every search algorithm."""
    return [AlgorithmInfo(**info) for info in algorithm_info()]


@router.get("/graph/sample", response_model=GraphOutput)
async def get_sample_graph() -> GraphOutput:
    """The bundled example graph."""
    return GraphOutput(**graph_to_dict(sample_graph()))


# ── Search ─────────────────────────────────────────────────────────

@router.post("/search", response_model=SearchResult)
async def search_graph(payload: SearchInput) -> SearchResult:
    """
    Run one algorithm on the graph and return the complete step trace.
    """
    try:
        graph_json = {"nodes": payload.nodes, "edges": payload.edges}
        result = engine.run(graph_json, payload.algorithm, payload.max_steps)
        return SearchResult(**result)
    except DuplicateEdgeError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except ValueError as exc:
        # MissingEndpointError and GraphValidationError land here
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Search failed")
        raise HTTPException(status_code=500, detail=str(exc))


@router.post("/compare", response_model=CompareResult)
async def compare_algorithms(payload: CompareInput) -> CompareResult:
    """
    Run every algorithm on the graph and flag which found the optimal path.
    """
    try:
        graph_json = {"nodes": payload.nodes, "edges": payload.edges}
        result = engine.compare(graph_json, payload.max_steps)
        return CompareResult(**result)
    except DuplicateEdgeError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except ValueError as exc:
        # MissingEndpointError and GraphValidationError land here
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Comparison failed")
        raise HTTPException(status_code=500, detail=str(exc))


# ── Editing ────────────────────────────────────────────────────────

@router.post("/graph/edit", response_model=GraphOutput)
async def edit_graph(payload: EditInput) -> GraphOutput:
    """
    Apply one editor operation and return the new graph.
    The caller re-runs the search when it wants a fresh trace.
    """
    try:
        graph = graph_from_dict({"nodes": payload.nodes, "edges": payload.edges})
        edited = apply_edit(graph, payload.op, **payload.params)
        return GraphOutput(**graph_to_dict(edited))
    except DuplicateEdgeError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except (ValueError, TypeError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Edit %s failed", payload.op)
        raise HTTPException(status_code=500, detail=str(exc))
