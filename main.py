"""
Pathtrace — Best-first search trace backend
===========================================

Serves step traces of UCS, Greedy and A* for the graph editor frontend.
Start with:  uvicorn main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathtrace.api.routes import router
from pathtrace.config import (
    API_TITLE,
    API_VERSION,
    CORS_ORIGINS,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_STEPS,
)
from pathtrace.search.registry import list_algorithms

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger("pathtrace")


def create_app() -> FastAPI:
    """Build the API: search, compare and edit routes under ``/api``."""
    app = FastAPI(
        title=API_TITLE,
        description=(
            "Step-by-step traces of Uniform Cost, Greedy and A* search over "
            "small weighted graphs, plus the pure graph-editing operations "
            "the visual editor drives."
        ),
        version=API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "status": "running",
            "algorithms": list_algorithms(),
            "max_steps": MAX_STEPS,
            "docs": "/docs",
        }

    logger.info(
        "%s %s ready: algorithms=%s, max_steps=%d",
        API_TITLE, API_VERSION, list_algorithms(), MAX_STEPS,
    )
    return app


app = create_app()
