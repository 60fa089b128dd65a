"""
Error types raised by the graph model, the editor and the search engine.

All of them derive from ValueError so callers that only know about the
builtin still catch them.
"""

from __future__ import annotations


class GraphValidationError(ValueError):
    """The graph (or the document it was loaded from) is malformed."""


class DuplicateEdgeError(GraphValidationError):
    """An edge already exists for the same ordered (source, target) pair."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"Edge {source!r} -> {target!r} already exists.")
        self.source = source
        self.target = target


class MissingEndpointError(ValueError):
    """The graph has no start node or no goal node."""

    def __init__(self, role: str) -> None:
        super().__init__(f"No {role} node defined.")
        self.role = role
