"""
PlaybackCursor — read-only position over a finished Trace.

Stepping, jumping and auto-advance only move an index; the trace
itself is never touched.  Stopping playback means not advancing.
"""

from __future__ import annotations

from pathtrace.core.step import Step, Trace


class PlaybackCursor:
    """
    Index into a Trace, clamped to ``0 .. len(trace) - 1``.

    Usage
    -----
    >>> cursor = PlaybackCursor(trace)
    >>> while cursor.advance():
    ...     render(cursor.current)
    """

    def __init__(self, trace: Trace) -> None:
        if len(trace) == 0:
            raise ValueError("Cannot play back an empty trace.")
        self._trace = trace
        self._index = 0

    @property
    def trace(self) -> Trace:
        return self._trace

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Step:
        return self._trace[self._index]

    @property
    def step_count(self) -> int:
        return len(self._trace)

    @property
    def at_start(self) -> bool:
        return self._index == 0

    @property
    def at_end(self) -> bool:
        return self._index == len(self._trace) - 1

    @property
    def progress(self) -> int:
        """Playback position as a rounded percentage."""
        return round(self._index / max(1, len(self._trace) - 1) * 100)

    # ── Movement ───────────────────────────────────────────────────

    def step_forward(self) -> Step:
        if not self.at_end:
            self._index += 1
        return self.current

    def step_backward(self) -> Step:
        if not self.at_start:
            self._index -= 1
        return self.current

    def jump_to(self, index: int) -> Step:
        """Move to *index*, clamped to the trace bounds."""
        self._index = max(0, min(index, len(self._trace) - 1))
        return self.current

    def advance(self) -> bool:
        """
        One auto-play tick.  Returns False (and stays put) once the last
        step is showing, which is the signal to stop the timer.
        """
        if self.at_end:
            return False
        self._index += 1
        return True

    def reset(self) -> Step:
        self._index = 0
        return self.current

    def __repr__(self) -> str:
        return f"<PlaybackCursor {self._index + 1}/{len(self._trace)}>"
