"""
Frontier — run-local container of discovered-but-unsettled nodes.

Entries keep insertion order.  Selection is a linear scan that returns
the first entry with the minimum evaluation cost, and relaxation
replaces an entry in place, so ties always go to the entry that has
been in the frontier longest.
"""

from __future__ import annotations

from pathtrace.core.step import FrontierEntry


class Frontier:
    """
    Ordered list of FrontierEntry objects, at most one per node.

    Owned by exactly one search run and discarded with it.
    """

    def __init__(self) -> None:
        self._entries: list[FrontierEntry] = []

    # ── Read / Write ───────────────────────────────────────────────

    def push(self, entry: FrontierEntry) -> None:
        """Append *entry* at the back."""
        self._entries.append(entry)

    def find(self, node_id: str) -> FrontierEntry | None:
        """Return the entry for *node_id*, or None if it is not queued."""
        for entry in self._entries:
            if entry.node_id == node_id:
                return entry
        return None

    def relax(self, entry: FrontierEntry) -> bool:
        """
        Insert *entry*, or replace the queued entry for the same node
        when *entry* has a strictly lower path cost.

        Returns True when the frontier changed.  An equal-cost path keeps
        the existing entry and its parent.
        """
        for position, existing in enumerate(self._entries):
            if existing.node_id != entry.node_id:
                continue
            if entry.path_cost < existing.path_cost:
                self._entries[position] = entry
                return True
            return False
        self._entries.append(entry)
        return True

    def pop_min(self) -> FrontierEntry:
        """
        Remove and return the entry with the lowest ``f_cost``.

        Raises IndexError when empty.
        """
        if not self._entries:
            raise IndexError("pop from an empty frontier")
        best = 0
        for position in range(1, len(self._entries)):
            if self._entries[position].f_cost < self._entries[best].f_cost:
                best = position
        return self._entries.pop(best)

    # ── Bulk operations ────────────────────────────────────────────

    def snapshot(self) -> tuple[FrontierEntry, ...]:
        """Return the current entries in frontier order."""
        return tuple(self._entries)

    # ── Dunder helpers ─────────────────────────────────────────────

    def __repr__(self) -> str:
        items = ", ".join(f"{e.node_id}(f={e.f_cost:g})" for e in self._entries)
        return f"Frontier({items})"

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, node_id: str) -> bool:
        return self.find(node_id) is not None
