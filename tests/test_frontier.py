"""Tests for Frontier."""

import pytest

from pathtrace.core.step import FrontierEntry
from pathtrace.search.frontier import Frontier


def _entry(node_id, g, f=None, parent=None):
    return FrontierEntry(node_id, g, 0.0, g if f is None else f, parent)


def test_push_and_find():
    fr = Frontier()
    fr.push(_entry("A", 3.0))
    assert fr.find("A").path_cost == 3.0
    assert fr.find("B") is None
    assert "A" in fr
    assert len(fr) == 1


def test_pop_min_returns_lowest_f():
    fr = Frontier()
    fr.push(_entry("A", 5.0))
    fr.push(_entry("B", 2.0))
    fr.push(_entry("C", 4.0))
    assert fr.pop_min().node_id == "B"
    assert [e.node_id for e in fr.snapshot()] == ["A", "C"]


def test_pop_min_tie_goes_to_first_inserted():
    fr = Frontier()
    fr.push(_entry("X", 1.0, f=7.0))
    fr.push(_entry("Y", 2.0, f=7.0))
    fr.push(_entry("Z", 3.0, f=7.0))
    assert fr.pop_min().node_id == "X"
    assert fr.pop_min().node_id == "Y"


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Frontier().pop_min()


def test_relax_replaces_in_place_when_cheaper():
    fr = Frontier()
    fr.push(_entry("A", 5.0, parent="S"))
    fr.push(_entry("B", 6.0, parent="S"))
    changed = fr.relax(_entry("A", 2.0, parent="C"))

    assert changed
    snap = fr.snapshot()
    assert [e.node_id for e in snap] == ["A", "B"]  # position kept
    assert snap[0].path_cost == 2.0
    assert snap[0].parent == "C"


def test_relax_keeps_existing_on_tie_or_worse():
    fr = Frontier()
    fr.push(_entry("A", 5.0, parent="S"))
    assert not fr.relax(_entry("A", 5.0, parent="C"))
    assert not fr.relax(_entry("A", 9.0, parent="D"))
    assert fr.find("A").parent == "S"


def test_relax_appends_new_node():
    fr = Frontier()
    fr.push(_entry("A", 1.0))
    assert fr.relax(_entry("B", 4.0))
    assert [e.node_id for e in fr.snapshot()] == ["A", "B"]


def test_snapshot_is_independent():
    fr = Frontier()
    fr.push(_entry("A", 1.0))
    snap = fr.snapshot()
    fr.pop_min()
    assert len(snap) == 1
    assert not fr


def test_repr():
    fr = Frontier()
    fr.push(_entry("A", 3.0))
    assert "A(f=3)" in repr(fr)
