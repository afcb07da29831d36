"""Tests for progressive-reveal visibility tracking."""

from __future__ import annotations

from industry_page.reveal import VisibilityRevealEngine
from industry_page.window import SimulatedWindow


def _engine(window: SimulatedWindow) -> VisibilityRevealEngine:
    window.place("top", 0, 300)
    window.place("middle", 1000, 300)
    window.place("bottom", 3000, 300)
    return VisibilityRevealEngine(window, ["top", "middle", "bottom"])


class TestVisibilityRevealEngine:
    def test_defaults_false(self, window: SimulatedWindow):
        engine = _engine(window)
        assert dict(engine.visibility()) == {"top": False, "middle": False, "bottom": False}

    def test_reveals_intersecting_markers(self, window: SimulatedWindow):
        engine = _engine(window)
        engine.scan()
        assert engine.is_revealed("top")
        assert not engine.is_revealed("middle")

    def test_monotonic_after_scrolling_away(self, window: SimulatedWindow):
        engine = _engine(window)
        window.scroll(900)
        engine.scan()
        assert engine.is_revealed("middle")
        window.scroll(5000)
        engine.scan()
        window.scroll(0)
        engine.scan()
        assert engine.is_revealed("middle")
        assert not engine.is_revealed("bottom")

    def test_edges_are_exclusive(self, window: SimulatedWindow):
        window.place("below", 800, 100)  # top == viewport bottom
        window.place("above", -100, 100)  # bottom == viewport top
        engine = VisibilityRevealEngine(window, ["below", "above"])
        engine.scan()
        assert not engine.is_revealed("below")
        assert not engine.is_revealed("above")

    def test_zero_markers(self, window: SimulatedWindow):
        engine = VisibilityRevealEngine(window)
        engine.scan()
        assert dict(engine.visibility()) == {}

    def test_marker_without_layout_is_skipped(self, window: SimulatedWindow):
        engine = VisibilityRevealEngine(window, ["ghost"])
        engine.scan()
        assert engine.visibility()["ghost"] is False

    def test_register_keeps_revealed_state(self, window: SimulatedWindow):
        engine = _engine(window)
        engine.scan()
        engine.register("top", "extra")
        assert engine.is_revealed("top")
        assert engine.visibility()["extra"] is False

    def test_visibility_snapshot_is_read_only(self, window: SimulatedWindow):
        engine = _engine(window)
        snapshot = engine.visibility()
        engine.scan()
        assert snapshot["top"] is False
        assert engine.visibility()["top"] is True
