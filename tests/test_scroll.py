"""Tests for scroll state tracking and its subscription lifecycle."""

from __future__ import annotations

import pytest

from industry_page.models.state import ScrollState
from industry_page.scroll import ScrollStateTracker, compute_scroll_state
from industry_page.window import SimulatedWindow


class TestComputeScrollState:
    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(0, False), (50, False), (100, False), (101, True), (500, True), (99, False)],
    )
    def test_threshold(self, offset, expected):
        assert compute_scroll_state(offset, 100) == ScrollState(expected, expected)


class TestScrollStateTracker:
    def test_offset_sequence_recomputed_per_notification(self, window: SimulatedWindow):
        tracker = ScrollStateTracker(window, threshold=100)
        seen = []
        with tracker:
            for offset in (0, 50, 100, 101, 500, 99):
                window.scroll(offset)
                seen.append(tracker.state)
        assert seen == [
            ScrollState(False, False),
            ScrollState(False, False),
            ScrollState(False, False),
            ScrollState(True, True),
            ScrollState(True, True),
            ScrollState(False, False),
        ]

    def test_initial_computation_on_activation(self):
        window = SimulatedWindow(scroll_y=300)
        tracker = ScrollStateTracker(window, threshold=100)
        tracker.activate()
        assert tracker.state == ScrollState(True, True)
        tracker.deactivate()

    def test_subscribe_once_unsubscribe_once(self, window: SimulatedWindow):
        tracker = ScrollStateTracker(window)
        tracker.activate()
        tracker.activate()
        assert window.listener_count == 1
        tracker.deactivate()
        tracker.deactivate()
        assert window.listener_count == 0

    def test_no_updates_after_deactivate(self, window: SimulatedWindow):
        tracker = ScrollStateTracker(window)
        with tracker:
            window.scroll(0)
        window.scroll(1000)
        assert tracker.state == ScrollState(False, False)

    def test_context_manager_unsubscribes_on_error(self, window: SimulatedWindow):
        with pytest.raises(RuntimeError), ScrollStateTracker(window):
            assert window.listener_count == 1
            raise RuntimeError("boom")
        assert window.listener_count == 0

    def test_observers_are_co_scheduled(self, window: SimulatedWindow):
        tracker = ScrollStateTracker(window)
        calls = []
        tracker.add_observer(lambda: calls.append(window.scroll_y))
        with tracker:
            window.scroll(10)
            window.scroll(20)
        # Initial computation plus one per notification
        assert calls == [0, 10, 20]

    def test_scroll_to_top_is_smooth(self, window: SimulatedWindow):
        tracker = ScrollStateTracker(window)
        with tracker:
            window.scroll(600)
            tracker.scroll_to_top()
            assert window.scroll_requests == [(0, "smooth")]
            assert tracker.state == ScrollState(False, False)


class TestSimulatedWindow:
    def test_satisfies_scroll_source_protocol(self):
        from industry_page.protocols import ScrollSource

        assert isinstance(SimulatedWindow(), ScrollSource)

    def test_bounding_rect_is_viewport_relative(self, window: SimulatedWindow):
        window.place("box", 1000, 200)
        window.scroll(900)
        rect = window.bounding_rect("box")
        assert (rect.top, rect.bottom) == (100, 300)
        assert window.bounding_rect("missing") is None
