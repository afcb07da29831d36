"""Scroll subscription and sticky/back-to-top state."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from industry_page.metrics import scroll_handler_seconds
from industry_page.models.state import ScrollState

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from industry_page.fault import FaultBoundary
    from industry_page.protocols import ScrollSource

logger = structlog.get_logger()

DEFAULT_STICKY_THRESHOLD = 100


def compute_scroll_state(offset: float, threshold: float = DEFAULT_STICKY_THRESHOLD) -> ScrollState:
    """Both affordances activate strictly above *threshold*; no hysteresis."""
    past = offset > threshold
    return ScrollState(is_sticky=past, show_back_to_top=past)


class ScrollStateTracker:
    """Owns the page's single scroll subscription.

    Each notification recomputes ScrollState and then runs the co-scheduled
    observers (e.g. the reveal scan) in registration order. When a supervisor
    is given, the listener runs under it, so a failing notification trips the
    boundary instead of reaching the host.
    """

    def __init__(
        self,
        source: ScrollSource,
        threshold: float = DEFAULT_STICKY_THRESHOLD,
        supervisor: FaultBoundary | None = None,
    ) -> None:
        self._source = source
        self._threshold = threshold
        self._supervisor = supervisor
        self._observers: list[Callable[[], None]] = []
        self._listener: Callable[[], None] | None = None
        self._state = ScrollState()

    @property
    def state(self) -> ScrollState:
        return self._state

    @property
    def active(self) -> bool:
        return self._listener is not None

    def add_observer(self, observer: Callable[[], None]) -> None:
        self._observers.append(observer)

    def activate(self) -> None:
        """Subscribe and compute the initial state (the page may already be scrolled)."""
        if self._listener is not None:
            return
        listener = self._supervisor.guard(self.notify) if self._supervisor else self.notify
        self._source.add_scroll_listener(listener)
        self._listener = listener
        logger.debug("Scroll tracker activated", threshold=self._threshold)
        listener()

    def deactivate(self) -> None:
        if self._listener is None:
            return
        listener, self._listener = self._listener, None
        self._source.remove_scroll_listener(listener)
        logger.debug("Scroll tracker deactivated")

    def notify(self) -> None:
        """Handle one scroll notification synchronously."""
        started = time.perf_counter()
        self._state = compute_scroll_state(self._source.scroll_y, self._threshold)
        for observer in self._observers:
            observer()
        scroll_handler_seconds.observe(time.perf_counter() - started)

    def scroll_to_top(self) -> None:
        self._source.scroll_to(0, behavior="smooth")

    def __enter__(self) -> ScrollStateTracker:
        self.activate()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.deactivate()
