"""In-process ScrollSource used by the CLI and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from industry_page.models.state import Rect

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = structlog.get_logger()


class SimulatedWindow:
    """A scrollable document with regions placed at absolute offsets.

    ``bounding_rect`` reports positions relative to the viewport, like a
    browser's getBoundingClientRect.
    """

    def __init__(self, viewport_height: float = 800, scroll_y: float = 0) -> None:
        self._viewport_height = viewport_height
        self._scroll_y = scroll_y
        self._listeners: list[Callable[[], None]] = []
        self._layout: dict[str, tuple[float, float]] = {}
        self.scroll_requests: list[tuple[float, str]] = []

    @property
    def scroll_y(self) -> float:
        return self._scroll_y

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_scroll_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_scroll_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def place(self, marker_id: str, top: float, height: float) -> None:
        self._layout[marker_id] = (top, top + height)

    def stack(self, marker_ids: Iterable[str], start: float = 0, height: float = 400) -> float:
        """Place markers one after another from *start*. Returns the end offset."""
        offset = start
        for marker_id in marker_ids:
            self.place(marker_id, offset, height)
            offset += height
        return offset

    def bounding_rect(self, marker_id: str) -> Rect | None:
        bounds = self._layout.get(marker_id)
        if bounds is None:
            return None
        top, bottom = bounds
        return Rect(top=top - self._scroll_y, bottom=bottom - self._scroll_y)

    def scroll(self, y: float) -> None:
        """Move to *y* and notify every listener, as a browser scroll event would."""
        self._scroll_y = y
        for listener in list(self._listeners):
            listener()

    def scroll_to(self, top: float, behavior: str = "auto") -> None:
        self.scroll_requests.append((top, behavior))
        logger.debug("Scroll requested", top=top, behavior=behavior)
        self.scroll(top)
