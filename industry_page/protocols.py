"""Port interfaces (Protocols) for the host page environment."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from industry_page.models.state import Rect


@runtime_checkable
class ScrollSource(Protocol):
    """Interface to the host's scroll position and layout.

    Listeners are invoked synchronously, once per scroll notification.
    """

    @property
    def scroll_y(self) -> float: ...

    @property
    def viewport_height(self) -> float: ...

    def add_scroll_listener(self, listener: Callable[[], None]) -> None: ...
    def remove_scroll_listener(self, listener: Callable[[], None]) -> None: ...
    def scroll_to(self, top: float, behavior: str = "auto") -> None: ...

    def bounding_rect(self, marker_id: str) -> Rect | None:
        """Viewport-relative bounds of a rendered marker, or None if not laid out."""
        ...
