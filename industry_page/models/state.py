"""Mutable-state value types owned by the page controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PageKind(StrEnum):
    INDUSTRY = "industry"
    SERVICE = "service"


class ImageLoadState(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ScrollState:
    """Scroll-derived affordances. Both flags share one threshold."""

    is_sticky: bool = False
    show_back_to_top: bool = False


@dataclass(frozen=True, slots=True)
class Rect:
    """Viewport-relative vertical bounds of a rendered region."""

    top: float
    bottom: float

    def intersects_viewport(self, viewport_height: float) -> bool:
        return self.top < viewport_height and self.bottom > 0
