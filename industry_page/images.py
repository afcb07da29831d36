"""Per-image load state machine with placeholder fallback."""

from __future__ import annotations

import structlog

from industry_page.metrics import image_failures_total
from industry_page.models.state import ImageLoadState

logger = structlog.get_logger()


class ImageFallbackController:
    """Tracks one rendered image reference.

    LOADING moves to LOADED or FAILED at most once; later notifications are
    ignored. Once FAILED, ``effective_source`` returns the fallback.
    """

    def __init__(self, key: str, source: str, fallback: str) -> None:
        self.key = key
        self.source = source
        self.fallback = fallback
        self._state = ImageLoadState.LOADING

    def __repr__(self) -> str:
        return f"ImageFallbackController(key={self.key!r}, state={self._state.value!r})"

    @property
    def state(self) -> ImageLoadState:
        return self._state

    def on_load_success(self) -> None:
        if self._state is not ImageLoadState.LOADING:
            return
        self._state = ImageLoadState.LOADED

    def on_load_failure(self) -> None:
        if self._state is not ImageLoadState.LOADING:
            return
        self._state = ImageLoadState.FAILED
        image_failures_total.labels(image=self.key.partition("-")[0]).inc()
        logger.warning("Failed to load image", image=self.key, source=self.source)

    def effective_source(self) -> str:
        if self._state is ImageLoadState.FAILED:
            return self.fallback
        return self.source
