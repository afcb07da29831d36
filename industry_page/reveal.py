"""Progressive-reveal visibility for registered page markers."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from industry_page.metrics import markers_revealed_total

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from industry_page.protocols import ScrollSource

logger = structlog.get_logger()


class VisibilityRevealEngine:
    """Accumulates the set of markers that have intersected the viewport.

    Every registered marker is checked on each scan. Entries only ever go from
    False to True, independent of scroll direction.
    """

    def __init__(self, source: ScrollSource, marker_ids: Iterable[str] = ()) -> None:
        self._source = source
        self._revealed: dict[str, bool] = {}
        self.register(*marker_ids)

    def register(self, *marker_ids: str) -> None:
        for marker_id in marker_ids:
            self._revealed.setdefault(marker_id, False)

    def reset(self, *marker_ids: str) -> None:
        """Replace the registered set with *marker_ids*, all unrevealed."""
        self._revealed = dict.fromkeys(marker_ids, False)

    @property
    def marker_ids(self) -> tuple[str, ...]:
        return tuple(self._revealed)

    def is_revealed(self, marker_id: str) -> bool:
        return self._revealed.get(marker_id, False)

    def visibility(self) -> Mapping[str, bool]:
        """Read-only snapshot of the current VisibilityState."""
        return MappingProxyType(dict(self._revealed))

    def scan(self) -> None:
        """Reveal every pending marker that currently intersects the viewport."""
        viewport_height = self._source.viewport_height
        newly_revealed: list[str] = []
        for marker_id, revealed in self._revealed.items():
            if revealed:
                continue
            rect = self._source.bounding_rect(marker_id)
            if rect is not None and rect.intersects_viewport(viewport_height):
                newly_revealed.append(marker_id)

        for marker_id in newly_revealed:
            self._revealed[marker_id] = True
        if newly_revealed:
            markers_revealed_total.inc(len(newly_revealed))
            logger.debug("Markers revealed", markers=newly_revealed)
