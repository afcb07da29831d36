"""Open-state of the FAQ accordion (single, collapsible)."""

from __future__ import annotations


class FaqAccordion:
    """At most one entry is expanded; opening another collapses the previous one."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._open: int | None = None

    @property
    def open_index(self) -> int | None:
        return self._open

    def open(self, index: int) -> None:
        self._check(index)
        self._open = index

    def close(self) -> None:
        self._open = None

    def toggle(self, index: int) -> None:
        """Open *index*, or collapse it if it is already the open entry."""
        self._check(index)
        self._open = None if self._open == index else index

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"FAQ entry {index} out of range (0..{self.size - 1})")


def item_value(index: int) -> str:
    """Stable accordion value for entry *index*."""
    return f"item-{index}"
