"""Page-level fault boundary around the controller's reactive logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from industry_page.metrics import page_faults_total

if TYPE_CHECKING:
    from collections.abc import Callable

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class EffectResult:
    """Tagged outcome of a supervised call: ok, or the error that tripped the boundary."""

    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


_OK = EffectResult()


@dataclass
class FaultBoundary:
    """Converts the first unexpected failure into a terminal fault state.

    Unlike a circuit breaker there is no reset: once tripped, every supervised
    call is skipped until a new boundary (i.e. a new page controller) is built.
    """

    name: str = "page"
    on_fault: list[Callable[[], None]] = field(default_factory=list)

    _faulted: bool = field(default=False, init=False, repr=False)
    _error: Exception | None = field(default=None, init=False, repr=False)

    @property
    def faulted(self) -> bool:
        return self._faulted

    @property
    def error(self) -> Exception | None:
        return self._error

    def run(self, fn: Callable[[], object]) -> EffectResult:
        """Execute *fn* unless already faulted. Never propagates an Exception."""
        if self._faulted:
            return EffectResult(error=self._error)
        try:
            fn()
        except Exception as exc:
            self._trip(exc)
            return EffectResult(error=exc)
        # A nested guarded call may have tripped the boundary without raising here
        if self._faulted:
            return EffectResult(error=self._error)
        return _OK

    def guard(self, fn: Callable[[], object]) -> Callable[[], None]:
        """Wrap *fn* as a listener that runs under this boundary."""

        def guarded() -> None:
            self.run(fn)

        guarded.__name__ = f"guarded_{getattr(fn, '__name__', 'fn')}"
        return guarded

    def _trip(self, exc: Exception) -> None:
        self._faulted = True
        self._error = exc
        page_faults_total.labels(page_kind=self.name).inc()
        logger.exception("Page controller fault, degrading to error panel", boundary=self.name)
        for callback in self.on_fault:
            try:
                callback()
            except Exception:
                logger.exception("Fault callback failed", boundary=self.name)
