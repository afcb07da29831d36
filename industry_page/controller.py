"""Page view-state controller: one instance per rendered page."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import structlog

from industry_page.accordion import FaqAccordion
from industry_page.breadcrumbs import build_breadcrumbs
from industry_page.config import Settings
from industry_page.fault import FaultBoundary
from industry_page.images import ImageFallbackController
from industry_page.models.state import PageKind
from industry_page.normalizer import DEFAULT_IMAGE, normalize
from industry_page.renderer import (
    ImageView,
    PageSnapshot,
    feature_image_key,
    marker_ids,
    render_page,
)
from industry_page.reveal import VisibilityRevealEngine
from industry_page.scroll import ScrollStateTracker

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from industry_page.breadcrumbs import Breadcrumb
    from industry_page.fault import EffectResult
    from industry_page.models.content import ContentDocument, ViewModel
    from industry_page.models.state import ScrollState
    from industry_page.protocols import ScrollSource

logger = structlog.get_logger()


class PageController:
    """Owns the ViewModel and every piece of live page state.

    ``activate`` subscribes to the scroll source under a FaultBoundary. Any
    failure while tracking scroll or computing reveals trips the boundary,
    drops the subscription and switches ``render`` to the error panel for
    the rest of this controller's life.
    """

    def __init__(
        self,
        document: ContentDocument | Mapping[str, Any] | None,
        *,
        source: ScrollSource,
        kind: PageKind | str = PageKind.INDUSTRY,
        parent_title: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self.kind = PageKind(kind)
        self.parent_title = parent_title
        self._source = source

        self._boundary = FaultBoundary(name=self.kind.value)
        self._tracker = ScrollStateTracker(
            source,
            threshold=self._settings.sticky_threshold,
            supervisor=self._boundary,
        )
        self._engine = VisibilityRevealEngine(source)
        self._tracker.add_observer(self._engine.scan)
        self._boundary.on_fault.append(self._tracker.deactivate)

        self.load_document(document)

    # --- Lifecycle ---

    def activate(self) -> EffectResult:
        """Subscribe to scroll notifications for the rendered markers."""
        result = self._boundary.run(self._tracker.activate)
        logger.info(
            "Page controller activated",
            page_kind=self.kind.value,
            title=self._view_model.title,
            markers=len(self._engine.marker_ids),
            ok=result.ok,
        )
        return result

    def deactivate(self) -> None:
        """Unsubscribe. A failing teardown trips the boundary instead of reaching the host."""
        self._boundary.run(self._tracker.deactivate)

    def __enter__(self) -> PageController:
        self.activate()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.deactivate()

    # --- Content ---

    def load_document(self, document: ContentDocument | Mapping[str, Any] | None) -> None:
        """Rebuild the ViewModel and its image and accordion state from *document*."""
        vm = normalize(document)
        self._view_model = vm
        self._breadcrumbs = build_breadcrumbs(vm.title, self.parent_title)
        self._faq = FaqAccordion(len(vm.faq))

        images = {"hero": ImageFallbackController("hero", vm.image, DEFAULT_IMAGE)}
        for index, feature in enumerate(vm.features):
            if feature.image:
                key = feature_image_key(index)
                images[key] = ImageFallbackController(
                    key, feature.image, self._settings.feature_image_fallback
                )
        self._images = images

        # Markers of the previous document are dropped; reused ids start unrevealed.
        self._engine.reset(*marker_ids(vm))
        if self._tracker.active:
            self._boundary.run(self._tracker.notify)

    @property
    def view_model(self) -> ViewModel:
        return self._view_model

    @property
    def breadcrumbs(self) -> tuple[Breadcrumb, ...]:
        return self._breadcrumbs

    # --- Live state ---

    @property
    def scroll_state(self) -> ScrollState:
        return self._tracker.state

    @property
    def visibility(self) -> Mapping[str, bool]:
        return self._engine.visibility()

    def is_revealed(self, marker_id: str) -> bool:
        return self._engine.is_revealed(marker_id)

    @property
    def faulted(self) -> bool:
        return self._boundary.faulted

    @property
    def faq_open(self) -> int | None:
        return self._faq.open_index

    def image(self, key: str) -> ImageFallbackController:
        return self._images[key]

    # --- Events ---

    def scroll_to_top(self) -> None:
        if self.faulted:
            return
        self._tracker.scroll_to_top()

    def on_image_load(self, key: str) -> None:
        self._images[key].on_load_success()

    def on_image_error(self, key: str) -> None:
        self._images[key].on_load_failure()

    def open_faq(self, index: int) -> None:
        self._faq.open(index)

    def close_faq(self) -> None:
        self._faq.close()

    def toggle_faq(self, index: int) -> None:
        self._faq.toggle(index)

    # --- Rendering ---

    def snapshot(self) -> PageSnapshot:
        return PageSnapshot(
            view_model=self._view_model,
            breadcrumbs=self._breadcrumbs,
            kind=self.kind,
            scroll=self._tracker.state,
            visibility=self._engine.visibility(),
            images=MappingProxyType(
                {
                    key: ImageView(state=image.state, src=image.effective_source())
                    for key, image in self._images.items()
                }
            ),
            faq_open=self._faq.open_index,
            faulted=self._boundary.faulted,
        )

    def render(self) -> str:
        return render_page(self.snapshot())
