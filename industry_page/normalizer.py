"""Turn a possibly partial content document into a render-safe ViewModel."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from pydantic import BaseModel

from industry_page.models.content import (
    Benefit,
    Description,
    FAQItem,
    Feature,
    IndustryStatus,
    SolutionGroup,
    ViewModel,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from industry_page.models.content import ContentDocument

logger = structlog.get_logger()

T = TypeVar("T")

DEFAULT_TITLE = "Industry Title"
DEFAULT_SUBTITLE = "Industry Subtitle"
DEFAULT_IMAGE = "/placeholder.svg?height=500&width=800"


def normalize(doc: ContentDocument | Mapping[str, Any] | None) -> ViewModel:
    """Build a ViewModel, defaulting every absent, null or malformed field.

    Total: never raises. Each field is defaulted on its own, so one bad field
    does not discard the rest of the document.
    """
    raw = _as_mapping(doc)
    return ViewModel(
        title=_text(raw.get("title")) or DEFAULT_TITLE,
        subtitle=_text(raw.get("subtitle")) or DEFAULT_SUBTITLE,
        image=_text(raw.get("image")) or DEFAULT_IMAGE,
        description=_description(raw.get("description")),
        industry_status=_industry_status(
            raw.get("industry_status") or raw.get("industryStatus")
        ),
        challenges=_strings(raw.get("challenges")),
        requirements=_strings(raw.get("requirements")),
        solutions=_entries(raw.get("solutions"), _solution),
        benefits=_entries(raw.get("benefits"), _benefit),
        features=_entries(raw.get("features"), _feature),
        faq=_entries(raw.get("faq"), _faq_item),
    )


def _as_mapping(doc: object) -> Mapping[str, Any]:
    mapping = _mapping(doc)
    if mapping is not None:
        return mapping
    if doc is not None:
        logger.debug("Ignoring content document of unexpected type", type=type(doc).__name__)
    return {}


def _mapping(value: object) -> Mapping[str, Any] | None:
    """View *value* as a mapping; pydantic models are dumped. None for anything else."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return value
    return None


def _text(value: object) -> str:
    """Return *value* if it is a non-blank string, else ""."""
    if isinstance(value, str) and value.strip():
        return value
    return ""


def _strings(value: object) -> tuple[str, ...]:
    if not isinstance(value, list | tuple):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _entries(value: object, build: Callable[[Mapping[str, Any]], T]) -> tuple[T, ...]:
    if not isinstance(value, list | tuple):
        return ()
    mappings = (_mapping(item) for item in value)
    return tuple(build(item) for item in mappings if item is not None)


def _description(value: object) -> Description:
    fields = _mapping(value)
    if fields is None:
        return Description()
    return Description(
        intro=_strings(fields.get("intro")),
        conclusion=_text(fields.get("conclusion")),
    )


def _industry_status(value: object) -> IndustryStatus:
    fields = _mapping(value)
    if fields is None:
        return IndustryStatus()
    return IndustryStatus(title=_text(fields.get("title")), items=_strings(fields.get("items")))


def _solution(item: Mapping[str, Any]) -> SolutionGroup:
    return SolutionGroup(title=_text(item.get("title")), items=_strings(item.get("items")))


def _benefit(item: Mapping[str, Any]) -> Benefit:
    return Benefit(title=_text(item.get("title")), description=_text(item.get("description")))


def _feature(item: Mapping[str, Any]) -> Feature:
    return Feature(
        title=_text(item.get("title")),
        description=_text(item.get("description")),
        image=_text(item.get("image")),
    )


def _faq_item(item: Mapping[str, Any]) -> FAQItem:
    return FAQItem(question=_text(item.get("question")), answer=_text(item.get("answer")))
