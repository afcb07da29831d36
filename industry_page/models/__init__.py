"""Re-exports all page models."""

from industry_page.models.content import (
    Benefit,
    ContentDocument,
    Description,
    FAQItem,
    Feature,
    IndustryStatus,
    SolutionGroup,
    ViewModel,
)
from industry_page.models.state import ImageLoadState, PageKind, Rect, ScrollState

__all__ = [
    "Benefit",
    "ContentDocument",
    "Description",
    "FAQItem",
    "Feature",
    "ImageLoadState",
    "IndustryStatus",
    "PageKind",
    "Rect",
    "ScrollState",
    "SolutionGroup",
    "ViewModel",
]
