"""Industry page view-state controller."""

from industry_page.controller import PageController
from industry_page.normalizer import normalize

__all__ = ["PageController", "normalize"]
