"""Static breadcrumb trail: Home / Industries / [Parent] / [Title]."""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Breadcrumb:
    label: str
    path: str | None = None

    @property
    def href(self) -> str | None:
        """Site-absolute link target; None for the current (unlinked) page."""
        if self.path is None:
            return None
        return f"/{self.path}"


def slugify(label: str) -> str:
    """Lowercase and replace each whitespace run with a hyphen."""
    return _WHITESPACE.sub("-", label.lower())


def build_breadcrumbs(title: str, parent_title: str | None = None) -> tuple[Breadcrumb, ...]:
    crumbs = [Breadcrumb("Home", ""), Breadcrumb("Industries", "industries")]
    if parent_title:
        crumbs.append(Breadcrumb(parent_title, f"industries/{slugify(parent_title)}"))
    crumbs.append(Breadcrumb(title))
    return tuple(crumbs)
