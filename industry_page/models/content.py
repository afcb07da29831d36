"""Content document (input) and view model (render-safe output) types."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Description(BaseModel):
    """Intro paragraphs followed by a closing paragraph."""

    model_config = ConfigDict(frozen=True)

    intro: tuple[str, ...] = ()
    conclusion: str = ""


class IndustryStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    items: tuple[str, ...] = ()


class SolutionGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    items: tuple[str, ...] = ()


class Benefit(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""


class Feature(BaseModel):
    """A key feature card. ``image`` is empty when the feature has no picture."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    image: str = ""


class FAQItem(BaseModel):
    """A frequently asked question."""

    model_config = ConfigDict(frozen=True)

    question: str = ""
    answer: str = ""


class ContentDocument(BaseModel):
    """Structured page content as supplied by the content source.

    Every field is optional. Plain mappings (e.g. parsed JSON) are accepted by
    ``normalize`` directly, so this model is only a typed convenience for callers
    that build documents in code.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: str | None = None
    subtitle: str | None = None
    image: str | None = None
    description: Description | None = None
    industry_status: IndustryStatus | None = Field(
        default=None,
        validation_alias=AliasChoices("industry_status", "industryStatus"),
    )
    challenges: list[str] | None = None
    requirements: list[str] | None = None
    solutions: list[SolutionGroup] | None = None
    benefits: list[Benefit] | None = None
    features: list[Feature] | None = None
    faq: list[FAQItem] | None = None


class ViewModel(BaseModel):
    """Fully defaulted projection of a ContentDocument. Built by ``normalize``."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    image: str
    description: Description = Field(default_factory=Description)
    industry_status: IndustryStatus = Field(default_factory=IndustryStatus)
    challenges: tuple[str, ...] = ()
    requirements: tuple[str, ...] = ()
    solutions: tuple[SolutionGroup, ...] = ()
    benefits: tuple[Benefit, ...] = ()
    features: tuple[Feature, ...] = ()
    faq: tuple[FAQItem, ...] = ()
