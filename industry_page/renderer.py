"""Render a page snapshot to static HTML."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from industry_page.accordion import item_value
from industry_page.models.state import ImageLoadState, PageKind, ScrollState

if TYPE_CHECKING:
    from collections.abc import Mapping

    from industry_page.breadcrumbs import Breadcrumb
    from industry_page.models.content import ViewModel

logger = structlog.get_logger()

TEMPLATE_NAME = "industry_page.html"

HERO_MARKER = "section-1"
INTRO_MARKER = "section-2"
STATUS_MARKER = "section-3"

SERVICE_LINKS: tuple[tuple[str, str], ...] = (
    ("Healthcare & Life Sciences", "/services/healthcare-life-sciences"),
    ("Fintech & Banking", "/services/fintech-banking"),
    ("E-commerce & Retail", "/services/ecommerce-retail"),
    ("Education & E-Learning", "/services/education-elearning"),
    ("Manufacturing & Logistics", "/services/manufacturing-logistics"),
)

CONTACT_LINES: tuple[tuple[str, str], ...] = (
    ("phone", "+1 800 123 4567"),
    ("mail", "info@primelogic.com"),
    ("map-pin", "123 Main Street, Anytown"),
    ("clock", "Mon-Fri: 9:00 - 17:00"),
)

BROCHURE_IMAGE = "/placeholder.svg?height=400&width=300"

ERROR_TITLE = "Error Rendering Industry Design"
ERROR_TEXT = (
    "There was an error rendering this component. Please check the console for details."
)


@dataclass(frozen=True, slots=True)
class ImageView:
    state: ImageLoadState
    src: str


@dataclass(frozen=True)
class PageSnapshot:
    """Everything the renderer reads. Built by PageController.snapshot()."""

    view_model: ViewModel
    breadcrumbs: tuple[Breadcrumb, ...]
    kind: PageKind = PageKind.INDUSTRY
    scroll: ScrollState = field(default_factory=ScrollState)
    visibility: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))
    images: Mapping[str, ImageView] = field(default_factory=lambda: MappingProxyType({}))
    faq_open: int | None = None
    faulted: bool = False


def solution_marker(index: int) -> str:
    return f"solution-{index}"


def feature_marker(index: int) -> str:
    return f"feature-{index}"


def feature_image_key(index: int) -> str:
    return f"feature-{index}"


def marker_ids(view_model: ViewModel) -> tuple[str, ...]:
    """Identifiers of every progressively revealed region ``render_page`` emits."""
    return (
        HERO_MARKER,
        INTRO_MARKER,
        STATUS_MARKER,
        *(solution_marker(i) for i in range(len(view_model.solutions))),
        *(feature_marker(i) for i in range(len(view_model.features))),
    )


def render_page(snapshot: PageSnapshot) -> str:
    """Fill the page template. A faulted snapshot renders only the error panel."""
    if snapshot.faulted:
        return _fill_template(ERROR_TITLE, render_error_panel())

    vm = snapshot.view_model
    body = f"""
<div class="font-sans text-gray-800 dark:bg-white" data-page-kind="{escape(snapshot.kind.value)}" data-sticky="{_flag(snapshot.scroll.is_sticky)}">
  {_hero(vm.title, snapshot.breadcrumbs)}
  <main class="py-16">
    <div class="container mx-auto px-4">
      <div class="grid grid-cols-1 lg:grid-cols-3 gap-8">
        {_sidebar()}
        <div class="lg:col-span-2 order-1 lg:order-2">
          <div class="space-y-8">
            {_hero_image(snapshot)}
            {_intro(snapshot)}
            {_industry_status(snapshot)}
            {_solutions(snapshot)}
            {_benefits(vm)}
            {_features(snapshot)}
            {_faq(vm, snapshot.faq_open)}
            <div id="contact-form" data-component="contact-form"></div>
          </div>
        </div>
      </div>
    </div>
  </main>
  {_back_to_top(snapshot.scroll)}
</div>"""
    return _fill_template(vm.title, body)


def render_error_panel() -> str:
    return f"""
<div class="p-8 text-center" role="alert" data-page-state="error">
  <h2 class="text-2xl font-bold text-red-500">{escape(ERROR_TITLE)}</h2>
  <p class="mt-4">{escape(ERROR_TEXT)}</p>
</div>"""


def _fill_template(page_title: str, body: str) -> str:
    try:
        template_html = files("industry_page").joinpath("templates", TEMPLATE_NAME).read_text(
            encoding="utf-8"
        )
    except (FileNotFoundError, TypeError):
        logger.error("Page template not found", template=TEMPLATE_NAME)
        template_html = "<html><body>{{BODY}}</body></html>"

    head, _, tail = template_html.partition("{{BODY}}")
    return head.replace("{{PAGE_TITLE}}", escape(page_title)) + body + tail


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _reveal_attrs(snapshot: PageSnapshot, marker_id: str, delay: float = 0.0) -> str:
    revealed = snapshot.visibility.get(marker_id, False)
    state = "is-revealed" if revealed else "is-hidden"
    style = f' style="transition-delay: {delay:.1f}s"' if delay else ""
    return (
        f'data-aos="fade-up" id="{escape(marker_id)}" class="{state}" '
        f'data-revealed="{_flag(revealed)}"{style}'
    )


def _hero(title: str, breadcrumbs: tuple[Breadcrumb, ...]) -> str:
    crumbs = []
    for crumb in breadcrumbs:
        if crumb.href is None:
            crumbs.append(f'<span class="text-orange-500" aria-current="page">{escape(crumb.label)}</span>')
        else:
            crumbs.append(
                f'<a href="{escape(crumb.href)}" class="text-white hover:text-orange-500">'
                f"{escape(crumb.label)}</a>"
            )
    separator = '\n        <span class="text-white" aria-hidden="true">&rsaquo;</span>\n        '
    return f"""<div class="page-hero bg-[#003087] py-20 relative animate-fadeIn">
    <div class="container mx-auto px-4 text-center">
      <h1 class="text-4xl font-bold mb-4 text-white animate-slideUp">{escape(title)}</h1>
      <nav class="breadcrumbs flex items-center justify-center space-x-2 text-sm" aria-label="Breadcrumb">
        {separator.join(crumbs)}
      </nav>
    </div>
  </div>"""


def _sidebar() -> str:
    links = ""
    for label, href in SERVICE_LINKS:
        links += f"""
            <li><a href="{escape(href)}" class="sidebar-link flex items-center justify-between p-4 rounded-md"><span>{escape(label)}</span></a></li>"""

    contact = ""
    for icon, text in CONTACT_LINES:
        contact += f"""
          <div class="flex items-center space-x-3 mb-4" data-icon="{icon}"><span>{escape(text)}</span></div>"""

    return f"""<aside class="sidebar lg:col-span-1 order-2 lg:order-1 animate-slideRight">
          <div class="bg-gray-100 p-6 rounded-lg mb-8">
            <h3 class="text-xl font-bold mb-6 pb-4 border-b border-gray-300">All Services</h3>
            <ul class="space-y-4">{links}
            </ul>
          </div>
          <div class="text-white p-8 rounded-lg bg-[#003087]">
            <h3 class="text-xl text-white font-bold mb-6">Need Help?</h3>
            <p class="mb-6">Contact our customer support team if you have any questions.</p>{contact}
          </div>
          <div class="mt-8">
            <img src="{escape(BROCHURE_IMAGE)}" alt="Healthcare Brochure" width="300" height="400" class="w-full rounded-lg">
          </div>
        </aside>"""


def _hero_image(snapshot: PageSnapshot) -> str:
    vm = snapshot.view_model
    hero = snapshot.images.get("hero", ImageView(ImageLoadState.LOADING, vm.image))
    if hero.state is ImageLoadState.FAILED:
        inner = """<div class="image-empty w-full h-[500px] bg-gray-200 rounded-lg mb-8 flex items-center justify-center">
              <p class="text-gray-500">Image could not be loaded</p>
            </div>"""
    else:
        inner = (
            f'<img src="{escape(hero.src)}" alt="{escape(vm.title)}" data-image="hero" '
            f'class="w-full h-auto rounded-lg mb-8">'
        )
    return f"""<div {_reveal_attrs(snapshot, HERO_MARKER)}>
            {inner}
          </div>"""


def _intro(snapshot: PageSnapshot) -> str:
    vm = snapshot.view_model
    paragraphs = "".join(
        f'\n            <p class="mb-4 text-gray-700 leading-relaxed">{escape(p)}</p>'
        for p in vm.description.intro
    )
    conclusion = ""
    if vm.description.conclusion:
        conclusion = f'\n            <p class="conclusion mb-4 text-gray-700">{escape(vm.description.conclusion)}</p>'
    return f"""<div {_reveal_attrs(snapshot, INTRO_MARKER)}>
            <h2 class="text-3xl font-bold mb-6">{escape(vm.subtitle)}</h2>{paragraphs}{conclusion}
          </div>"""


def _bullets(items: tuple[str, ...], css_class: str) -> str:
    if not items:
        return ""
    lis = "".join(f"<li>{escape(item)}</li>" for item in items)
    return f'<ul class="{css_class}">{lis}</ul>'


def _industry_status(snapshot: PageSnapshot) -> str:
    vm = snapshot.view_model
    status = vm.industry_status
    parts = []
    if status.title or status.items:
        parts.append(f'<h3 class="text-2xl font-bold mb-4">{escape(status.title)}</h3>')
        parts.append(_bullets(status.items, "status-items"))
    if vm.challenges:
        parts.append(f'<h3 class="text-2xl font-bold mb-4">Challenges in {escape(vm.title)}</h3>')
        parts.append(_bullets(vm.challenges, "challenges"))
    if vm.requirements:
        parts.append('<h3 class="text-2xl font-bold mb-4">Key Requirements</h3>')
        parts.append(_bullets(vm.requirements, "requirements"))
    content = "".join(parts)
    return f"""<section {_reveal_attrs(snapshot, STATUS_MARKER)}>
            {content}
          </section>"""


def _solutions(snapshot: PageSnapshot) -> str:
    cards = ""
    for index, solution in enumerate(snapshot.view_model.solutions):
        cards += f"""
            <div {_reveal_attrs(snapshot, solution_marker(index), delay=index * 0.1)}>
              <div class="solution-card bg-white border border-gray-200 p-6 rounded-lg shadow-sm">
                <h4 class="text-xl font-bold mb-4">{escape(solution.title)}</h4>
                {_bullets(solution.items, "space-y-2")}
              </div>
            </div>"""
    return f'<div class="grid grid-cols-1 md:grid-cols-2 gap-6 mb-8">{cards}\n          </div>'


def _benefits(vm: ViewModel) -> str:
    if not vm.benefits:
        return ""
    cards = "".join(
        f"""
              <div class="benefit-card p-6 bg-gray-50 rounded-lg">
                <h4 class="text-lg font-semibold mb-2">{escape(b.title)}</h4>
                <p class="text-gray-700">{escape(b.description)}</p>
              </div>"""
        for b in vm.benefits
    )
    return f"""<div class="mb-12">
            <h3 class="text-2xl font-bold mb-6">Benefits</h3>
            <div class="grid grid-cols-1 md:grid-cols-2 gap-6">{cards}
            </div>
          </div>"""


def _features(snapshot: PageSnapshot) -> str:
    cards = ""
    for index, feature in enumerate(snapshot.view_model.features):
        image = ""
        if feature.image:
            view = snapshot.images.get(
                feature_image_key(index), ImageView(ImageLoadState.LOADING, feature.image)
            )
            image = (
                f'\n                  <div class="mt-4 overflow-hidden rounded-md">'
                f'<img src="{escape(view.src)}" alt="{escape(feature.title)}" '
                f'data-image="{feature_image_key(index)}" class="w-full h-auto"></div>'
            )
        cards += f"""
              <div {_reveal_attrs(snapshot, feature_marker(index), delay=index * 0.1)}>
                <div class="feature-card bg-white border border-gray-200 rounded-lg shadow-sm overflow-hidden p-6">
                  <h4 class="text-xl font-bold mb-2">{escape(feature.title)}</h4>
                  <p class="text-gray-700 mb-4">{escape(feature.description)}</p>{image}
                </div>
              </div>"""
    return f"""<div class="mb-12">
            <h3 class="text-2xl font-bold mb-6">Key Features</h3>
            <div class="grid grid-cols-1 md:grid-cols-2 gap-6">{cards}
            </div>
          </div>"""


def _faq(vm: ViewModel, open_index: int | None) -> str:
    items = ""
    for index, entry in enumerate(vm.faq):
        is_open = index == open_index
        state = "open" if is_open else "closed"
        items += f"""
              <div class="faq-item" data-value="{item_value(index)}" data-state="{state}">
                <button type="button" class="faq-trigger p-4 rounded-lg" aria-expanded="{_flag(is_open)}">
                  <span class="text-xl font-bold">{escape(entry.question)}</span>
                </button>
                <div class="faq-answer px-4 pt-2 pb-4"><p class="text-gray-700">{escape(entry.answer)}</p></div>
              </div>"""
    return f"""<div class="border-t border-b border-gray-200 py-8 my-8">
            <h3 class="text-2xl font-bold mb-6">Frequently Asked Questions</h3>
            <div class="faq-list space-y-4" data-accordion="single" data-collapsible="true">{items}
            </div>
          </div>"""


def _back_to_top(scroll: ScrollState) -> str:
    if not scroll.show_back_to_top:
        return ""
    return (
        '<button type="button" class="back-to-top fixed bottom-6 right-6 rounded-full w-12 h-12 p-0" '
        'data-action="scroll-to-top" aria-label="Back to top">&uarr;</button>'
    )
