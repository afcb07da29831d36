"""Click CLI entry point for the industry page controller."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from industry_page.config import Settings
from industry_page.controller import PageController
from industry_page.logging import configure_logging
from industry_page.models.state import PageKind
from industry_page.renderer import marker_ids
from industry_page.window import SimulatedWindow


def _load_document(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}", param_hint="DOCUMENT") from exc


def _parse_offsets(value: str) -> list[float]:
    try:
        return [float(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise click.BadParameter(f"expected comma-separated numbers, got {value!r}") from exc


def _build(
    document: Any,
    kind: str,
    parent: str | None,
    viewport_height: float,
    section_height: float,
    settings: Settings,
) -> tuple[PageController, SimulatedWindow]:
    window = SimulatedWindow(viewport_height=viewport_height)
    controller = PageController(
        document, source=window, kind=kind, parent_title=parent, settings=settings
    )
    # Hero banner occupies the first section_height pixels; revealable regions stack below it.
    window.stack(marker_ids(controller.view_model), start=section_height, height=section_height)
    return controller, window


_kind_option = click.option(
    "--kind",
    type=click.Choice([k.value for k in PageKind], case_sensitive=False),
    default=PageKind.INDUSTRY.value,
    help="Page kind",
)
_parent_option = click.option("--parent", default=None, help="Parent section label for breadcrumbs")
_viewport_option = click.option(
    "--viewport-height", default=800.0, type=float, help="Simulated viewport height (px)"
)
_section_option = click.option(
    "--section-height", default=400.0, type=float, help="Simulated height of each section (px)"
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Render industry/service detail pages and replay scroll sessions."""
    ctx.ensure_object(dict)
    settings = Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_kind_option
@_parent_option
@click.option("--scroll-y", default=0.0, type=float, help="Scroll offset at mount (px)")
@_viewport_option
@_section_option
@click.option("-o", "--output", type=click.File("w"), default="-", help="Output file (default stdout)")
@click.pass_context
def render(
    ctx: click.Context,
    document: Path,
    kind: str,
    parent: str | None,
    scroll_y: float,
    viewport_height: float,
    section_height: float,
    output: Any,
) -> None:
    """Render DOCUMENT (JSON) to HTML."""
    controller, window = _build(
        _load_document(document), kind, parent, viewport_height, section_height, ctx.obj["settings"]
    )
    window.scroll(scroll_y)
    with controller:
        output.write(controller.render())


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--offsets", required=True, help="Comma-separated scroll offsets to replay")
@_kind_option
@_parent_option
@_viewport_option
@_section_option
@click.pass_context
def simulate(
    ctx: click.Context,
    document: Path,
    offsets: str,
    kind: str,
    parent: str | None,
    viewport_height: float,
    section_height: float,
) -> None:
    """Replay scroll OFFSETS against DOCUMENT, printing state as JSON lines."""
    steps = _parse_offsets(offsets)
    controller, window = _build(
        _load_document(document), kind, parent, viewport_height, section_height, ctx.obj["settings"]
    )
    with controller:
        for offset in steps:
            window.scroll(offset)
            state = controller.scroll_state
            click.echo(
                json.dumps(
                    {
                        "offset": offset,
                        "is_sticky": state.is_sticky,
                        "show_back_to_top": state.show_back_to_top,
                        "revealed": sorted(k for k, v in controller.visibility.items() if v),
                        "faulted": controller.faulted,
                    }
                )
            )
