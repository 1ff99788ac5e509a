"""Render command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from ..completions import (
    complete_border_variant,
    complete_corner_style,
    complete_input_file,
    complete_layout,
)
from ..models import BorderVariant, CornerStyle, LayoutType
from ..output import get_output_context
from ..render import render
from .common import load_settings, parse_input, resolve_style


def render_cmd(
    file: Annotated[
        Path | None,
        typer.Argument(
            help="Text file with the process description ('-' for stdin)",
            autocompletion=complete_input_file,
        ),
    ] = None,
    text: Annotated[
        str | None,
        typer.Option("--text", "-t", help="Process description given inline"),
    ] = None,
    layout: Annotated[
        LayoutType | None,
        typer.Option("--layout", "-l", help="Layout", autocompletion=complete_layout),
    ] = None,
    accent: Annotated[
        str | None,
        typer.Option("--accent", "-a", help="Accent color (#RRGGBB)"),
    ] = None,
    background: Annotated[
        str | None,
        typer.Option("--background", "-b", help="Background color (#RRGGBB)"),
    ] = None,
    corner: Annotated[
        CornerStyle | None,
        typer.Option("--corner", help="Corner style", autocompletion=complete_corner_style),
    ] = None,
    border: Annotated[
        BorderVariant | None,
        typer.Option("--border", help="Border style", autocompletion=complete_border_variant),
    ] = None,
) -> None:
    """Draw a process description as an infographic in the terminal.

    Unset options fall back to .infostep/config.toml, then to defaults.
    """
    ctx = get_output_context()
    config = load_settings()
    document = parse_input(file, text, config)
    style = resolve_style(
        config, accent=accent, background=background, corner=corner, border=border
    )
    chosen = layout or config.render.layout

    if ctx.json_mode:
        ctx.print_json(
            {
                "layout": chosen.value,
                "style": style.model_dump(mode="json"),
                "document": document.model_dump(mode="json"),
            }
        )
        return

    renderable = render(document, chosen, style)
    if config.render.width:
        ctx.console.print(renderable, width=config.render.width)
    else:
        ctx.console.print(renderable)
