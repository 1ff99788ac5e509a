"""Export command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from ..completions import (
    complete_border_variant,
    complete_corner_style,
    complete_export_format,
    complete_input_file,
    complete_layout,
)
from ..errors import ExportError
from ..models import BorderVariant, CornerStyle, ExportFormat, LayoutType
from ..output import get_output_context
from ..render import write_export
from .common import load_settings, parse_input, resolve_style


def export_cmd(
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
    fmt: Annotated[
        ExportFormat | None,
        typer.Option("--format", "-f", help="Export format", autocompletion=complete_export_format),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: timestamped file)"),
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
        typer.Option("--background", "-b", help="Background color override (#RRGGBB)"),
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
    """Export a process infographic as SVG, HTML or text.

    If --output is not specified, writes infostep-{timestamp}.{ext} to the
    configured export directory.
    """
    ctx = get_output_context()
    config = load_settings()
    document = parse_input(file, text, config)
    style = resolve_style(config, accent=accent, corner=corner, border=border)
    chosen_format = fmt or config.export.format
    chosen_layout = layout or config.render.layout

    try:
        path = write_export(
            document,
            chosen_layout,
            style,
            chosen_format,
            output=output,
            output_dir=config.export.output_dir,
            background=background,
            width=config.export.width,
        )
    except ExportError as e:
        ctx.error(str(e), hint="Check the background color and output path.")
        raise typer.Exit(2) from None

    ctx.success(
        f"Exported {chosen_format.value} to {path}",
        data={"path": str(path), "format": chosen_format.value, "layout": chosen_layout.value},
    )
