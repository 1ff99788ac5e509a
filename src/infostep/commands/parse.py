"""Parse command implementation."""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..completions import complete_input_file
from ..models import ParsedDocument
from ..output import get_output_context
from ..render import glyph_for
from .common import load_settings, parse_input


def _steps_table(document: ParsedDocument) -> Table:
    table = Table(title=document.title, caption=document.subtitle)
    table.add_column("#", justify="right", style="bold")
    table.add_column("", justify="center")
    table.add_column("Title", style="cyan")
    table.add_column("Description")
    for step in document.steps:
        table.add_row(str(step.number), glyph_for(step.icon), step.title, step.description)
    return table


def parse_cmd(
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
) -> None:
    """Parse a process description into titled steps."""
    ctx = get_output_context()
    config = load_settings()
    document = parse_input(file, text, config)

    ctx.print_json(document.model_dump(mode="json"))
    ctx.print(_steps_table(document))
    ctx.print(f"[dim]{len(document.steps)} steps ({document.mode.value} mode)[/dim]")
