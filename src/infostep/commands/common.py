"""Shared helpers for infostep commands."""

import logging
import sys
import tomllib
from pathlib import Path

import typer
from pydantic import ValidationError

from ..config import InfostepConfig, get_config_dir, load_config
from ..core import parse
from ..errors import ParseError
from ..models import BorderVariant, CornerStyle, ParsedDocument, StyleOptions
from ..output import get_output_context

logger = logging.getLogger(__name__)

STDIN_PATH = Path("-")


def load_settings() -> InfostepConfig:
    """Load config for the current directory, exiting on invalid config."""
    ctx = get_output_context()
    config_dir = get_config_dir(Path.cwd())
    try:
        return load_config(config_dir)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        ctx.error(f"Invalid config in {config_dir}: {e}")
        raise typer.Exit(3) from None


def read_input(file: Path | None, text: str | None) -> str:
    """Return input text from --text, a file, or stdin.

    A file of "-" (or no file and no --text) reads stdin.
    """
    ctx = get_output_context()
    if text is not None:
        return text
    if file is None or file == STDIN_PATH:
        logger.debug("Reading input from stdin")
        try:
            return sys.stdin.read()
        except (UnicodeDecodeError, OSError) as e:
            ctx.error(f"Cannot read input from stdin: {e}")
            raise typer.Exit(1) from None
    if not file.is_file():
        ctx.error(f"Input file not found: {file}")
        raise typer.Exit(1)
    try:
        return file.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        ctx.error(f"Cannot read input file {file}: {e}")
        raise typer.Exit(1) from None


def parse_input(file: Path | None, text: str | None, config: InfostepConfig) -> ParsedDocument:
    """Read and parse input, exiting with the parse error message on failure."""
    ctx = get_output_context()
    raw = read_input(file, text)
    try:
        return parse(raw, config.templates)
    except ParseError as e:
        ctx.error(e.message, hint=e.hint)
        raise typer.Exit(1) from None


def resolve_style(
    config: InfostepConfig,
    *,
    accent: str | None = None,
    background: str | None = None,
    corner: CornerStyle | None = None,
    border: BorderVariant | None = None,
) -> StyleOptions:
    """Merge CLI style options over the configured style."""
    ctx = get_output_context()
    try:
        return config.style_with(
            accent_color=accent,
            background_color=background,
            corner_style=corner,
            border_variant=border,
        )
    except ValidationError as e:
        ctx.error(f"Invalid style option: {e.errors()[0]['msg']}")
        raise typer.Exit(3) from None
