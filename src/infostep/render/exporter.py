"""Export of rendered infographics to SVG, HTML or plain text."""

import io
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from ..constants import EXPORT_WIDTH
from ..errors import ExportError
from ..models import ExportFormat, LayoutType, ParsedDocument, StyleOptions, validate_hex_color
from .renderer import render
from .theme import export_theme

logger = logging.getLogger(__name__)

FILE_EXTENSIONS: dict[ExportFormat, str] = {
    ExportFormat.SVG: "svg",
    ExportFormat.HTML: "html",
    ExportFormat.TXT: "txt",
}


def export(
    document: ParsedDocument,
    layout: LayoutType = LayoutType.VERTICAL_CARDS,
    style: StyleOptions | None = None,
    fmt: ExportFormat = ExportFormat.SVG,
    *,
    background: str | None = None,
    width: int = EXPORT_WIDTH,
) -> str:
    """Render a document and serialize the result.

    Args:
        document: Parsed document to export
        layout: Layout to render
        style: Style options (defaults when omitted)
        fmt: Target format
        background: Optional #RRGGBB color replacing the style background
        width: Console width in columns used for rendering

    Returns:
        Serialized artifact (SVG/HTML markup or plain text)

    Raises:
        ExportError: If the override color is invalid or serialization fails
    """
    style = style or StyleOptions()
    fmt = ExportFormat(fmt)
    try:
        if background is not None:
            style = style.model_copy(
                update={"background_color": validate_hex_color(background)}
            )
        console = Console(
            record=True,
            file=io.StringIO(),
            width=width,
            force_terminal=True,
            color_system="truecolor",
        )
        console.print(render(document, layout, style))
        theme = export_theme(style)
        if fmt is ExportFormat.SVG:
            return console.export_svg(title=document.title, theme=theme)
        if fmt is ExportFormat.HTML:
            return console.export_html(theme=theme, inline_styles=True)
        return console.export_text()
    except Exception as e:
        logger.debug(f"Export to {fmt.value} failed: {e}")
        raise ExportError("export failed") from e


def default_filename(fmt: ExportFormat, now: datetime | None = None) -> str:
    """Return a timestamped file name for an export."""
    now = now or datetime.now()
    return f"infostep-{now.strftime('%Y%m%d-%H%M%S')}.{FILE_EXTENSIONS[ExportFormat(fmt)]}"


def write_export(
    document: ParsedDocument,
    layout: LayoutType = LayoutType.VERTICAL_CARDS,
    style: StyleOptions | None = None,
    fmt: ExportFormat = ExportFormat.SVG,
    *,
    output: Path | None = None,
    output_dir: Path = Path("."),
    background: str | None = None,
    width: int = EXPORT_WIDTH,
) -> Path:
    """Export a document and write it to disk.

    Args:
        output: Explicit destination; a timestamped name in output_dir otherwise

    Returns:
        Path of the written artifact

    Raises:
        ExportError: If rendering or writing fails
    """
    fmt = ExportFormat(fmt)
    content = export(document, layout, style, fmt, background=background, width=width)
    path = output or output_dir / default_filename(fmt)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError("export failed") from e
    logger.info(f"Exported {fmt.value} to {path}")
    return path
