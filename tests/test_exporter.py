"""Tests for infographic export."""

from datetime import datetime
from pathlib import Path

import pytest

from infostep.errors import ExportError, InfostepError
from infostep.models import ExportFormat, LayoutType, ParsedDocument, StyleOptions
from infostep.render import default_filename, export, write_export


def test_text_export_contains_steps(numbered_document: ParsedDocument):
    text = export(numbered_document, fmt=ExportFormat.TXT)

    for title in ("Plan", "Build", "Launch"):
        assert title in text
    assert "<svg" not in text


def test_svg_export_uses_background_override(numbered_document: ParsedDocument):
    svg = export(
        numbered_document,
        LayoutType.MULTI_COLUMN,
        StyleOptions(background_color="#FFFFFF"),
        ExportFormat.SVG,
        background="#1a2633",
    )

    assert svg.lstrip().startswith("<svg")
    assert "#1a2633" in svg


def test_svg_export_uses_style_background(numbered_document: ParsedDocument):
    svg = export(
        numbered_document,
        style=StyleOptions(background_color="#EEEDE9"),
        fmt=ExportFormat.SVG,
    )
    assert "#eeede9" in svg


def test_html_export(numbered_document: ParsedDocument):
    html = export(numbered_document, LayoutType.TIMELINE_FLOW, fmt="html")  # type: ignore[arg-type]

    assert html.startswith("<!DOCTYPE html>")
    assert "Launch" in html
    assert "background-color: #ffffff" in html


@pytest.mark.parametrize("background", ["navy", "#12345", ""])
def test_invalid_background_raises_export_error(
    numbered_document: ParsedDocument, background: str
):
    with pytest.raises(ExportError) as exc_info:
        export(numbered_document, background=background)
    assert isinstance(exc_info.value, InfostepError)
    assert exc_info.value.__cause__ is not None


def test_default_filename():
    now = datetime(2026, 1, 4, 12, 0, 0)
    assert default_filename(ExportFormat.SVG, now) == "infostep-20260104-120000.svg"
    assert default_filename(ExportFormat.TXT, now) == "infostep-20260104-120000.txt"


def test_write_export_to_explicit_path(numbered_document: ParsedDocument, tmp_path: Path):
    target = tmp_path / "out" / "process.html"

    path = write_export(numbered_document, fmt=ExportFormat.HTML, output=target)

    assert path == target
    assert "Define scope" in target.read_text(encoding="utf-8")


def test_write_export_default_name(numbered_document: ParsedDocument, tmp_path: Path):
    path = write_export(numbered_document, fmt=ExportFormat.TXT, output_dir=tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("infostep-")
    assert path.suffix == ".txt"


def test_write_export_unwritable_target(numbered_document: ParsedDocument, tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(ExportError):
        write_export(numbered_document, fmt=ExportFormat.TXT, output=blocker / "out.txt")
