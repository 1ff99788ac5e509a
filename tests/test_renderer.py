"""Tests for infographic rendering."""

import io

import pytest
from rich import box
from rich.console import Console

from infostep.core import parse
from infostep.models import (
    BorderVariant,
    CornerStyle,
    IconHint,
    LayoutType,
    ParsedDocument,
    StyleOptions,
)
from infostep.render import LAYOUT_RENDERERS, glyph_for, render
from infostep.render.theme import (
    BLANK,
    DASHED_ROUNDED,
    DASHED_SQUARE,
    card_box,
    card_padding,
    hex_to_rgb,
    text_color,
)


def render_text(document: ParsedDocument, layout: LayoutType, style: StyleOptions | None = None):
    output = io.StringIO()
    console = Console(file=output, width=100, force_terminal=False)
    console.print(render(document, layout, style))
    return output.getvalue()


def test_every_layout_has_a_renderer():
    assert set(LAYOUT_RENDERERS) == set(LayoutType)


@pytest.mark.parametrize("layout", list(LayoutType))
def test_layout_shows_title_and_steps(layout: LayoutType, numbered_document: ParsedDocument):
    text = render_text(numbered_document, layout)

    assert "Process Overview" in text
    for title in ("Plan", "Build", "Launch"):
        assert title in text


@pytest.mark.parametrize("layout", list(LayoutType))
def test_layout_handles_empty_titles(layout: LayoutType):
    document = parse("1.\n2.")
    assert document.steps[0].title == ""

    text = render_text(document, layout)
    assert "Process Overview" in text


@pytest.mark.parametrize("layout", list(LayoutType))
def test_layout_handles_single_step(layout: LayoutType):
    text = render_text(parse("OnlyOneLine"), layout)
    assert "OnlyOneLine" in text


@pytest.mark.parametrize("border", list(BorderVariant))
@pytest.mark.parametrize("corner", list(CornerStyle))
def test_all_styles_render(corner: CornerStyle, border: BorderVariant, arrow_text: str):
    style = StyleOptions(corner_style=corner, border_variant=border, background_color="#1A2633")
    text = render_text(parse(arrow_text), LayoutType.VERTICAL_CARDS, style)
    assert "Start" in text


def test_layout_accepts_string_identifier(numbered_document: ParsedDocument):
    text = render_text(numbered_document, "timeline-flow")  # type: ignore[arg-type]
    assert "Launch" in text


def test_arrow_steps_show_arrow_glyph(arrow_text: str):
    text = render_text(parse(arrow_text), LayoutType.VERTICAL_CARDS)
    assert "→" in text


class TestTheme:
    """Tests for style resolution."""

    def test_glyphs(self) -> None:
        assert glyph_for(IconHint.ARROW) == "→"
        assert glyph_for(IconHint.CHECKMARK) == "✔"
        assert glyph_for(None) == "?"

    @pytest.mark.parametrize(
        ("corner", "border", "expected"),
        [
            (CornerStyle.SHARP, BorderVariant.SOLID, box.SQUARE),
            (CornerStyle.SOFT, BorderVariant.SOLID, box.ROUNDED),
            (CornerStyle.EXTRA_SOFT, BorderVariant.SOLID, box.ROUNDED),
            (CornerStyle.SHARP, BorderVariant.DASHED, DASHED_SQUARE),
            (CornerStyle.SOFT, BorderVariant.DASHED, DASHED_ROUNDED),
            (CornerStyle.SOFT, BorderVariant.NONE, BLANK),
        ],
    )
    def test_card_box(self, corner, border, expected) -> None:
        style = StyleOptions(corner_style=corner, border_variant=border)
        assert card_box(style) is expected

    def test_extra_soft_pads_more(self) -> None:
        soft = card_padding(StyleOptions(corner_style=CornerStyle.SOFT))
        extra = card_padding(StyleOptions(corner_style=CornerStyle.EXTRA_SOFT))
        assert extra > soft

    def test_hex_to_rgb(self) -> None:
        assert hex_to_rgb("#034F80") == (3, 79, 128)

    def test_text_color_contrasts_background(self) -> None:
        assert text_color("#FFFFFF") == "#1A2633"
        assert text_color("#1A2633") == "#FFFFFF"
