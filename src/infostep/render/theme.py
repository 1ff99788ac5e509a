"""Style resolution for rendered infographics.

Maps StyleOptions and IconHint values to rich boxes, colors and glyphs.
"""

from rich import box
from rich.box import Box
from rich.terminal_theme import TerminalTheme

from ..constants import BRAND_TEXT
from ..models import BorderVariant, CornerStyle, IconHint, StyleOptions

DASHED_SQUARE: Box = Box(
    "┌╌┬┐\n"
    "╎ ╎╎\n"
    "├╌┼┤\n"
    "╎ ╎╎\n"
    "├╌┼┤\n"
    "├╌┼┤\n"
    "╎ ╎╎\n"
    "└╌┴┘\n"
)

DASHED_ROUNDED: Box = Box(
    "╭╌┬╮\n"
    "╎ ╎╎\n"
    "├╌┼┤\n"
    "╎ ╎╎\n"
    "├╌┼┤\n"
    "├╌┼┤\n"
    "╎ ╎╎\n"
    "╰╌┴╯\n"
)

BLANK: Box = Box(
    "    \n"
    "    \n"
    "    \n"
    "    \n"
    "    \n"
    "    \n"
    "    \n"
    "    \n"
)

ICON_GLYPHS: dict[IconHint, str] = {
    IconHint.ARROW: "→",
    IconHint.CHECKMARK: "✔",
}
UNKNOWN_GLYPH = "?"

LIGHT_TEXT = "#FFFFFF"


def glyph_for(icon: IconHint | None) -> str:
    """Return the glyph drawn for an icon hint."""
    if icon is None:
        return UNKNOWN_GLYPH
    return ICON_GLYPHS.get(icon, UNKNOWN_GLYPH)


def card_box(style: StyleOptions) -> Box:
    """Pick the card border from corner style and border variant."""
    if style.border_variant is BorderVariant.NONE:
        return BLANK
    sharp = style.corner_style is CornerStyle.SHARP
    if style.border_variant is BorderVariant.DASHED:
        return DASHED_SQUARE if sharp else DASHED_ROUNDED
    return box.SQUARE if sharp else box.ROUNDED


def card_padding(style: StyleOptions) -> tuple[int, int]:
    """Return (vertical, horizontal) padding inside a card."""
    if style.corner_style is CornerStyle.EXTRA_SOFT:
        return (1, 3)
    return (0, 2) if style.corner_style is CornerStyle.SOFT else (0, 1)


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert ``#RRGGBB`` to an RGB tuple."""
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def text_color(background: str) -> str:
    """Return a text color readable on the given background."""
    red, green, blue = hex_to_rgb(background)
    luminance = 0.2126 * red + 0.7152 * green + 0.0722 * blue
    return BRAND_TEXT if luminance > 140 else LIGHT_TEXT


def export_theme(style: StyleOptions) -> TerminalTheme:
    """Build the export theme for a style's background color."""
    return TerminalTheme(
        hex_to_rgb(style.background_color),
        hex_to_rgb(text_color(style.background_color)),
        [
            (26, 38, 51),
            (176, 58, 46),
            (143, 145, 133),
            (196, 160, 0),
            (3, 79, 128),
            (118, 68, 138),
            (46, 59, 74),
            (228, 223, 217),
        ],
    )
