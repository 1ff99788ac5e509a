"""Presentation of parsed documents.

- renderer: Six terminal layouts built from rich renderables
- exporter: SVG, HTML and text export of a rendered layout
- theme: Boxes, colors and glyphs derived from StyleOptions
"""

from .exporter import default_filename, export, write_export
from .renderer import LAYOUT_RENDERERS, render
from .theme import glyph_for

__all__ = [
    "LAYOUT_RENDERERS",
    "default_filename",
    "export",
    "glyph_for",
    "render",
    "write_export",
]
