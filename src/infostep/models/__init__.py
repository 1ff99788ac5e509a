"""Pydantic data models for infostep.

This package defines the data structures shared by the parser,
renderer and exporter:
- Parsed steps and their icon hints (Step, IconHint)
- Parse results (ParsedDocument, ParseMode)
- Rendering options (StyleOptions, LayoutType, CornerStyle, BorderVariant)
- Export formats (ExportFormat)

Example:
    >>> from infostep.models import StyleOptions
    >>> StyleOptions(accent_color="#8f9185").accent_color
    '#8F9185'
"""

from .document import ParsedDocument, ParseMode
from .step import IconHint, Step
from .style import (
    BorderVariant,
    CornerStyle,
    ExportFormat,
    LayoutType,
    StyleOptions,
    validate_hex_color,
)

__all__ = [
    "BorderVariant",
    "CornerStyle",
    "ExportFormat",
    "IconHint",
    "LayoutType",
    "ParseMode",
    "ParsedDocument",
    "Step",
    "StyleOptions",
    "validate_hex_color",
]
