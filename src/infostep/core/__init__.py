"""Core business logic for infostep.

This package contains pure logic with no external I/O:
- step_parser: Text-to-structure parsing
- templates: Placeholder strings used by the parser
"""

from .step_parser import (
    extract_title,
    normalize_lines,
    parse,
    parse_arrow_steps,
    parse_line_steps,
    split_head_tail,
)
from .templates import DEFAULT_TEMPLATES, ParserTemplates

__all__ = [
    "DEFAULT_TEMPLATES",
    "ParserTemplates",
    "extract_title",
    "normalize_lines",
    "parse",
    "parse_arrow_steps",
    "parse_line_steps",
    "split_head_tail",
]
