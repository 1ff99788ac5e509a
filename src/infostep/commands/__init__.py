"""CLI command implementations for infostep.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .export import export_cmd
from .init import init
from .layouts import layouts_cmd
from .parse import parse_cmd
from .render import render_cmd

__all__ = [
    "export_cmd",
    "init",
    "layouts_cmd",
    "parse_cmd",
    "render_cmd",
]
