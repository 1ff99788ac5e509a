"""Logging configuration for infostep CLI."""

import logging
import sys
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def resolve_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> LogLevel:
    """Pick the log level for CLI flags.

    Flag precedence: quiet > debug > verbosity.
    """
    if quiet:
        return LogLevel.QUIET
    if debug or verbosity >= 1:
        return LogLevel.VERBOSE
    return LogLevel.NORMAL


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO | None = None,
    debug: bool = False,
) -> Console:
    """Configure logging based on CLI options.

    Args:
        verbosity: Number of -v flags (1+ enables debug records)
        quiet: Suppress non-error output (takes precedence over debug/verbosity)
        no_color: Disable colored output
        stream: Output stream for log records (stderr when omitted)
        debug: Debug records with timestamps and source paths

    Returns:
        Rich console for regular (non-log) output
    """
    console = Console(no_color=no_color)
    handler = RichHandler(
        console=Console(file=stream or sys.stderr, no_color=no_color),
        show_time=debug and not quiet,
        show_path=debug and not quiet,
    )

    logging.basicConfig(
        level=resolve_level(verbosity, quiet, debug),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
