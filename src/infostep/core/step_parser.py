"""Text-to-structure parsing for infostep.

Recognizes two input shapes:

- arrow chains: ``Start -> Process -> End``
- line lists: ``1. Plan: Define scope`` (one step per line)

and produces a ParsedDocument. Parsing is pure: no I/O and no state
shared between calls.
"""

import logging
import re

from ..errors import EmptyInputError, NoStepsFoundError
from ..models import IconHint, ParsedDocument, ParseMode, Step
from .templates import DEFAULT_TEMPLATES, ParserTemplates

logger = logging.getLogger(__name__)

MIN_INPUT_LENGTH = 3
MAX_TITLE_LINE_LENGTH = 50
ARROW = "->"
TITLE_PREFIX = "title:"

_NEWLINE = re.compile(r"\r\n|\r|\n")
# Enumeration ("1.", "2)"), arrow anywhere, or leading bullet
_STRUCTURAL_MARKER = re.compile(r"^[0-9]+[.)]|->|^[•\-*]")
_ENUMERATION = re.compile(r"^[0-9]+[.)]\s*")
_HEAD_TAIL = re.compile(r"[:\-\n]")


def normalize_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines."""
    return [line.strip() for line in _NEWLINE.split(text) if line.strip()]


def split_head_tail(segment: str) -> tuple[str, str]:
    """Split a segment into title and description parts.

    The head is everything before the first colon, hyphen or newline.
    The remaining pieces are joined with single spaces.

    Args:
        segment: Text of one step

    Returns:
        Tuple of (trimmed head, trimmed tail)
    """
    head, *tail = _HEAD_TAIL.split(segment)
    return head.strip(), " ".join(tail).strip()


def extract_title(lines: list[str], templates: ParserTemplates) -> tuple[str, list[str]]:
    """Pick the document title, consuming the first line when it is one.

    Args:
        lines: Normalized input lines
        templates: Placeholder strings

    Returns:
        Tuple of (title, remaining lines)
    """
    if not lines:
        return templates.default_title, lines

    first = lines[0]
    if first.lower().startswith(TITLE_PREFIX):
        return first[len(TITLE_PREFIX) :].strip(), lines[1:]

    if (
        len(lines) > 1
        and len(first) < MAX_TITLE_LINE_LENGTH
        and not _STRUCTURAL_MARKER.search(first)
    ):
        return first, lines[1:]

    return templates.default_title, lines


def _make_step(index: int, segment: str, icon: IconHint, template: str) -> Step:
    title, description = split_head_tail(segment)
    return Step(
        id=f"step-{index}",
        number=index + 1,
        title=title,
        description=description or template.format(title=title).strip(),
        icon=icon,
    )


def parse_arrow_steps(content: str, templates: ParserTemplates = DEFAULT_TEMPLATES) -> list[Step]:
    """Parse an arrow-delimited content block.

    Empty segments (e.g. between consecutive arrows) are dropped.
    """
    segments = [part.strip() for part in content.split(ARROW)]
    segments = [part for part in segments if part]
    return [
        _make_step(i, segment, IconHint.ARROW, templates.arrow_description)
        for i, segment in enumerate(segments)
    ]


def parse_line_steps(
    lines: list[str], templates: ParserTemplates = DEFAULT_TEMPLATES
) -> list[Step]:
    """Parse one step per line, stripping enumeration markers."""
    return [
        _make_step(
            i,
            _ENUMERATION.sub("", line, count=1).strip(),
            IconHint.CHECKMARK,
            templates.line_description,
        )
        for i, line in enumerate(lines)
    ]


def parse(text: str, templates: ParserTemplates = DEFAULT_TEMPLATES) -> ParsedDocument:
    """Parse free-form process text into a document.

    Args:
        text: Raw input text
        templates: Placeholder strings for defaulted fields

    Returns:
        ParsedDocument with at least one step

    Raises:
        EmptyInputError: If the trimmed input is shorter than 3 characters
        NoStepsFoundError: If no steps could be extracted
    """
    if len(text.strip()) < MIN_INPUT_LENGTH:
        raise EmptyInputError()

    lines = normalize_lines(text)
    title, lines = extract_title(lines, templates)

    content = "\n".join(lines)
    if ARROW in content:
        mode = ParseMode.ARROW
        steps = parse_arrow_steps(content, templates)
    else:
        mode = ParseMode.LINE
        steps = parse_line_steps(lines, templates)

    logger.debug(f"Parsed {len(steps)} steps in {mode.value} mode")

    if not steps:
        raise NoStepsFoundError()

    return ParsedDocument(
        title=title,
        subtitle=templates.default_subtitle,
        steps=tuple(steps),
        mode=mode,
    )
