"""Terminal rendering of parsed documents.

Each layout is a pure function of (document, style) returning a rich
renderable. Rendering performs no validation of document content: empty
titles or descriptions render as empty text.
"""

from collections.abc import Callable

from rich.align import Align
from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..constants import BRAND_MUTED, BRAND_PRIMARY
from ..models import LayoutType, ParsedDocument, Step, StyleOptions
from .theme import card_box, card_padding, glyph_for, text_color

COLUMN_CARD_WIDTH = 32
PROGRESS_BAR_WIDTH = 30


def _number(step: Step) -> str:
    return f"{step.number:02d}"


def _header(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    parts: list[RenderableType] = [
        Align.center(Text(document.title, style=f"bold {text_color(style.background_color)}"))
    ]
    if document.subtitle:
        parts.append(Align.center(Text(document.subtitle, style=f"italic {BRAND_MUTED}")))
    parts.append(Rule(style=style.accent_color))
    return Group(*parts)


def _step_heading(step: Step, style: StyleOptions) -> Text:
    return Text.assemble(
        (f"{glyph_for(step.icon)} ", style.accent_color),
        (step.title, "bold"),
    )


def _card(
    step: Step,
    style: StyleOptions,
    *,
    border_color: str | None = None,
    width: int | None = None,
) -> Panel:
    body = Group(
        _step_heading(step, style),
        Text(step.description),
    )
    return Panel(
        body,
        title=Text(_number(step), style=f"bold {BRAND_PRIMARY}"),
        title_align="left",
        box=card_box(style),
        border_style=border_color or style.accent_color,
        padding=card_padding(style),
        width=width,
    )


def render_vertical_cards(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    """Full-width cards stacked top to bottom."""
    cards = [
        _card(
            step,
            style,
            border_color=BRAND_PRIMARY if i % 2 == 0 else style.accent_color,
        )
        for i, step in enumerate(document.steps)
    ]
    return Group(_header(document, style), *cards)


def render_horizontal_steps(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    """Steps side by side in a single row, joined by arrows."""
    grid = Table.grid(expand=True, padding=(0, 1))
    cells: list[RenderableType] = []
    for i, step in enumerate(document.steps):
        if i > 0:
            grid.add_column(justify="center", vertical="middle")
            cells.append(Text("→", style=style.accent_color))
        grid.add_column(ratio=1)
        cells.append(_card(step, style))
    grid.add_row(*cells)
    return Group(_header(document, style), grid)


def render_radial_process(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    """Document title in a central card, steps alternating around it."""
    left = [_card(step, style) for step in document.steps[0::2]]
    right = [_card(step, style) for step in document.steps[1::2]]
    core = Panel(
        Align.center(Text(document.title, style="bold"), vertical="middle"),
        box=card_box(style),
        border_style=BRAND_PRIMARY,
        padding=(2, 2),
    )
    grid = Table.grid(expand=True, padding=(0, 2))
    grid.add_column(ratio=2)
    grid.add_column(ratio=1, vertical="middle")
    grid.add_column(ratio=2)
    grid.add_row(Group(*left), core, Group(*right))
    return Group(_header(document, style), grid)


def render_timeline_flow(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    """Vertical timeline with numbered nodes and connectors."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="right", no_wrap=True)
    grid.add_column()
    last = len(document.steps) - 1
    for i, step in enumerate(document.steps):
        node = Text.assemble((_number(step), "bold"), " ", ("●", style.accent_color))
        grid.add_row(node, _step_heading(step, style))
        connector = Text("│", style=style.accent_color) if i < last else Text("")
        grid.add_row(connector, Text(step.description, style=BRAND_MUTED))
    return Group(_header(document, style), Padding(grid, (0, 4)))


def render_circular_progress(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    """One progress bar per step, filled to its share of the process."""
    total = len(document.steps)
    grid = Table.grid(padding=(0, 2))
    grid.add_column(no_wrap=True)
    grid.add_column()
    grid.add_column(justify="right", no_wrap=True)
    for step in document.steps:
        bar = ProgressBar(
            total=total,
            completed=step.number,
            width=PROGRESS_BAR_WIDTH,
            complete_style=style.accent_color,
            finished_style=BRAND_PRIMARY,
        )
        grid.add_row(
            _step_heading(step, style),
            bar,
            Text(f"{round(step.number / total * 100)}%", style="bold"),
        )
        grid.add_row(Text(step.description, style=BRAND_MUTED), "", "")
    return Group(_header(document, style), grid)


def render_multi_column(document: ParsedDocument, style: StyleOptions) -> RenderableType:
    """Fixed-width cards flowed into as many columns as fit."""
    cards = [_card(step, style, width=COLUMN_CARD_WIDTH) for step in document.steps]
    return Group(_header(document, style), Columns(cards, equal=True, expand=True))


LAYOUT_RENDERERS: dict[LayoutType, Callable[[ParsedDocument, StyleOptions], RenderableType]] = {
    LayoutType.VERTICAL_CARDS: render_vertical_cards,
    LayoutType.HORIZONTAL_STEPS: render_horizontal_steps,
    LayoutType.RADIAL_PROCESS: render_radial_process,
    LayoutType.TIMELINE_FLOW: render_timeline_flow,
    LayoutType.CIRCULAR_PROGRESS: render_circular_progress,
    LayoutType.MULTI_COLUMN: render_multi_column,
}


def render(
    document: ParsedDocument,
    layout: LayoutType = LayoutType.VERTICAL_CARDS,
    style: StyleOptions | None = None,
) -> RenderableType:
    """Render a parsed document as an infographic.

    Args:
        document: Parsed document to draw
        layout: Layout to use
        style: Colors, corners and borders (defaults when omitted)

    Returns:
        Rich renderable filling the style's background color
    """
    style = style or StyleOptions()
    body = LAYOUT_RENDERERS[LayoutType(layout)](document, style)
    return Padding(
        body,
        (1, 2),
        style=f"{text_color(style.background_color)} on {style.background_color}",
        expand=True,
    )
