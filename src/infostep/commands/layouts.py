"""Layouts command implementation."""

from rich.table import Table

from ..constants import LAYOUT_OPTIONS
from ..output import get_output_context


def layouts_cmd() -> None:
    """List available infographic layouts."""
    ctx = get_output_context()

    ctx.print_json(
        {
            "layouts": [
                {"id": layout_id, "label": label, "description": description}
                for layout_id, label, description in LAYOUT_OPTIONS
            ]
        }
    )

    table = Table(title="Layouts")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Label", style="bold")
    table.add_column("Description")
    for layout_id, label, description in LAYOUT_OPTIONS:
        table.add_row(layout_id, label, description)
    ctx.print(table)
