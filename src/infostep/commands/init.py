"""Init command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from ..config import CONFIG_FILE_NAME, get_config_dir, write_config_template
from ..output import get_output_context


def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file"),
    ] = False,
) -> None:
    """Create .infostep/config.toml in the current directory."""
    ctx = get_output_context()

    config_dir = get_config_dir(Path.cwd())
    config_path = config_dir / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        return

    write_config_template(config_dir)
    ctx.success(f"Created config template: {config_path}", data={"path": str(config_path)})
