"""infostep CLI: process descriptions to step infographics."""

import typer

from . import __version__
from .commands import export_cmd, init, layouts_cmd, parse_cmd, render_cmd
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"infostep {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="infostep",
    help="Turn free-form process descriptions into step infographics",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Show debug log records",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging with timestamps and source paths",
    ),
) -> None:
    """infostep - step infographics from plain text."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        debug=debug,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output))


app.command("parse")(parse_cmd)
app.command("render")(render_cmd)
app.command("export")(export_cmd)
app.command("layouts")(layouts_cmd)
app.command()(init)


if __name__ == "__main__":
    app()
