"""Main Typer application for the leanlens CLI."""

from __future__ import annotations

import logging

import typer

from leanlens._version import __version__
from leanlens.config import get_config
from leanlens_cli.commands.analyze import analyze
from leanlens_cli.commands.check import check
from leanlens_cli.commands.history import clear, list_assessments
from leanlens_cli.commands.init import init
from leanlens_cli.commands.show import show

app = typer.Typer(
    name="leanlens",
    help="LeanLens -- Lean process assessment CLI.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"leanlens {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """LeanLens -- Lean process assessment CLI."""
    level = "DEBUG" if verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


app.command(name="init")(init)
app.command(name="analyze")(analyze)
app.command(name="show")(show)
app.command(name="list")(list_assessments)
app.command(name="clear")(clear)
app.command(name="check")(check)
