"""``leanlens show`` -- Display a saved analysis."""

from __future__ import annotations

import typer
from rich.console import Console

from leanlens.storage import AssessmentRepository
from leanlens.types import ProcessId
from leanlens_cli.ui.panels import error_panel
from leanlens_cli.ui.report import render_analysis


def show(
    process_id: str = typer.Argument(..., help="Id of a previously analyzed process."),  # noqa: B008
    as_json: bool = typer.Option(  # noqa: B008
        False,
        "--json",
        help="Print the analysis as JSON instead of a report.",
    ),
) -> None:
    """Show the stored analysis for a process."""
    console = Console()
    repo = AssessmentRepository.from_config()

    analysis = repo.load_analysis(ProcessId(process_id))
    if analysis is None:
        error_panel("Not found", f"No analysis stored for process '{process_id}'.", console=console)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(analysis.model_dump_json(by_alias=True, indent=2))
        return

    render_analysis(analysis, repo.load_process(ProcessId(process_id)), console=console)
