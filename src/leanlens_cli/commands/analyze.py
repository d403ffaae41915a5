"""``leanlens analyze`` -- Assess a process description file."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from leanlens.analysis import analyze_process
from leanlens.exceptions import LeanLensError
from leanlens.ids import create_assessment_id
from leanlens.loader import load_process
from leanlens.models import ProcessAssessment
from leanlens.storage import AssessmentRepository
from leanlens.types import AssessmentStatus
from leanlens_cli.ui.panels import error_panel
from leanlens_cli.ui.report import render_analysis


def analyze(
    path: Path = typer.Argument(  # noqa: B008
        ...,
        help="Process description file (.yaml, .yml or .json).",
    ),
    save: bool = typer.Option(  # noqa: B008
        True,
        "--save/--no-save",
        help="Persist the process, its analysis, and an assessment record.",
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False,
        "--json",
        help="Print the analysis as JSON instead of a report.",
    ),
) -> None:
    """Analyze a process for waste, bottlenecks, and automation opportunities."""
    console = Console()

    try:
        process = load_process(path)
        analysis = analyze_process(process)
        if save:
            repo = AssessmentRepository.from_config()
            repo.save_process(process)
            repo.save_analysis(analysis)
            repo.save_assessment(
                ProcessAssessment(
                    id=create_assessment_id(),
                    process_id=process.id,
                    status=AssessmentStatus.COMPLETED,
                    current_step=3,
                    answers={"source": str(path)},
                )
            )
    except LeanLensError as exc:
        error_panel("Analysis failed", str(exc), console=console)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(analysis.model_dump_json(by_alias=True, indent=2))
        return

    render_analysis(analysis, process, console=console)
    if save:
        console.print(f"\n[dim]Saved as process {process.id}[/dim]")
