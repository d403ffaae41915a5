"""``leanlens list`` / ``leanlens clear`` -- Manage saved assessments."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.prompt import Confirm

from leanlens.exceptions import StorageError
from leanlens.storage import AssessmentRepository
from leanlens_cli.ui.panels import data_table, error_panel, success_panel


def list_assessments() -> None:
    """List saved assessments."""
    console = Console()
    repo = AssessmentRepository.from_config()

    rows: list[tuple[str, str, str, str, str]] = []
    for assessment_id in repo.list_saved_assessments():
        assessment = repo.load_assessment(assessment_id)
        if assessment is None:
            continue
        process = repo.load_process(assessment.process_id)
        analysis = repo.load_analysis(assessment.process_id)
        rows.append(
            (
                assessment.process_id,
                process.name if process is not None else "?",
                assessment.status.value,
                str(analysis.overall_score) if analysis is not None else "-",
                assessment.created_at.strftime("%Y-%m-%d %H:%M"),
            )
        )

    if not rows:
        console.print("[dim]No saved assessments.[/dim]")
        return
    data_table("Saved Assessments", ["Process ID", "Name", "Status", "Score", "Created"], rows, console=console)


def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),  # noqa: B008
) -> None:
    """Delete all saved leanlens data."""
    console = Console()
    repo = AssessmentRepository.from_config()

    if not yes and not Confirm.ask(
        f"Delete all data in namespace [bold]{repo.namespace}[/bold]?", default=False, console=console
    ):
        console.print("[dim]Aborted.[/dim]")
        raise typer.Exit

    try:
        removed = repo.clear_all_data()
    except StorageError as exc:
        error_panel("Clear failed", str(exc), console=console)
        raise typer.Exit(code=1) from exc
    success_panel("Cleared", f"Removed {removed} records.", console=console)
