"""``leanlens init`` -- Write a starter process description."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.prompt import Confirm

from leanlens_cli.ui.panels import success_panel

_PROCESS_TEMPLATE = """\
# LeanLens -- Process Description
# Steps run in the order listed. Durations are in minutes.
# frequency: multiple_daily | daily | weekly | monthly | quarterly | ad_hoc

name: "{name}"
purpose: "Describe what this process achieves"
trigger: "What starts the process"
frequency: weekly
stakeholders: "Finance, Operations"

steps:
  - name: "Collect invoices"
    description: "Gather supplier invoices from the shared inbox"
    responsibleRole: "AP Clerk"
    estimatedDuration: 30
    tools: "Outlook, Excel"
    outputs: "Invoice batch"
    painPoints: |
      Manual data entry into the spreadsheet
      Often have to search for missing attachments
  - name: "Manager sign-off"
    description: "Manager reviews and signs off the batch"
    responsibleRole: "Finance Manager"
    estimatedDuration: 120
    painPoints: |
      Waiting for approval when the manager is travelling
"""


def init(
    name: str = typer.Option("My Process", "--name", "-n", help="Process name."),  # noqa: B008
    output: Path = typer.Option(  # noqa: B008
        Path("process.yaml"),
        "--output",
        "-o",
        help="File to write.",
    ),
) -> None:
    """Create a starter process description to edit and analyze."""
    console = Console()

    if output.exists() and not Confirm.ask(
        f"[bold yellow]{output}[/bold yellow] already exists. Overwrite?",
        default=False,
        console=console,
    ):
        console.print(f"  [dim]Skipped:[/dim] {output}")
        raise typer.Exit

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_PROCESS_TEMPLATE.format(name=name), encoding="utf-8")
    success_panel(
        "Done",
        f"Wrote {output}\nEdit it, then run: [bold]leanlens analyze {output}[/bold]",
        console=console,
    )
