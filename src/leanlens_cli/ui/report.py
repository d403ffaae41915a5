"""Render a :class:`~leanlens.models.ProcessAnalysis` for the terminal."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from leanlens.models import Process, ProcessAnalysis
from leanlens.scoring import score_label
from leanlens_cli.ui.panels import (
    ERROR,
    SUCCESS,
    WARNING,
    data_table,
    get_console,
    info_panel,
    opportunity_text,
    severity_text,
)


def _score_style(score: int) -> str:
    if score >= 80:
        return SUCCESS
    if score >= 40:
        return WARNING
    return ERROR


def render_analysis(
    analysis: ProcessAnalysis,
    process: Process | None = None,
    *,
    console: Console | None = None,
) -> None:
    """Print the score, metrics, findings, and recommendations.

    Step names are resolved through *process* when it is available;
    otherwise step ids are shown.
    """
    if console is None:
        console = get_console()

    names = {step.id: step.name for step in process.steps} if process is not None else {}

    def step_name(step_id: str) -> str:
        return escape(names.get(step_id, step_id))

    title = escape(process.name if process is not None else analysis.process_id)
    style = _score_style(analysis.overall_score)
    info_panel(
        f"Process Assessment: {title}",
        f"Overall score: [{style}]{analysis.overall_score}/100[/{style}] ({score_label(analysis.overall_score)})",
        console=console,
    )

    m = analysis.metrics
    data_table(
        "Metrics",
        ["Metric", "Value"],
        [
            ("Lead time", f"{m.lead_time} min"),
            ("Cycle time", f"{m.cycle_time} min"),
            ("Process efficiency", f"{m.process_efficiency}%"),
            ("First pass yield", f"{m.first_pass_yield}%"),
            ("Touch points", str(m.touch_points)),
        ],
        console=console,
    )

    if analysis.wastes:
        data_table(
            "Waste",
            ["Type", "Step", "Severity", "Description"],
            [
                (w.type.value, step_name(w.step_id), severity_text(w.severity.value), escape(w.description))
                for w in analysis.wastes
            ],
            console=console,
        )
    else:
        console.print("[dim]No waste detected.[/dim]")

    if analysis.bottlenecks:
        console.print("[bold]Bottlenecks:[/bold] " + ", ".join(step_name(s) for s in analysis.bottlenecks))

    data_table(
        "Automation",
        ["Step", "Potential", "Complexity", "ROI", "Tools"],
        [
            (
                step_name(o.step_id),
                opportunity_text(o.potential.value),
                severity_text(o.complexity.value),
                opportunity_text(o.roi_potential.value),
                escape(", ".join(o.suggested_tools)),
            )
            for o in analysis.automation_opportunities
        ],
        console=console,
    )

    if analysis.recommendations:
        console.print()
        console.print("[bold]Recommendations[/bold]")
        for i, rec in enumerate(analysis.recommendations, 1):
            console.print(f"  {i}. {escape(rec)}")
