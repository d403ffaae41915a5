"""Tests for the terminal report and styling helpers."""

from __future__ import annotations

from rich.console import Console

from leanlens.models import AutomationOpportunity, ProcessAnalysis, ProcessMetrics
from leanlens.types import ProcessId, Severity, StepId
from leanlens_cli.ui.panels import opportunity_text, severity_text
from leanlens_cli.ui.report import render_analysis


def _analysis(process_id: str = "p1") -> ProcessAnalysis:
    return ProcessAnalysis(
        process_id=ProcessId(process_id),
        metrics=ProcessMetrics(lead_time=30, cycle_time=30, process_efficiency=100, touch_points=1),
        automation_opportunities=[
            AutomationOpportunity(
                step_id=StepId("s1"),
                potential=Severity.HIGH,
                complexity=Severity.LOW,
                roi_potential=Severity.HIGH,
                suggested_tools=["n8n"],
            )
        ],
        overall_score=85,
    )


def _render(analysis: ProcessAnalysis) -> str:
    console = Console(record=True, width=120)
    render_analysis(analysis, console=console)
    return console.export_text()


class TestStyles:
    def test_waste_severity_high_is_red(self) -> None:
        assert severity_text("high") == "[bold red]high[/bold red]"

    def test_opportunity_high_is_green(self) -> None:
        assert opportunity_text("high") == "[bold green]high[/bold green]"
        assert opportunity_text("low") == "[dim]low[/dim]"

    def test_unknown_level_dimmed(self) -> None:
        assert opportunity_text("unknown") == "[dim]unknown[/dim]"


class TestRenderAnalysis:
    def test_without_process_uses_id(self) -> None:
        text = _render(_analysis())
        assert "Process Assessment: p1" in text
        assert "85/100" in text
        assert "No waste detected." in text

    def test_process_id_markup_is_escaped(self) -> None:
        text = _render(_analysis("[bold]p1"))
        assert "Process Assessment: [bold]p1" in text
