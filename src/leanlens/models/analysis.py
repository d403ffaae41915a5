"""Records produced by the analysis engine."""

from __future__ import annotations

from pydantic import Field

from leanlens.models.base import LeanLensModel
from leanlens.types import ProcessId, Severity, StepId, WasteType


class WasteInstance(LeanLensModel):
    """A single waste finding attributed to one step."""

    type: WasteType
    step_id: StepId
    description: str
    severity: Severity
    estimated_impact: str


class AutomationOpportunity(LeanLensModel):
    step_id: StepId
    potential: Severity
    complexity: Severity
    roi_potential: Severity
    suggested_tools: tuple[str, ...] = ()
    description: str = ""


class ProcessMetrics(LeanLensModel):
    lead_time: int = 0  # minutes
    cycle_time: int = 0  # minutes
    process_efficiency: int = 0  # percent
    first_pass_yield: int = 100  # percent
    touch_points: int = 0


class ProcessAnalysis(LeanLensModel):
    """Complete assessment of a process, created once per analysis call."""

    process_id: ProcessId
    metrics: ProcessMetrics
    wastes: tuple[WasteInstance, ...] = ()
    bottlenecks: tuple[StepId, ...] = ()
    automation_opportunities: tuple[AutomationOpportunity, ...] = ()
    overall_score: int = Field(ge=0, le=100)
    recommendations: tuple[str, ...] = ()
