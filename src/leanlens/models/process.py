"""Process description records supplied to the analysis engine."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import Field, model_validator

from leanlens.models.base import LeanLensModel
from leanlens.types import AssessmentId, AssessmentStatus, ProcessFrequency, ProcessId, StepId


class ProcessStep(LeanLensModel):
    """One unit of work within a process."""

    id: StepId
    name: str
    description: str = ""
    responsible_role: str = ""
    estimated_duration: int = Field(default=0, ge=0)  # minutes
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    pain_points: tuple[str, ...] = ()


class Process(LeanLensModel):
    """A business process: ordered steps plus descriptive context.

    Step order is the execution sequence and is the only source of
    previous/next relationships between steps.
    """

    id: ProcessId
    name: str
    purpose: str = ""
    trigger: str = ""
    frequency: ProcessFrequency = ProcessFrequency.AD_HOC
    steps: tuple[ProcessStep, ...] = ()
    stakeholders: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _unique_step_ids(self) -> Process:
        seen: set[str] = set()
        for step in self.steps:
            if step.id in seen:
                raise ValueError(f"Duplicate step id '{step.id}' in process '{self.name}'")
            seen.add(step.id)
        return self

    def get_step(self, step_id: StepId) -> ProcessStep | None:
        """Return the step with *step_id*, or ``None``."""
        for step in self.steps:
            if step.id == step_id:
                return step
        return None


class ProcessAssessment(LeanLensModel):
    """Bookkeeping record for one pass through the intake flow."""

    id: AssessmentId
    process_id: ProcessId
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    status: AssessmentStatus = AssessmentStatus.IN_PROGRESS
    current_step: int = 0
    answers: dict[str, Any] = Field(default_factory=dict)
