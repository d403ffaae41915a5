from __future__ import annotations

from enum import StrEnum
from typing import NewType

ProcessId = NewType("ProcessId", str)
StepId = NewType("StepId", str)
AssessmentId = NewType("AssessmentId", str)


class ProcessFrequency(StrEnum):
    MULTIPLE_DAILY = "multiple_daily"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    AD_HOC = "ad_hoc"


class WasteType(StrEnum):
    """The eight Lean (TIMWOODS) waste categories."""

    TRANSPORTATION = "transportation"
    INVENTORY = "inventory"
    MOTION = "motion"
    WAITING = "waiting"
    OVERPRODUCTION = "overproduction"
    OVERPROCESSING = "overprocessing"
    DEFECTS = "defects"
    SKILLS = "skills"


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AssessmentStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"
