"""Pydantic records for processes, assessments, and analysis results."""

from leanlens.models.analysis import (
    AutomationOpportunity,
    ProcessAnalysis,
    ProcessMetrics,
    WasteInstance,
)
from leanlens.models.process import Process, ProcessAssessment, ProcessStep

__all__ = [
    "AutomationOpportunity",
    "Process",
    "ProcessAnalysis",
    "ProcessAssessment",
    "ProcessMetrics",
    "ProcessStep",
    "WasteInstance",
]
