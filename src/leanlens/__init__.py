"""leanlens -- Lean process assessment engine.

Turns a described business process into efficiency metrics, TIMWOODS
waste findings, bottlenecks, automation opportunities, a 0-100 score, and
prioritized recommendations.

Quick start::

    from leanlens import analyze_process, load_process

    analysis = analyze_process(load_process("invoice.yaml"))
    print(analysis.overall_score)
"""

from leanlens._version import __version__
from leanlens.analysis import analyze_process
from leanlens.config import LeanLensConfig, get_config, reset_config
from leanlens.exceptions import LeanLensError, ProcessLoadError, StorageError
from leanlens.loader import load_process, parse_process, validate_process
from leanlens.models import (
    AutomationOpportunity,
    Process,
    ProcessAnalysis,
    ProcessAssessment,
    ProcessMetrics,
    ProcessStep,
    WasteInstance,
)
from leanlens.types import AssessmentStatus, ProcessFrequency, Severity, WasteType

__all__ = [
    "__version__",
    "AssessmentStatus",
    "AutomationOpportunity",
    "LeanLensConfig",
    "LeanLensError",
    "Process",
    "ProcessAnalysis",
    "ProcessAssessment",
    "ProcessFrequency",
    "ProcessLoadError",
    "ProcessMetrics",
    "ProcessStep",
    "Severity",
    "StorageError",
    "WasteInstance",
    "WasteType",
    "analyze_process",
    "get_config",
    "load_process",
    "parse_process",
    "reset_config",
    "validate_process",
]
