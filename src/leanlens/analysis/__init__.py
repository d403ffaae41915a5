"""Process analysis engine -- metrics, waste, bottlenecks, and automation."""

from leanlens.analysis.automation import analyze_automation_opportunities
from leanlens.analysis.bottleneck import identify_bottlenecks
from leanlens.analysis.engine import analyze_process
from leanlens.analysis.metrics import calculate_metrics
from leanlens.analysis.waste import detect_wastes

__all__ = [
    "analyze_automation_opportunities",
    "analyze_process",
    "calculate_metrics",
    "detect_wastes",
    "identify_bottlenecks",
]
