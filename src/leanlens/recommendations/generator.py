"""Prioritized recommendations synthesized from analysis findings.

Four sources contribute in fixed priority order: waste findings,
bottlenecks, high-ROI automation opportunities, and metric thresholds.
The combined list is deduplicated case-insensitively, keeping the first
occurrence, which is the only reordering applied.
"""

from __future__ import annotations

from collections.abc import Sequence

from leanlens.models import AutomationOpportunity, Process, ProcessMetrics, ProcessStep, WasteInstance
from leanlens.types import Severity, StepId, WasteType

MAX_WASTE_RECOMMENDATIONS = 5
MAX_BOTTLENECK_RECOMMENDATIONS = 3
MAX_AUTOMATION_RECOMMENDATIONS = 3
MAX_TOOLS_PER_RECOMMENDATION = 3

LONG_BOTTLENECK_MINUTES = 60
EFFICIENCY_TARGET = 50
YIELD_TARGET = 80
MAX_TOUCH_POINTS = 5

UNKNOWN_STEP_NAME = "Unknown step"

SEVERITY_RANK: dict[Severity, int] = {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}

WASTE_TEMPLATES: dict[WasteType, str] = {
    WasteType.TRANSPORTATION: (
        'Reduce data movement in "{name}": {description}. '
        "Consider consolidating systems or creating direct integrations."
    ),
    WasteType.INVENTORY: (
        'Address work backlog in "{name}": {description}. '
        "Implement flow-based processing to reduce batch sizes."
    ),
    WasteType.MOTION: (
        'Eliminate unnecessary searching in "{name}": {description}. '
        "Organize information and create clear navigation paths."
    ),
    WasteType.WAITING: (
        'Reduce wait times in "{name}": {description}. '
        "Consider parallel processing or automated approvals."
    ),
    WasteType.OVERPRODUCTION: (
        'Eliminate overproduction in "{name}": {description}. '
        "Produce only what is needed, when it is needed."
    ),
    WasteType.OVERPROCESSING: (
        'Simplify processing in "{name}": {description}. '
        "Review approval chains and remove unnecessary steps."
    ),
    WasteType.DEFECTS: (
        'Reduce errors in "{name}": {description}. '
        "Implement validation checks and error-proofing mechanisms."
    ),
    WasteType.SKILLS: (
        'Better utilize skills in "{name}": {description}. '
        "Automate routine tasks to free up human potential."
    ),
}


def _step_index(steps: Sequence[ProcessStep]) -> dict[StepId, ProcessStep]:
    index: dict[StepId, ProcessStep] = {}
    for step in steps:
        index.setdefault(step.id, step)
    return index


def _step_name(step_id: StepId, index: dict[StepId, ProcessStep]) -> str:
    step = index.get(step_id)
    return step.name if step is not None and step.name else UNKNOWN_STEP_NAME


def waste_recommendations(wastes: Sequence[WasteInstance], steps: Sequence[ProcessStep]) -> list[str]:
    """Messages for the most severe findings; ties keep their detection order."""
    index = _step_index(steps)
    ranked = sorted(wastes, key=lambda w: SEVERITY_RANK[w.severity])
    return [
        WASTE_TEMPLATES[waste.type].format(name=_step_name(waste.step_id, index), description=waste.description)
        for waste in ranked[:MAX_WASTE_RECOMMENDATIONS]
    ]


def bottleneck_recommendations(bottlenecks: Sequence[StepId], steps: Sequence[ProcessStep]) -> list[str]:
    index = _step_index(steps)
    recommendations: list[str] = []
    for step_id in bottlenecks[:MAX_BOTTLENECK_RECOMMENDATIONS]:
        step = index.get(step_id)
        if step is None:
            continue
        if step.estimated_duration > LONG_BOTTLENECK_MINUTES:
            recommendations.append(
                f'"{step.name}" takes {step.estimated_duration} minutes. '
                "Consider breaking it into smaller parallel tasks or automating portions."
            )
        else:
            recommendations.append(
                f'"{step.name}" is a bottleneck. '
                "Review resource allocation and consider cross-training to reduce dependency."
            )
    return recommendations


def automation_recommendations(
    opportunities: Sequence[AutomationOpportunity],
    steps: Sequence[ProcessStep],
) -> list[str]:
    index = _step_index(steps)
    high_roi = [opp for opp in opportunities if opp.roi_potential == Severity.HIGH]
    recommendations: list[str] = []
    for opp in high_roi[:MAX_AUTOMATION_RECOMMENDATIONS]:
        tools = ", ".join(opp.suggested_tools[:MAX_TOOLS_PER_RECOMMENDATION])
        recommendations.append(
            f'Automate "{_step_name(opp.step_id, index)}" using {tools}. '
            "This step has high automation potential with low complexity."
        )
    return recommendations


def metrics_recommendations(metrics: ProcessMetrics) -> list[str]:
    recommendations: list[str] = []
    if metrics.process_efficiency < EFFICIENCY_TARGET:
        recommendations.append(
            f"Process efficiency is {metrics.process_efficiency}%. "
            "Target 70%+ by reducing non-value-add activities and wait times."
        )
    if metrics.first_pass_yield < YIELD_TARGET:
        recommendations.append(
            f"First pass yield is {metrics.first_pass_yield}%. "
            "Implement quality checks and validation to reduce rework."
        )
    if metrics.touch_points > MAX_TOUCH_POINTS:
        recommendations.append(
            f"{metrics.touch_points} touch points detected. "
            "Reduce handoffs by consolidating responsibilities or automating transitions."
        )
    return recommendations


def deduplicate_recommendations(recommendations: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for rec in recommendations:
        key = rec.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(rec)
    return unique


def generate_recommendations(
    process: Process,
    metrics: ProcessMetrics,
    wastes: Sequence[WasteInstance],
    bottlenecks: Sequence[StepId],
    automation_opportunities: Sequence[AutomationOpportunity],
) -> list[str]:
    return deduplicate_recommendations(
        [
            *waste_recommendations(wastes, process.steps),
            *bottleneck_recommendations(bottlenecks, process.steps),
            *automation_recommendations(automation_opportunities, process.steps),
            *metrics_recommendations(metrics),
        ]
    )
