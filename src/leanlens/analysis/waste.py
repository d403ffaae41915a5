"""Waste detection across the eight TIMWOODS categories.

Each step's name, description and pain points are scanned against a fixed
keyword table per :class:`~leanlens.types.WasteType`.  A hit produces one
:class:`~leanlens.models.WasteInstance` for that (category, step) pair, with
a severity taken from the matched text or, when the text carries no
severity cue, from the step's duration weighted by how often the process
runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from leanlens._text import contains_any, join_text
from leanlens.models import Process, ProcessStep, WasteInstance
from leanlens.types import ProcessFrequency, Severity, StepId, WasteType

logger = logging.getLogger(__name__)

WASTE_KEYWORDS: dict[WasteType, tuple[str, ...]] = {
    WasteType.TRANSPORTATION: ("transfer", "move", "send", "email", "forward", "pass", "handoff", "route"),
    WasteType.INVENTORY: ("backlog", "queue", "pile up", "accumulate", "batch", "stack"),
    WasteType.MOTION: ("search", "look for", "find", "locate", "navigate", "switch between"),
    WasteType.WAITING: ("wait", "delay", "pending", "hold", "blocked", "stuck", "idle"),
    WasteType.OVERPRODUCTION: ("excess", "extra", "unused", "unnecessary", "redundant", "duplicate"),
    WasteType.OVERPROCESSING: (
        "approval",
        "review",
        "sign-off",
        "multiple checks",
        "double entry",
        "re-enter",
    ),
    WasteType.DEFECTS: ("error", "rework", "fix", "correct", "mistake", "redo", "reject", "bug", "issue"),
    WasteType.SKILLS: ("manual", "automate", "repetitive", "tedious", "mundane", "copy paste", "routine"),
}

# Checked in this order; the first tier with a hit wins.
SEVERITY_KEYWORDS: tuple[tuple[Severity, tuple[str, ...]], ...] = (
    (Severity.HIGH, ("critical", "major", "always", "every time", "significant", "constant", "severe")),
    (Severity.MEDIUM, ("often", "frequently", "sometimes", "moderate", "regular")),
    (Severity.LOW, ("occasionally", "minor", "rarely", "slight", "infrequent")),
)

FREQUENCY_MULTIPLIER: dict[ProcessFrequency, int] = {
    ProcessFrequency.MULTIPLE_DAILY: 5,
    ProcessFrequency.DAILY: 4,
    ProcessFrequency.WEEKLY: 3,
    ProcessFrequency.MONTHLY: 2,
    ProcessFrequency.QUARTERLY: 1,
    ProcessFrequency.AD_HOC: 1,
}

FREQUENCY_LABELS: dict[ProcessFrequency, str] = {
    ProcessFrequency.MULTIPLE_DAILY: "multiple times daily",
    ProcessFrequency.DAILY: "daily",
    ProcessFrequency.WEEKLY: "weekly",
    ProcessFrequency.MONTHLY: "monthly",
    ProcessFrequency.QUARTERLY: "quarterly",
    ProcessFrequency.AD_HOC: "as needed",
}

HIGH_IMPACT_SCORE = 200
MEDIUM_IMPACT_SCORE = 50

IMPACT_TEMPLATES: dict[WasteType, str] = {
    WasteType.TRANSPORTATION: "Unnecessary data/material movement taking ~{minutes} min {frequency}",
    WasteType.INVENTORY: "Work piling up, causing delays and context switching {frequency}",
    WasteType.MOTION: "Time spent searching/navigating instead of productive work {frequency}",
    WasteType.WAITING: "Idle time of ~{minutes} min while awaiting input/approval {frequency}",
    WasteType.OVERPRODUCTION: "Creating more than needed, wasting resources {frequency}",
    WasteType.OVERPROCESSING: "Excessive processing/approvals adding ~{minutes} min {frequency}",
    WasteType.DEFECTS: "Errors requiring rework, adding time and frustration {frequency}",
    WasteType.SKILLS: "Human potential underutilized on automatable tasks {frequency}",
}


def assign_severity(text: str, duration: int, frequency: ProcessFrequency) -> Severity:
    """Grade a finding from its wording, falling back to duration x frequency."""
    for severity, keywords in SEVERITY_KEYWORDS:
        if contains_any(text, keywords):
            return severity

    impact_score = duration * FREQUENCY_MULTIPLIER[frequency]
    if impact_score > HIGH_IMPACT_SCORE:
        return Severity.HIGH
    if impact_score > MEDIUM_IMPACT_SCORE:
        return Severity.MEDIUM
    return Severity.LOW


def describe_impact(waste_type: WasteType, step: ProcessStep, frequency: ProcessFrequency) -> str:
    return IMPACT_TEMPLATES[waste_type].format(
        minutes=step.estimated_duration,
        frequency=FREQUENCY_LABELS[frequency],
    )


def detect_waste_in_step(
    step: ProcessStep,
    waste_type: WasteType,
    frequency: ProcessFrequency,
) -> WasteInstance | None:
    """Return the *waste_type* finding for *step*, or ``None`` if no keyword matches."""
    keywords = WASTE_KEYWORDS[waste_type]
    if not contains_any(join_text(step.name, step.description, step.pain_points), keywords):
        return None

    description = next(
        (pp for pp in step.pain_points if contains_any(pp, keywords)),
        step.description,
    )
    return WasteInstance(
        type=waste_type,
        step_id=step.id,
        description=description,
        severity=assign_severity(description, step.estimated_duration, frequency),
        estimated_impact=describe_impact(waste_type, step, frequency),
    )


def _detect(
    steps: Sequence[ProcessStep],
    waste_type: WasteType,
    frequency: ProcessFrequency,
) -> list[WasteInstance]:
    found = (detect_waste_in_step(step, waste_type, frequency) for step in steps)
    return [waste for waste in found if waste is not None]


def detect_transportation_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.TRANSPORTATION, frequency)


def detect_inventory_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    """Keyword findings plus work-in-progress buildup from shared outputs.

    Every output name (compared lowercased and trimmed) produced by more
    than one step adds a medium finding against the first of those steps.
    """
    wastes = _detect(steps, WasteType.INVENTORY, frequency)

    producers: dict[str, list[ProcessStep]] = {}
    for step in steps:
        for output in step.outputs:
            producers.setdefault(output.strip().lower(), []).append(step)

    for output, duplicates in producers.items():
        if len(duplicates) > 1:
            wastes.append(
                WasteInstance(
                    type=WasteType.INVENTORY,
                    step_id=duplicates[0].id,
                    description=(
                        f'Multiple steps producing same output "{output}" '
                        "may indicate work-in-progress buildup"
                    ),
                    severity=Severity.MEDIUM,
                    estimated_impact=(
                        f"Potential inventory waste with {len(duplicates)} steps producing similar outputs"
                    ),
                )
            )
    return wastes


def detect_motion_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.MOTION, frequency)


def detect_waiting_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.WAITING, frequency)


def detect_overproduction_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.OVERPRODUCTION, frequency)


def detect_overprocessing_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.OVERPROCESSING, frequency)


def detect_defects_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.DEFECTS, frequency)


def detect_skills_waste(steps: Sequence[ProcessStep], frequency: ProcessFrequency) -> list[WasteInstance]:
    return _detect(steps, WasteType.SKILLS, frequency)


WasteDetector = Callable[[Sequence[ProcessStep], ProcessFrequency], list[WasteInstance]]

# TIMWOODS order; also the emission order of the combined result.
DETECTORS: tuple[WasteDetector, ...] = (
    detect_transportation_waste,
    detect_inventory_waste,
    detect_motion_waste,
    detect_waiting_waste,
    detect_overproduction_waste,
    detect_overprocessing_waste,
    detect_defects_waste,
    detect_skills_waste,
)


def deduplicate_wastes(wastes: Sequence[WasteInstance]) -> list[WasteInstance]:
    """Keep the first finding per (category, step), preserving order."""
    seen: set[tuple[WasteType, StepId]] = set()
    unique: list[WasteInstance] = []
    for waste in wastes:
        key = (waste.type, waste.step_id)
        if key in seen:
            continue
        seen.add(key)
        unique.append(waste)
    return unique


def detect_wastes(process: Process) -> list[WasteInstance]:
    found: list[WasteInstance] = []
    for detector in DETECTORS:
        found.extend(detector(process.steps, process.frequency))
    wastes = deduplicate_wastes(found)
    if len(wastes) < len(found):
        logger.debug("Dropped %d duplicate waste findings", len(found) - len(wastes))
    return wastes
