"""Bottleneck identification.

A step is a bottleneck when it meets any of four independent criteria:

1. its duration is more than twice the mean step duration;
2. it ties for the most pain points in the process, with at least two;
3. one of its pain points talks about waiting or delay;
4. its role appears on no other step and it runs longer than the mean.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from leanlens._text import contains_any, normalize_role
from leanlens.models import Process, ProcessStep
from leanlens.types import StepId

DELAY_KEYWORDS: tuple[str, ...] = ("wait", "delay", "pending", "blocked", "stuck", "bottleneck", "slow")

DURATION_FACTOR = 2
MIN_PAIN_POINTS = 2


def _is_bottleneck(
    step: ProcessStep,
    mean_duration: float,
    max_pain_points: int,
    role_counts: Counter[str],
) -> bool:
    if step.estimated_duration > mean_duration * DURATION_FACTOR:
        return True

    if max_pain_points >= MIN_PAIN_POINTS and len(step.pain_points) == max_pain_points:
        return True

    if any(contains_any(pp, DELAY_KEYWORDS) for pp in step.pain_points):
        return True

    # Single point of failure
    return role_counts[normalize_role(step.responsible_role)] == 1 and step.estimated_duration > mean_duration


def find_bottleneck_steps(steps: Sequence[ProcessStep]) -> list[StepId]:
    if not steps:
        return []

    mean_duration = sum(step.estimated_duration for step in steps) / len(steps)
    max_pain_points = max(len(step.pain_points) for step in steps)
    role_counts = Counter(normalize_role(step.responsible_role) for step in steps)

    bottlenecks: list[StepId] = []
    for step in steps:
        if step.id not in bottlenecks and _is_bottleneck(step, mean_duration, max_pain_points, role_counts):
            bottlenecks.append(step.id)
    return bottlenecks


def identify_bottlenecks(process: Process) -> list[StepId]:
    """Return the ids of bottleneck steps in execution order."""
    return find_bottleneck_steps(process.steps)
