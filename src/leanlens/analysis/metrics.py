"""Timing, efficiency, and quality metrics derived from step data."""

from __future__ import annotations

from collections.abc import Sequence

from leanlens._text import contains_any, normalize_role, round_half_up
from leanlens.models import Process, ProcessMetrics, ProcessStep

WAITING_KEYWORDS: tuple[str, ...] = ("wait", "pending", "queue", "hold", "approval")

DEFECT_KEYWORDS: tuple[str, ...] = ("error", "rework", "fix", "correct", "mistake", "redo", "reject")

# Yield lost per step that reports defect-related pain points.
DEFECT_PENALTY_PER_STEP = 10


def calculate_lead_time(steps: Sequence[ProcessStep]) -> int:
    return sum(step.estimated_duration for step in steps)


def _is_waiting_step(step: ProcessStep) -> bool:
    return contains_any(step.name, WAITING_KEYWORDS) or contains_any(step.description, WAITING_KEYWORDS)


def calculate_cycle_time(steps: Sequence[ProcessStep]) -> int:
    """Sum durations of value-adding steps, skipping pure waiting steps."""
    return sum(step.estimated_duration for step in steps if not _is_waiting_step(step))


def calculate_process_efficiency(lead_time: int, cycle_time: int) -> int:
    if lead_time == 0:
        return 0
    return round_half_up(cycle_time / lead_time * 100)


def calculate_touch_points(steps: Sequence[ProcessStep]) -> int:
    """Distinct responsible roles plus the handoffs between consecutive steps."""
    roles = [normalize_role(step.responsible_role) for step in steps]
    handoffs = sum(1 for prev, curr in zip(roles, roles[1:]) if prev != curr)
    return len(set(roles)) + handoffs


def calculate_first_pass_yield(steps: Sequence[ProcessStep]) -> int:
    defect_steps = sum(
        1 for step in steps if any(contains_any(pp, DEFECT_KEYWORDS) for pp in step.pain_points)
    )
    return max(0, min(100, 100 - defect_steps * DEFECT_PENALTY_PER_STEP))


def calculate_metrics(process: Process) -> ProcessMetrics:
    lead_time = calculate_lead_time(process.steps)
    cycle_time = calculate_cycle_time(process.steps)
    return ProcessMetrics(
        lead_time=lead_time,
        cycle_time=cycle_time,
        process_efficiency=calculate_process_efficiency(lead_time, cycle_time),
        first_pass_yield=calculate_first_pass_yield(process.steps),
        touch_points=calculate_touch_points(process.steps),
    )
