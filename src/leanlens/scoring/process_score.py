"""Composite 0-100 process score.

The overall score blends a metrics score (efficiency, first-pass yield,
and touch points) with a waste score that loses points for every finding
according to its severity.
"""

from __future__ import annotations

from collections.abc import Sequence

from leanlens._text import round_half_up
from leanlens.models import ProcessMetrics, WasteInstance
from leanlens.types import Severity

WASTE_PENALTIES: dict[Severity, int] = {
    Severity.HIGH: 15,
    Severity.MEDIUM: 8,
    Severity.LOW: 3,
}

IDEAL_TOUCH_POINTS = 3
TOUCH_POINT_PENALTY = 10

EFFICIENCY_WEIGHT = 0.4
YIELD_WEIGHT = 0.3
TOUCH_POINTS_WEIGHT = 0.3

METRICS_WEIGHT = 0.4
WASTE_WEIGHT = 0.6

SCORE_LABELS: tuple[tuple[int, str], ...] = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Needs Work"),
)


def calculate_touch_points_score(touch_points: int) -> int:
    penalty = max(0, touch_points - IDEAL_TOUCH_POINTS) * TOUCH_POINT_PENALTY
    return max(0, 100 - penalty)


def calculate_metrics_score(metrics: ProcessMetrics) -> int:
    return round_half_up(
        metrics.process_efficiency * EFFICIENCY_WEIGHT
        + metrics.first_pass_yield * YIELD_WEIGHT
        + calculate_touch_points_score(metrics.touch_points) * TOUCH_POINTS_WEIGHT
    )


def calculate_waste_score(wastes: Sequence[WasteInstance]) -> int:
    total_penalty = sum(WASTE_PENALTIES[waste.severity] for waste in wastes)
    return max(0, 100 - total_penalty)


def calculate_process_score(metrics: ProcessMetrics, wastes: Sequence[WasteInstance]) -> int:
    score = round_half_up(
        calculate_metrics_score(metrics) * METRICS_WEIGHT + calculate_waste_score(wastes) * WASTE_WEIGHT
    )
    return max(0, min(100, score))


def score_label(score: int) -> str:
    """Human label for a score band."""
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Critical"
