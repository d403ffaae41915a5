"""Process scoring."""

from leanlens.scoring.process_score import (
    calculate_metrics_score,
    calculate_process_score,
    calculate_touch_points_score,
    calculate_waste_score,
    score_label,
)

__all__ = [
    "calculate_metrics_score",
    "calculate_process_score",
    "calculate_touch_points_score",
    "calculate_waste_score",
    "score_label",
]
