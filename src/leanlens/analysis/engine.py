"""Analysis orchestration: ``Process`` in, ``ProcessAnalysis`` out.

Runs the analyzers in dependency order::

    metrics ----------+
    wastes ------+----+--> score
                 |    |
    bottlenecks -+----+--> recommendations
    automation --+

Every stage is a pure function of its inputs, so analyzing an unchanged
process always yields an equal result.
"""

from __future__ import annotations

import logging

from leanlens.analysis.automation import analyze_automation_opportunities
from leanlens.analysis.bottleneck import identify_bottlenecks
from leanlens.analysis.metrics import calculate_metrics
from leanlens.analysis.waste import detect_wastes
from leanlens.models import Process, ProcessAnalysis
from leanlens.recommendations import generate_recommendations
from leanlens.scoring import calculate_process_score

logger = logging.getLogger(__name__)


def analyze_process(process: Process) -> ProcessAnalysis:
    """Produce the full assessment for *process*."""
    metrics = calculate_metrics(process)
    wastes = detect_wastes(process)
    bottlenecks = identify_bottlenecks(process)
    opportunities = analyze_automation_opportunities(process.steps)

    overall_score = calculate_process_score(metrics, wastes)
    recommendations = generate_recommendations(process, metrics, wastes, bottlenecks, opportunities)

    logger.debug(
        "Analyzed process '%s': %d steps, %d wastes, %d bottlenecks, score %d",
        process.id,
        len(process.steps),
        len(wastes),
        len(bottlenecks),
        overall_score,
    )
    return ProcessAnalysis(
        process_id=process.id,
        metrics=metrics,
        wastes=wastes,
        bottlenecks=bottlenecks,
        automation_opportunities=opportunities,
        overall_score=overall_score,
        recommendations=recommendations,
    )
