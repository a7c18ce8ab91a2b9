from __future__ import annotations

from typing import Iterable, Sequence

from .model import PerformanceEvaluation, TeamPerformanceSummary


def latest_per_employee(evaluations: Iterable[PerformanceEvaluation]) -> dict[int, PerformanceEvaluation]:
    """Most recent evaluation (by period end, then id) for each employee."""
    latest: dict[int, PerformanceEvaluation] = {}
    for e in evaluations:
        current = latest.get(e.employee_id)
        if current is None or (e.evaluation_period_end, e.id) > (current.evaluation_period_end, current.id):
            latest[e.employee_id] = e
    return latest


def summarize_team(latest: Sequence[PerformanceEvaluation]) -> TeamPerformanceSummary:
    # Evaluations without any score still count as reviews.
    scores = [e.score for e in latest if e.score is not None]
    average = sum(scores) / len(scores) if scores else None
    return TeamPerformanceSummary(average_score=average, review_count=len(latest))
