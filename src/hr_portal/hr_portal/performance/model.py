from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class PerformanceEvaluation:
    id: int
    employee_id: int
    evaluation_period_start: date
    evaluation_period_end: date
    overall_rating: Optional[float] = None
    performance_score: Optional[float] = None
    goals_achieved: Optional[int] = None
    total_goals: Optional[int] = None
    evaluator_id: Optional[int] = None
    comments: Optional[str] = None
    salary_adjustment_percentage: Optional[float] = None
    bonus_amount: Optional[float] = None
    created_at: Optional[datetime] = None

    @property
    def score(self) -> Optional[float]:
        """Overall rating, falling back to the raw performance score."""
        if self.overall_rating is not None:
            return self.overall_rating
        return self.performance_score


@dataclass(frozen=True)
class TeamPerformanceSummary:
    average_score: Optional[float]
    review_count: int
