from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import Direction, SalaryType
from ..performance.model import PerformanceEvaluation


@dataclass(frozen=True)
class SalaryRecord:
    """Domain entity: one entry of the append-only salary history."""

    id: int
    employee_id: int
    base_salary: float
    effective_date: date
    salary_type: SalaryType = SalaryType.MONTHLY
    currency: str = "USD"
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class SalaryDelta:
    direction: Direction
    delta: float
    label: str
    current: Optional[SalaryRecord] = None
    previous: Optional[SalaryRecord] = None


@dataclass(frozen=True)
class SalaryOverview:
    """Read-model for the employee salary card."""

    history: list[SalaryRecord]
    delta: SalaryDelta
    effective_date_label: str
    evaluations: list[PerformanceEvaluation] = field(default_factory=list)
