from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import INVALID_DATE_PLACEHOLDER, format_display_date
from ..core.constants import DEFAULT_EVALUATION_LIMIT, DEFAULT_SALARY_HISTORY_LIMIT
from ..employees.model import Employee
from ..performance.repository import PerformanceRepository
from .model import SalaryOverview, SalaryRecord
from .projector import project_delta
from .repository import SalaryRepository


class SalaryService:
    def __init__(self, salaries: SalaryRepository, evaluations: PerformanceRepository):
        self._salaries = salaries
        self._evaluations = evaluations

    def salary_overview(self, *, employee: Employee) -> SalaryOverview:
        history = list(self._salaries.list_for_employee(employee.id, limit=DEFAULT_SALARY_HISTORY_LIMIT))
        evaluations = list(self._evaluations.list_for_employee(employee.id, limit=DEFAULT_EVALUATION_LIMIT))
        return SalaryOverview(
            history=history,
            delta=project_delta(history),
            effective_date_label=format_display_date(history[0].effective_date) if history else INVALID_DATE_PLACEHOLDER,
            evaluations=evaluations,
        )

    def latest_by_employee(self, employee_ids: Sequence[int]) -> dict[int, SalaryRecord]:
        """Current salary keyed by employee id; employees without one are absent."""
        return {r.employee_id: r for r in self._salaries.list_latest_for_employees(list(employee_ids))}
