from __future__ import annotations

from datetime import date

from src.hr_portal.hr_portal.core.enums import Direction
from src.hr_portal.hr_portal.performance.model import PerformanceEvaluation
from src.hr_portal.hr_portal.salary.model import SalaryRecord
from src.hr_portal.hr_portal.salary.service import SalaryService


def test_salary_overview_limits_history_and_evaluations(fakes, employee):
    salaries = [
        SalaryRecord(id=i, employee_id=1, base_salary=4000 + i * 100, effective_date=date(2019 + i, 1, 1))
        for i in range(1, 8)
    ]
    salaries.append(SalaryRecord(id=99, employee_id=2, base_salary=9000, effective_date=date(2026, 1, 1)))
    evaluations = [
        PerformanceEvaluation(
            id=i,
            employee_id=1,
            evaluation_period_start=date(2020 + i, 1, 1),
            evaluation_period_end=date(2020 + i, 12, 31),
            overall_rating=3.5,
        )
        for i in range(1, 5)
    ]
    service = SalaryService(fakes.salaries(salaries), fakes.evaluations(evaluations))

    overview = service.salary_overview(employee=employee)

    assert [r.id for r in overview.history] == [7, 6, 5, 4, 3]
    assert overview.delta.direction == Direction.UP
    assert overview.delta.delta == 100.0
    assert [e.id for e in overview.evaluations] == [4, 3, 2]
    assert overview.effective_date_label == "Jan 1, 2026"


def test_salary_overview_without_data(fakes, employee):
    overview = SalaryService(fakes.salaries(), fakes.evaluations()).salary_overview(employee=employee)

    assert overview.history == []
    assert overview.delta.label == "no data"
    assert overview.effective_date_label == "—"
    assert overview.evaluations == []


def test_latest_by_employee_picks_newest_record_per_employee(fakes):
    salaries = fakes.salaries(
        [
            SalaryRecord(id=1, employee_id=1, base_salary=4000, effective_date=date(2024, 1, 1)),
            SalaryRecord(id=2, employee_id=1, base_salary=4300, effective_date=date(2025, 1, 1)),
            SalaryRecord(id=3, employee_id=2, base_salary=6100, effective_date=date(2025, 3, 1)),
            SalaryRecord(id=4, employee_id=2, base_salary=6000, effective_date=date(2025, 3, 1)),
            SalaryRecord(id=5, employee_id=9, base_salary=9900, effective_date=date(2025, 9, 1)),
        ]
    )
    service = SalaryService(salaries, fakes.evaluations())

    latest = service.latest_by_employee([1, 2, 3])

    assert {k: v.id for k, v in latest.items()} == {1: 2, 2: 4}
    assert service.latest_by_employee([]) == {}
