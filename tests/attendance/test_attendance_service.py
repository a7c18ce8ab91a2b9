from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.attendance.service import AttendanceService
from src.hr_portal.hr_portal.core.enums import AttendanceStatus
from src.hr_portal.hr_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def _record(record_id, employee_id, day, status, hours=None):
    return AttendanceRecord(id=record_id, employee_id=employee_id, date=day, status=status, total_hours=hours)


@pytest.fixture
def records():
    return [
        _record(1, 1, date(2025, 10, 1), AttendanceStatus.PRESENT, 8),
        _record(2, 1, date(2025, 10, 9), AttendanceStatus.PARTIAL, 4),
        _record(3, 1, date(2025, 10, 10), AttendanceStatus.ABSENT),
        _record(4, 1, date(2025, 9, 30), AttendanceStatus.PRESENT, 8),
        _record(5, 2, date(2025, 10, 14), AttendanceStatus.PRESENT, 8),
        _record(6, 7, date(2025, 10, 13), AttendanceStatus.ABSENT),
    ]


@pytest.fixture
def service(fakes, records, employees_repo, clock):
    return AttendanceService(fakes.attendance(records), employees_repo, clock=clock)


def test_month_summary_uses_current_month(service, employee):
    month = service.month_summary(employee=employee)

    assert month.month_start == date(2025, 10, 1)
    assert month.metrics.present_days == 2
    assert month.metrics.absent_days == 1
    assert month.metrics.total_hours == 12
    assert [r.id for r in month.records] == [3, 2, 1]


def test_month_summary_for_other_month(service, employee):
    month = service.month_summary(employee=employee, reference="2025-09-12")

    assert [r.id for r in month.records] == [4]


def test_weekly_trend(service, employee):
    weeks = service.weekly_trend(employee=employee)

    assert weeks[0].week_start == date(2025, 7, 28)
    assert sum(w.present_days for w in weeks) == 3
    assert sum(w.absence_days for w in weeks) == 1


def test_team_attendance_defaults_to_last_seven_days(service, manager_identity):
    team = service.team_attendance(identity=manager_identity)

    assert (team.date_from, team.date_to) == (date(2025, 10, 9), date(2025, 10, 15))
    assert [row.record.id for row in team.rows] == [5, 3, 2]
    assert team.present_count == 1
    assert team.absent_count == 1
    assert team.rows[0].employee_name == "Morgan Lead"


def test_team_attendance_custom_range(service, manager_identity):
    team = service.team_attendance(identity=manager_identity, date_from="2025-09-30", date_to="2025-10-01")

    assert sorted(row.record.id for row in team.rows) == [1, 4]
    assert team.present_count == 2


def test_team_attendance_rejects_bad_range(service, manager_identity, employee_identity):
    with pytest.raises(ValidationError):
        service.team_attendance(identity=manager_identity, date_from="2025-10-10", date_to="2025-10-01")
    with pytest.raises(ValidationError):
        service.team_attendance(identity=manager_identity, date_from="yesterday")
    with pytest.raises(AuthorizationError):
        service.team_attendance(identity=employee_identity)


def test_mark_attendance_upserts(fakes, employees_repo, clock, manager_identity):
    repo = fakes.attendance([_record(1, 1, date(2025, 10, 14), AttendanceStatus.ABSENT)])
    service = AttendanceService(repo, employees_repo, clock=clock)

    service.mark_attendance(identity=manager_identity, employee_id="1", day="2025-10-14", status="present")
    service.mark_attendance(identity=manager_identity, employee_id=1, day=date(2025, 10, 15), status="absent")

    rows = {(r.employee_id, r.date): r.status for r in repo.all()}
    assert rows == {
        (1, date(2025, 10, 14)): AttendanceStatus.PRESENT,
        (1, date(2025, 10, 15)): AttendanceStatus.ABSENT,
    }


@pytest.mark.parametrize("status", ["sick", "holiday", "partial", "late", ""])
def test_mark_attendance_only_present_or_absent(service, manager_identity, status):
    with pytest.raises(ValidationError):
        service.mark_attendance(identity=manager_identity, employee_id=1, day="2025-10-14", status=status)


def test_mark_attendance_guards(service, manager_identity, employee_identity, admin_identity):
    with pytest.raises(AuthorizationError):
        service.mark_attendance(identity=employee_identity, employee_id=1, day="2025-10-14", status="present")
    with pytest.raises(AuthorizationError):
        service.mark_attendance(identity=admin_identity, employee_id=1, day="2025-10-14", status="present")
    with pytest.raises(NotFoundError):
        service.mark_attendance(identity=manager_identity, employee_id=99, day="2025-10-14", status="present")
    with pytest.raises(ValidationError):
        service.mark_attendance(identity=manager_identity, employee_id=1, day="14/10/2025", status="present")
