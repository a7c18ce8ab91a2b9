from __future__ import annotations

import dataclasses
from datetime import date, datetime
from types import SimpleNamespace
from typing import Optional

import pytest

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.core.authorization import Identity
from src.hr_portal.hr_portal.core.enums import LeaveStatus, Role
from src.hr_portal.hr_portal.employees.model import Employee, ProfileInput
from src.hr_portal.hr_portal.leave.model import LeaveRequest, NewLeaveRequest


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._rows: dict[int, Employee] = {e.id: e for e in employees}
        self._next_id = max(self._rows, default=0) + 1
        self.taken_codes: set[str] = {e.employee_code for e in employees}

    def add(self, employee: Employee) -> Employee:
        self._rows[employee.id] = employee
        self.taken_codes.add(employee.employee_code)
        self._next_id = max(self._next_id, employee.id + 1)
        return employee

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        return next((e for e in self._rows.values() if e.user_id == user_id), None)

    def code_exists(self, employee_code: str) -> bool:
        return employee_code in self.taken_codes

    def create(self, *, user_id, employee_code, email, profile: ProfileInput) -> int:
        employee_id = self._next_id
        self._next_id += 1
        self.add(
            Employee(
                id=employee_id,
                user_id=user_id,
                employee_code=employee_code,
                email=email,
                **dataclasses.asdict(profile),
            )
        )
        return employee_id

    def update(self, employee_id: int, *, profile: ProfileInput) -> bool:
        current = self._rows.get(int(employee_id))
        if not current:
            return False
        self._rows[current.id] = dataclasses.replace(current, **dataclasses.asdict(profile))
        return True

    def delete(self, employee_id: int) -> bool:
        return self._rows.pop(int(employee_id), None) is not None

    def list_all(self, *, department_id=None):
        rows = [e for e in self._rows.values() if department_id is None or e.department_id == department_id]
        return sorted(rows, key=lambda e: (e.last_name, e.first_name))

    def set_remaining(self, employee_id: int, remaining: Optional[int]) -> None:
        self._rows[employee_id] = dataclasses.replace(self._rows[employee_id], annual_leave_remaining=remaining)


class InMemoryLeaves:
    def __init__(self, employees: InMemoryEmployees, requests=()):
        self._employees = employees
        self._rows: dict[int, LeaveRequest] = {r.id: r for r in requests}
        self._next_id = max(self._rows, default=0) + 1

    def add(self, request: LeaveRequest) -> LeaveRequest:
        self._rows[request.id] = request
        self._next_id = max(self._next_id, request.id + 1)
        return request

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        return self._rows.get(int(leave_id))

    def list_for_employee(
        self,
        employee_id,
        *,
        start_from=None,
        start_before=None,
        status=None,
        order_by_start=False,
        limit=None,
    ):
        rows = [
            r
            for r in self._rows.values()
            if r.employee_id == employee_id
            and (start_from is None or r.start_date >= start_from)
            and (start_before is None or r.start_date < start_before)
            and (status is None or r.status == status)
        ]
        if order_by_start:
            rows.sort(key=lambda r: r.start_date, reverse=True)
        else:
            rows.sort(key=lambda r: r.id, reverse=True)
        return rows[:limit] if limit else rows

    def list_recent(self, *, limit=100):
        return sorted(self._rows.values(), key=lambda r: r.id, reverse=True)[:limit]

    def create(self, new: NewLeaveRequest) -> int:
        leave_id = self._next_id
        self._next_id += 1
        self._rows[leave_id] = LeaveRequest(id=leave_id, **dataclasses.asdict(new))
        return leave_id

    def delete(self, leave_id: int) -> bool:
        return self._rows.pop(int(leave_id), None) is not None

    def decide(self, leave_id, *, status, decided_by, rejection_reason=None) -> bool:
        current = self._rows.get(int(leave_id))
        if not current or current.status != LeaveStatus.PENDING:
            return False
        self._rows[current.id] = dataclasses.replace(
            current,
            status=status,
            approved_by=decided_by,
            approved_at=datetime(2025, 10, 15, 12, 0),
            rejection_reason=rejection_reason,
        )
        owner = self._employees.get_by_id(current.employee_id)
        if status == LeaveStatus.APPROVED and owner and owner.annual_leave_remaining is not None:
            self._employees.set_remaining(owner.id, max(owner.annual_leave_remaining - current.days_requested, 0))
        return True


class InMemoryAttendance:
    def __init__(self, records=()):
        self._rows: dict[tuple[int, date], AttendanceRecord] = {(r.employee_id, r.date): r for r in records}
        self._next_id = len(self._rows) + 1

    def all(self) -> list[AttendanceRecord]:
        return list(self._rows.values())

    def list_for_employee(self, employee_id, *, date_from, date_before):
        rows = [r for r in self._rows.values() if r.employee_id == employee_id and date_from <= r.date < date_before]
        return sorted(rows, key=lambda r: r.date, reverse=True)

    def list_for_employees(self, employee_ids, *, date_from, date_to):
        ids = set(employee_ids)
        rows = [r for r in self._rows.values() if r.employee_id in ids and date_from <= r.date <= date_to]
        return sorted(rows, key=lambda r: (r.date, -r.employee_id), reverse=True)

    def upsert_status(self, *, employee_id, day, status) -> None:
        current = self._rows.get((employee_id, day))
        if current:
            self._rows[(employee_id, day)] = dataclasses.replace(current, status=status)
            return
        self._rows[(employee_id, day)] = AttendanceRecord(id=self._next_id, employee_id=employee_id, date=day, status=status)
        self._next_id += 1


class InMemorySalaries:
    def __init__(self, records=()):
        self._rows = list(records)

    def list_for_employee(self, employee_id, *, limit):
        rows = [r for r in self._rows if r.employee_id == employee_id]
        rows.sort(key=lambda r: (r.effective_date, r.id), reverse=True)
        return rows[:limit]

    def list_latest_for_employees(self, employee_ids):
        latest = {}
        for r in sorted(self._rows, key=lambda r: (r.effective_date, r.id)):
            if r.employee_id in employee_ids:
                latest[r.employee_id] = r
        return [latest[i] for i in sorted(latest)]


class InMemoryEvaluations:
    def __init__(self, evaluations=()):
        self._rows = list(evaluations)

    def list_for_employee(self, employee_id, *, limit):
        rows = [e for e in self._rows if e.employee_id == employee_id]
        rows.sort(key=lambda e: (e.evaluation_period_end, e.id), reverse=True)
        return rows[:limit]

    def list_all(self):
        return sorted(self._rows, key=lambda e: (e.evaluation_period_end, e.id), reverse=True)


def make_employee(employee_id: int = 1, user_id: str = "user-1", **overrides) -> Employee:
    fields = dict(
        id=employee_id,
        user_id=user_id,
        employee_code=f"EMP-{employee_id:04d}",
        first_name="Alex",
        last_name=f"Worker{employee_id}",
        email=f"{user_id}@example.com",
        date_of_joining=date(2023, 1, 9),
    )
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 15, 9, 30, 0)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def employee() -> Employee:
    return make_employee(1, "user-1")


@pytest.fixture
def manager() -> Employee:
    return make_employee(2, "manager-1", first_name="Morgan", last_name="Lead")


@pytest.fixture
def employees_repo(employee, manager) -> InMemoryEmployees:
    return InMemoryEmployees([employee, manager])


@pytest.fixture
def leave_repo(employees_repo) -> InMemoryLeaves:
    return InMemoryLeaves(employees_repo)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def employee_identity(employee) -> Identity:
    return Identity(user_id=employee.user_id, email=employee.email, role=Role.EMPLOYEE)


@pytest.fixture
def manager_identity(manager) -> Identity:
    return Identity(user_id=manager.user_id, email=manager.email, role=Role.MANAGER)


@pytest.fixture
def admin_identity() -> Identity:
    return Identity(user_id="admin-1", email="admin@example.com", role=Role.ADMIN)


@pytest.fixture
def make_employee_factory():
    return make_employee


@pytest.fixture
def fakes():
    """In-memory repository classes for tests that build their own fixtures."""
    return SimpleNamespace(
        employees=InMemoryEmployees,
        leaves=InMemoryLeaves,
        attendance=InMemoryAttendance,
        salaries=InMemorySalaries,
        evaluations=InMemoryEvaluations,
    )
