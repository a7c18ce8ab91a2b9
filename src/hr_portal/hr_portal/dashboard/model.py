from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import TeamAttendance
from ..employees.model import Employee
from ..leave.model import ManagerLeaveRow
from ..performance.model import PerformanceEvaluation, TeamPerformanceSummary
from ..salary.model import SalaryRecord


@dataclass(frozen=True)
class EmployeeOverview:
    """The four summary cards on the employee landing page."""

    employee: Employee
    days_worked_this_month: int
    leave_days_taken_this_year: int
    leaves_remaining: int
    next_payday: date
    next_payday_label: str


@dataclass(frozen=True)
class TeamMember:
    employee: Employee
    remaining_leave: int
    latest_evaluation: Optional[PerformanceEvaluation] = None
    latest_salary: Optional[SalaryRecord] = None


@dataclass(frozen=True)
class ManagerDashboard:
    manager: Optional[Employee]
    performance: TeamPerformanceSummary
    team: list[TeamMember]
    team_remaining_leave: int
    leave_requests: list[ManagerLeaveRow]
    attendance: TeamAttendance


@dataclass(frozen=True)
class AdminDashboard:
    email: Optional[str]
    role: str
    sections: list[str] = field(default_factory=list)
