from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_short_date, next_payday, now_local, year_window
from ..core.authorization import DASHBOARDS, Identity, require_role
from ..core.constants import ANNUAL_LEAVE_ALLOWANCE
from ..core.enums import LeaveStatus, Role
from ..employees.model import Employee
from ..employees.service import EmployeeService, team_remaining_leave
from ..leave import balance
from ..leave.repository import LeaveRepository
from ..leave.service import LeaveService
from ..performance.service import PerformanceService
from ..salary.service import SalaryService
from .model import AdminDashboard, EmployeeOverview, ManagerDashboard, TeamMember


class DashboardService:
    """Composes the per-role landing pages from the feature services."""

    def __init__(
        self,
        *,
        employee_service: EmployeeService,
        leave_service: LeaveService,
        attendance_service: AttendanceService,
        performance_service: PerformanceService,
        salary_service: SalaryService,
        leaves: LeaveRepository,
        allowance: int = ANNUAL_LEAVE_ALLOWANCE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._employee_service = employee_service
        self._leave_service = leave_service
        self._attendance_service = attendance_service
        self._performance_service = performance_service
        self._salary_service = salary_service
        self._leaves = leaves
        self._allowance = int(allowance)
        self._clock = clock or now_local

    def _today(self) -> date:
        return self._clock().date()

    def employee_overview(self, *, employee: Employee, today: Optional[date] = None) -> EmployeeOverview:
        today = today or self._today()

        month = self._attendance_service.month_summary(employee=employee, reference=today)
        start, end = year_window(today)
        approved = self._leaves.list_for_employee(
            employee.id,
            start_from=start,
            start_before=end,
            status=LeaveStatus.APPROVED,
        )
        taken = balance.approved_days(approved)
        payday = next_payday(today)

        return EmployeeOverview(
            employee=employee,
            days_worked_this_month=month.metrics.present_days,
            leave_days_taken_this_year=taken,
            leaves_remaining=balance.remaining_balance(approved, self._allowance, employee.annual_leave_remaining),
            next_payday=payday,
            next_payday_label=format_short_date(payday),
        )

    def manager_dashboard(self, *, identity: Identity) -> ManagerDashboard:
        require_role(identity, Role.MANAGER)

        employees = list(self._employee_service.list_team())
        latest = self._performance_service.latest_by_employee()
        salaries = self._salary_service.latest_by_employee([e.id for e in employees])
        team = [
            TeamMember(
                employee=e,
                remaining_leave=e.annual_leave_remaining or 0,
                latest_evaluation=latest.get(e.id),
                latest_salary=salaries.get(e.id),
            )
            for e in employees
        ]

        return ManagerDashboard(
            manager=self._employee_service.get_for_user(identity.user_id),
            performance=self._performance_service.team_performance(identity=identity),
            team=team,
            team_remaining_leave=team_remaining_leave(employees),
            leave_requests=self._leave_service.list_for_manager(identity=identity),
            attendance=self._attendance_service.team_attendance(identity=identity),
        )

    def admin_dashboard(self, *, identity: Identity) -> AdminDashboard:
        require_role(identity, Role.ADMIN)
        return AdminDashboard(
            email=identity.email,
            role=identity.role.value,
            sections=sorted(DASHBOARDS.values()),
        )
