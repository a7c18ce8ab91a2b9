from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import ANNUAL_LEAVE_ALLOWANCE
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.repository import LeaveRepository
from .leave.service import LeaveService
from .performance.mysql_performance_repository import MySQLPerformanceRepository
from .performance.repository import PerformanceRepository
from .performance.service import PerformanceService
from .salary.mysql_salary_repository import MySQLSalaryRepository
from .salary.repository import SalaryRepository
from .salary.service import SalaryService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    leave_repo: LeaveRepository
    attendance_repo: AttendanceRepository
    salary_repo: SalaryRepository
    performance_repo: PerformanceRepository

    employee_service: EmployeeService
    leave_service: LeaveService
    attendance_service: AttendanceService
    salary_service: SalaryService
    performance_service: PerformanceService
    dashboard_service: DashboardService


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    leave_repo: LeaveRepository,
    attendance_repo: AttendanceRepository,
    salary_repo: SalaryRepository,
    performance_repo: PerformanceRepository,
    allowance: int = ANNUAL_LEAVE_ALLOWANCE,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    """Build services on top of any repository implementations."""
    employee_service = EmployeeService(employees_repo)
    leave_service = LeaveService(leave_repo, employees_repo, allowance=allowance, clock=clock)
    attendance_service = AttendanceService(attendance_repo, employees_repo, clock=clock)
    salary_service = SalaryService(salary_repo, performance_repo)
    performance_service = PerformanceService(performance_repo)
    dashboard_service = DashboardService(
        employee_service=employee_service,
        leave_service=leave_service,
        attendance_service=attendance_service,
        performance_service=performance_service,
        salary_service=salary_service,
        leaves=leave_repo,
        allowance=allowance,
        clock=clock,
    )

    return Container(
        employees_repo=employees_repo,
        leave_repo=leave_repo,
        attendance_repo=attendance_repo,
        salary_repo=salary_repo,
        performance_repo=performance_repo,
        employee_service=employee_service,
        leave_service=leave_service,
        attendance_service=attendance_service,
        salary_service=salary_service,
        performance_service=performance_service,
        dashboard_service=dashboard_service,
    )


def build_container(*, db_config: dict, allowance: int = ANNUAL_LEAVE_ALLOWANCE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_services(
        employees_repo=MySQLEmployeeRepository(conn),
        leave_repo=MySQLLeaveRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        salary_repo=MySQLSalaryRepository(conn),
        performance_repo=MySQLPerformanceRepository(conn),
        allowance=allowance,
    )
