from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import DateLike, month_window, now_local, to_date
from ..core.authorization import Identity, require_role
from ..core.constants import MANAGER_ATTENDANCE_LOOKBACK_DAYS, MANAGER_MARKABLE_STATUSES
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import InvalidDateError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from . import aggregator
from .model import MonthAttendance, TeamAttendance, TeamAttendanceRow, WeekBucket
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock or now_local

    def _today(self) -> date:
        return self._clock().date()

    def month_summary(self, *, employee: Employee, reference: Optional[DateLike] = None) -> MonthAttendance:
        start, end = month_window(reference or self._today())
        records = list(self._attendance.list_for_employee(employee.id, date_from=start, date_before=end))
        return MonthAttendance(month_start=start, metrics=aggregator.summarize(records), records=records)

    def weekly_trend(self, *, employee: Employee, reference: Optional[DateLike] = None) -> list[WeekBucket]:
        reference = reference or self._today()
        range_start, range_end = aggregator.trend_range(reference)
        records = self._attendance.list_for_employee(
            employee.id,
            date_from=range_start,
            date_before=range_end + timedelta(days=1),
        )
        return aggregator.weekly_trend(records, reference)

    def default_team_range(self) -> tuple[date, date]:
        today = self._today()
        return today - timedelta(days=MANAGER_ATTENDANCE_LOOKBACK_DAYS), today

    def team_attendance(
        self,
        *,
        identity: Identity,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> TeamAttendance:
        """Attendance of every employee over an inclusive date range."""
        require_role(identity, Role.MANAGER, Role.ADMIN)

        default_from, default_to = self.default_team_range()
        try:
            start = to_date(date_from, "start date") if date_from else default_from
            end = to_date(date_to, "end date") if date_to else default_to
        except InvalidDateError:
            raise ValidationError("Enter valid dates.") from None
        if end < start:
            raise ValidationError("End date must be after start date.")

        by_id = {e.id: e for e in self._employees.list_all()}
        records = list(self._attendance.list_for_employees(list(by_id), date_from=start, date_to=end))

        rows = []
        for record in records:
            employee = by_id.get(record.employee_id)
            rows.append(
                TeamAttendanceRow(
                    record=record,
                    employee_name=employee.display_name if employee else "Unknown",
                    employee_code=employee.employee_code if employee else "—",
                )
            )

        return TeamAttendance(
            date_from=start,
            date_to=end,
            present_count=aggregator.count_status(records, AttendanceStatus.PRESENT),
            absent_count=aggregator.count_status(records, AttendanceStatus.ABSENT),
            rows=rows,
        )

    def mark_attendance(self, *, identity: Identity, employee_id, day: DateLike, status) -> None:
        require_role(identity, Role.MANAGER)

        try:
            parsed_status = AttendanceStatus(str(status or "").strip().lower())
        except ValueError:
            raise ValidationError("Invalid attendance status.") from None
        if parsed_status not in MANAGER_MARKABLE_STATUSES:
            raise ValidationError("Only present or absent can be marked.")

        try:
            parsed_day = to_date(day, "date")
        except InvalidDateError:
            raise ValidationError("Enter a valid date.") from None

        try:
            target_id = int(employee_id)
        except (TypeError, ValueError):
            raise ValidationError("Employee is required.") from None

        employee = self._employees.get_by_id(target_id)
        if not employee:
            raise NotFoundError("Employee not found.")

        self._attendance.upsert_status(employee_id=employee.id, day=parsed_day, status=parsed_status)
        logger.info(
            "Attendance for employee %s on %s marked %s by %s",
            employee.id,
            parsed_day.isoformat(),
            parsed_status.value,
            identity.user_id,
        )
