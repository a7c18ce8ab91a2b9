from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per (employee_id, date)."""

    id: int
    employee_id: int
    date: date
    status: AttendanceStatus
    total_hours: Optional[float] = None
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    break_duration_minutes: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceMetrics:
    present_days: int = 0
    absent_days: int = 0
    leave_days: int = 0
    total_hours: float = 0.0


@dataclass(frozen=True)
class WeekBucket:
    """Monday-starting week used by the attendance trend chart."""

    week_start: date
    week_end: date
    present_days: int = 0
    absence_days: int = 0


@dataclass(frozen=True)
class MonthAttendance:
    month_start: date
    metrics: AttendanceMetrics
    records: list[AttendanceRecord] = field(default_factory=list)


@dataclass(frozen=True)
class TeamAttendanceRow:
    record: AttendanceRecord
    employee_name: str
    employee_code: str


@dataclass(frozen=True)
class TeamAttendance:
    """Read-model for the manager attendance card."""

    date_from: date
    date_to: date
    present_count: int
    absent_count: int
    rows: list[TeamAttendanceRow] = field(default_factory=list)
