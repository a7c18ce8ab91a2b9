"""Attendance aggregation over a window of records.

Pure functions; callers pass records already filtered to the window they
care about (a month for employees, a date range for managers).
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import DateLike, add_months, month_window, start_of_week, to_date
from ..core.constants import TREND_LOOKBACK_MONTHS
from ..core.enums import AttendanceStatus
from .model import AttendanceMetrics, AttendanceRecord, WeekBucket

PRESENT_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.PARTIAL})
LEAVE_STATUSES = frozenset({AttendanceStatus.SICK, AttendanceStatus.HOLIDAY})
ABSENCE_STATUSES = frozenset({AttendanceStatus.ABSENT}) | LEAVE_STATUSES


def days_present(records: Iterable[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.status in PRESENT_STATUSES)


def days_absent(records: Iterable[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.status == AttendanceStatus.ABSENT)


def leave_days(records: Iterable[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.status in LEAVE_STATUSES)


def total_hours(records: Iterable[AttendanceRecord]) -> float:
    # Missing hours count as zero; the record itself still counts.
    return float(sum(r.total_hours or 0 for r in records))


def count_status(records: Iterable[AttendanceRecord], status: AttendanceStatus) -> int:
    return sum(1 for r in records if r.status == status)


def summarize(records: Sequence[AttendanceRecord]) -> AttendanceMetrics:
    return AttendanceMetrics(
        present_days=days_present(records),
        absent_days=days_absent(records),
        leave_days=leave_days(records),
        total_hours=total_hours(records),
    )


def trend_range(reference: DateLike) -> tuple[date, date]:
    """Inclusive [first day of reference month - 2 months, last day of reference month]."""
    month_start, next_month = month_window(reference)
    return add_months(month_start, -TREND_LOOKBACK_MONTHS), next_month - timedelta(days=1)


def weekly_trend(records: Iterable[AttendanceRecord], reference: DateLike) -> list[WeekBucket]:
    """Tally records into every Monday-starting week of the trend range.

    Weeks without records are still emitted with zero counts; records outside
    the range are ignored.
    """
    range_start, range_end = trend_range(reference)

    tallies: dict[date, list[int]] = {}
    week = start_of_week(range_start)
    while week <= range_end:
        tallies[week] = [0, 0]
        week += timedelta(days=7)

    for r in records:
        day = to_date(r.date)
        if day < range_start or day > range_end:
            continue
        bucket = tallies[start_of_week(day)]
        if r.status in PRESENT_STATUSES:
            bucket[0] += 1
        elif r.status in ABSENCE_STATUSES:
            bucket[1] += 1

    return [
        WeekBucket(
            week_start=start,
            week_end=start + timedelta(days=6),
            present_days=present,
            absence_days=absent,
        )
        for start, (present, absent) in tallies.items()
    ]
