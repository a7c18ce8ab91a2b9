from __future__ import annotations

from datetime import date

from src.hr_portal.hr_portal.attendance import aggregator
from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.core.enums import AttendanceStatus


def _record(day, status, hours=None, record_id=None, employee_id=1):
    return AttendanceRecord(
        id=record_id or day.toordinal(),
        employee_id=employee_id,
        date=day,
        status=status,
        total_hours=hours,
    )


def test_summarize_month():
    records = [
        _record(date(2025, 10, 1), AttendanceStatus.PRESENT, 8),
        _record(date(2025, 10, 2), AttendanceStatus.PARTIAL, 4.5),
        _record(date(2025, 10, 3), AttendanceStatus.ABSENT),
        _record(date(2025, 10, 6), AttendanceStatus.SICK),
        _record(date(2025, 10, 7), AttendanceStatus.HOLIDAY),
        _record(date(2025, 10, 8), AttendanceStatus.PRESENT),
    ]

    metrics = aggregator.summarize(records)

    assert metrics.present_days == 3
    assert metrics.absent_days == 1
    assert metrics.leave_days == 2
    assert metrics.total_hours == 12.5


def test_empty_window():
    metrics = aggregator.summarize([])

    assert (metrics.present_days, metrics.absent_days, metrics.leave_days, metrics.total_hours) == (0, 0, 0, 0.0)


def test_count_status_is_exact():
    records = [
        _record(date(2025, 10, 1), AttendanceStatus.PRESENT),
        _record(date(2025, 10, 2), AttendanceStatus.PARTIAL),
    ]

    assert aggregator.count_status(records, AttendanceStatus.PRESENT) == 1


def test_trend_range_covers_three_months():
    assert aggregator.trend_range(date(2025, 10, 15)) == (date(2025, 8, 1), date(2025, 10, 31))
    assert aggregator.trend_range(date(2025, 1, 31)) == (date(2024, 11, 1), date(2025, 1, 31))


def test_weekly_trend_emits_every_week():
    records = [
        _record(date(2025, 8, 4), AttendanceStatus.PRESENT),
        _record(date(2025, 8, 5), AttendanceStatus.PARTIAL),
        _record(date(2025, 8, 6), AttendanceStatus.SICK),
        _record(date(2025, 10, 31), AttendanceStatus.ABSENT),
        _record(date(2025, 7, 31), AttendanceStatus.PRESENT),
        _record(date(2025, 11, 3), AttendanceStatus.PRESENT),
    ]

    weeks = aggregator.weekly_trend(records, date(2025, 10, 15))

    # Jul 28 (week containing Aug 1) through Oct 27 (week containing Oct 31).
    assert weeks[0].week_start == date(2025, 7, 28)
    assert weeks[-1].week_start == date(2025, 10, 27)
    assert len(weeks) == 14
    assert all(w.week_start.weekday() == 0 for w in weeks)

    by_start = {w.week_start: w for w in weeks}
    assert (by_start[date(2025, 8, 4)].present_days, by_start[date(2025, 8, 4)].absence_days) == (2, 1)
    assert by_start[date(2025, 10, 27)].absence_days == 1
    # Jul 31 is outside the range even though its week is emitted.
    assert by_start[date(2025, 7, 28)].present_days == 0
    assert sum(w.present_days for w in weeks) == 2
