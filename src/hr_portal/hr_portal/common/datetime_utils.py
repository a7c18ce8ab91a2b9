from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Union

from ..core.constants import PAYDAY_TARGET_DAY
from ..core.exceptions import InvalidDateError

DateLike = Union[date, datetime, str]

INVALID_DATE_PLACEHOLDER = "—"

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATE_WITH_TIME = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_date(value: DateLike, field_name: str = "date") -> date:
    """Coerce a date, datetime or ISO string into a date.

    Strings are ``YYYY-MM-DD`` or a full ISO timestamp
    (``2025-01-01T10:00:00Z``); only the date is kept. Anything else,
    including trailing text after a date, raises InvalidDateError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            if _DATE_ONLY.match(raw):
                return parse_iso_date(raw)
            if _DATE_WITH_TIME.match(raw):
                if raw.endswith("Z"):
                    raw = raw[:-1] + "+00:00"
                return datetime.fromisoformat(raw).date()
        except ValueError:
            pass
        raise InvalidDateError(value, field_name)
    raise InvalidDateError(value, field_name)


def inclusive_day_count(start: DateLike, end: DateLike) -> int:
    """Number of calendar days from ``start`` to ``end`` counting both ends.

    Callers must reject ``end < start`` beforehand; a negative span is
    returned as-is.
    """
    start_d = to_date(start, "start date")
    end_d = to_date(end, "end date")
    return (end_d - start_d).days + 1


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: date, delta: int) -> date:
    """First day of the month ``delta`` months away from ``value``."""
    index = value.year * 12 + (value.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def month_window(reference: DateLike) -> tuple[date, date]:
    """Half-open [start of month, start of next month)."""
    ref = to_date(reference)
    start = ref.replace(day=1)
    return start, add_months(start, 1)


def year_window(reference: DateLike) -> tuple[date, date]:
    """Half-open [Jan 1, Jan 1 of next year)."""
    ref = to_date(reference)
    return date(ref.year, 1, 1), date(ref.year + 1, 1, 1)


def in_window(value: date, window: tuple[date, date]) -> bool:
    start, end = window
    return start <= value < end


def next_payday(reference: DateLike) -> date:
    """Next payday strictly after the reference date.

    Payday is the 30th, or the last day of months shorter than that. A
    payday falling on the reference date itself rolls to the next month.
    """
    current = to_date(reference)
    target_day = min(PAYDAY_TARGET_DAY, days_in_month(current.year, current.month))
    payday = current.replace(day=target_day)

    if payday <= current:
        nxt = add_months(current, 1)
        payday = nxt.replace(day=min(PAYDAY_TARGET_DAY, days_in_month(nxt.year, nxt.month)))

    return payday


def start_of_week(value: date) -> date:
    """Monday of the week containing ``value``."""
    return value - timedelta(days=value.weekday())


def format_display_date(value: DateLike) -> str:
    """``Jan 5, 2025`` style label; unparsable input renders as a dash."""
    try:
        d = to_date(value)
    except InvalidDateError:
        return INVALID_DATE_PLACEHOLDER
    return f"{d:%b} {d.day}, {d.year}"


def format_short_date(value: date) -> str:
    """``Oct 30`` style label used for the payday card."""
    return f"{value:%b} {value.day}"
