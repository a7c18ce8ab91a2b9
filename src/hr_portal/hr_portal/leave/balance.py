"""Leave balance calculations.

Every function here is pure: it reads a snapshot of leave requests for one
employee and returns numbers. Requests are attributed to the year of their
start date; a request spanning New Year is never prorated.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import DateLike, in_window, year_window
from ..core.constants import LEAVE_ALLOWANCES
from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveHistory, LeaveRequest, LeaveTypeBalance


def _approved(requests: Iterable[LeaveRequest]) -> list[LeaveRequest]:
    return [r for r in requests if r.status == LeaveStatus.APPROVED]


def approved_days(requests: Iterable[LeaveRequest], *, window: Optional[tuple[date, date]] = None) -> int:
    """Sum of approved days, optionally limited to start dates inside ``window``."""
    total = 0
    for r in _approved(requests):
        if window is not None and not in_window(r.start_date, window):
            continue
        total += int(r.days_requested or 0)
    return total


def approved_days_this_year(requests: Iterable[LeaveRequest], reference: DateLike) -> int:
    return approved_days(requests, window=year_window(reference))


def remaining_balance(
    requests: Iterable[LeaveRequest],
    allowance: int,
    override: Optional[int] = None,
    *,
    reference: Optional[DateLike] = None,
) -> int:
    """Remaining annual leave.

    A non-null ``override`` (the employee's ``annual_leave_remaining``) is
    returned unchanged, even when it disagrees with the approved total.
    Otherwise ``allowance - approved`` floored at zero. Without a
    ``reference`` the requests are assumed to be already limited to the year.
    """
    if override is not None:
        return override

    if reference is None:
        used = approved_days(requests)
    else:
        used = approved_days_this_year(requests, reference)
    return max(allowance - used, 0)


def per_type_balance(
    requests: Iterable[LeaveRequest],
    per_type_allowance: Mapping[LeaveType, int] = LEAVE_ALLOWANCES,
) -> dict[LeaveType, LeaveTypeBalance]:
    used_by_type: dict[LeaveType, int] = {t: 0 for t in per_type_allowance}
    for r in _approved(requests):
        used_by_type[r.leave_type] = used_by_type.get(r.leave_type, 0) + int(r.days_requested or 0)

    balances: dict[LeaveType, LeaveTypeBalance] = {}
    for leave_type, allowed in per_type_allowance.items():
        used = used_by_type.get(leave_type, 0)
        balances[leave_type] = LeaveTypeBalance(
            leave_type=leave_type,
            allowed=allowed,
            used=used,
            remaining=max(allowed - used, 0),
        )
    return balances


def pending_count(requests: Iterable[LeaveRequest]) -> int:
    return sum(1 for r in requests if r.status == LeaveStatus.PENDING)


def rejected_count(requests: Iterable[LeaveRequest]) -> int:
    return sum(1 for r in requests if r.status == LeaveStatus.REJECTED)


def split_history(approved: Iterable[LeaveRequest], today: date) -> LeaveHistory:
    """Split approved leave into upcoming (ends today or later) and past."""
    upcoming: list[LeaveRequest] = []
    past: list[LeaveRequest] = []
    total = 0

    for r in approved:
        total += int(r.days_requested or 0)
        if r.end_date >= today:
            upcoming.append(r)
        else:
            past.append(r)

    return LeaveHistory(total_days_taken=total, upcoming=upcoming, past=past)
