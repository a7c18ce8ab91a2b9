from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: a leave request.

    ``days_requested`` is the inclusive day count of [start_date, end_date],
    computed once at submission.
    """

    id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    days_requested: int
    status: LeaveStatus = LeaveStatus.PENDING
    reason: Optional[str] = None
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewLeaveRequest:
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    days_requested: int
    reason: Optional[str] = None


@dataclass(frozen=True)
class LeaveTypeBalance:
    leave_type: LeaveType
    allowed: int
    used: int
    remaining: int


@dataclass(frozen=True)
class LeaveOverview:
    """Read-model for the employee leave page."""

    requests: list[LeaveRequest]
    balances: list[LeaveTypeBalance]
    pending_count: int
    rejected_count: int
    remaining_balance: int


@dataclass(frozen=True)
class LeaveHistory:
    total_days_taken: int
    upcoming: list[LeaveRequest] = field(default_factory=list)
    past: list[LeaveRequest] = field(default_factory=list)


@dataclass(frozen=True)
class ManagerLeaveRow:
    """Leave request joined with the requesting employee, for the manager queue."""

    request: LeaveRequest
    employee_name: str
    employee_code: str
    remaining_leave: int
