from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest, NewLeaveRequest


class LeaveRepository(Protocol):
    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: int,
        *,
        start_from: Optional[date] = None,
        start_before: Optional[date] = None,
        status: Optional[LeaveStatus] = None,
        order_by_start: bool = False,
        limit: Optional[int] = None,
    ) -> Sequence[LeaveRequest]:
        """Requests whose start date lies in [start_from, start_before).

        Newest created first, or latest start first when ``order_by_start``.
        """

        raise NotImplementedError

    def list_recent(self, *, limit: int = 100) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def create(self, new: NewLeaveRequest) -> int:
        raise NotImplementedError

    def delete(self, leave_id: int) -> bool:
        raise NotImplementedError

    def decide(
        self,
        leave_id: int,
        *,
        status: LeaveStatus,
        decided_by: int,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        """Move a pending request to approved/rejected.

        Returns False when the request does not exist or was already decided.
        Approval also deducts the days from a non-null remaining-leave override.
        """

        raise NotImplementedError
