from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import inclusive_day_count, now_local, to_date, year_window
from ..common.validators import optional_text, require_int
from ..core.authorization import Identity, require_role
from ..core.constants import (
    ANNUAL_LEAVE_ALLOWANCE,
    DEFAULT_LEAVE_LIST_LIMIT,
    DEFAULT_MANAGER_LEAVE_LIMIT,
    MAX_REASON_LENGTH,
)
from ..core.enums import LeaveStatus, LeaveType, Role
from ..core.exceptions import AuthorizationError, InvalidDateError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from . import balance
from .model import LeaveHistory, LeaveOverview, ManagerLeaveRow, NewLeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class LeaveService:
    """Use cases around leave: submit, withdraw, decide and summarise."""

    def __init__(
        self,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        *,
        allowance: int = ANNUAL_LEAVE_ALLOWANCE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._leaves = leaves
        self._employees = employees
        self._allowance = int(allowance)
        self._clock = clock or now_local

    @property
    def allowance(self) -> int:
        return self._allowance

    def _today(self) -> date:
        return self._clock().date()

    def submit_leave_request(self, *, identity: Identity, form: Mapping) -> int:
        try:
            leave_type = LeaveType(str(form.get("leave_type") or "").strip().lower())
        except ValueError:
            raise ValidationError("Please complete all required fields.") from None

        employee_id = require_int(form.get("employee_id"), "Employee")
        start_raw = form.get("start_date")
        end_raw = form.get("end_date")
        if _is_blank(start_raw) or _is_blank(end_raw):
            raise ValidationError("Please complete all required fields.")

        try:
            start_date = to_date(start_raw, "start date")
            end_date = to_date(end_raw, "end date")
        except InvalidDateError:
            raise ValidationError("Enter valid dates.") from None

        if end_date < start_date:
            raise ValidationError("End date must be after start date.")

        days_requested = inclusive_day_count(start_date, end_date)
        reason = optional_text(form.get("reason"), "Reason", MAX_REASON_LENGTH)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee profile not found.")
        if employee.user_id != identity.user_id:
            raise AuthorizationError("You can only request leave for your own account.")

        remaining = employee.annual_leave_remaining
        if remaining is not None and days_requested > remaining:
            raise ValidationError(f"You only have {remaining} days remaining.")

        leave_id = self._leaves.create(
            NewLeaveRequest(
                employee_id=employee.id,
                leave_type=leave_type,
                start_date=start_date,
                end_date=end_date,
                days_requested=days_requested,
                reason=reason,
            )
        )
        logger.info(
            "Leave request %s submitted by employee %s (%s, %d days)",
            leave_id,
            employee.id,
            leave_type.value,
            days_requested,
        )
        return leave_id

    def delete_leave_request(self, *, identity: Identity, leave_id: int) -> None:
        leave = self._leaves.get_by_id(int(leave_id))
        if not leave:
            raise NotFoundError("Leave request not found.")

        owner = self._employees.get_by_id(leave.employee_id)
        if not owner or owner.user_id != identity.user_id:
            raise AuthorizationError("You can only manage your own leave requests.")

        if not self._leaves.delete(leave.id):
            raise ValidationError("Could not delete leave request.")
        logger.info("Leave request %s deleted by employee %s", leave.id, owner.id)

    def _decide(self, *, identity: Identity, leave_id: int, status: LeaveStatus, rejection_reason: Optional[str] = None) -> None:
        require_role(identity, Role.MANAGER, Role.ADMIN)

        approver = self._employees.get_by_user_id(identity.user_id)
        if not approver:
            raise NotFoundError("Manager profile not found.")

        leave = self._leaves.get_by_id(int(leave_id))
        if not leave:
            raise NotFoundError("Leave request not found.")
        if leave.status != LeaveStatus.PENDING:
            raise ValidationError("Leave request has already been processed.")

        ok = self._leaves.decide(
            leave.id,
            status=status,
            decided_by=approver.id,
            rejection_reason=rejection_reason,
        )
        if not ok:
            raise ValidationError("Unable to update leave request.")
        logger.info("Leave request %s %s by employee %s", leave.id, status.value, approver.id)

    def approve_leave(self, *, identity: Identity, leave_id: int) -> None:
        self._decide(identity=identity, leave_id=leave_id, status=LeaveStatus.APPROVED)

    def reject_leave(self, *, identity: Identity, leave_id: int, rejection_reason: str = "") -> None:
        self._decide(
            identity=identity,
            leave_id=leave_id,
            status=LeaveStatus.REJECTED,
            rejection_reason=optional_text(rejection_reason, "Rejection reason", MAX_REASON_LENGTH),
        )

    def leave_overview(self, *, employee: Employee, today: Optional[date] = None) -> LeaveOverview:
        today = today or self._today()
        start, end = year_window(today)
        requests = list(self._leaves.list_for_employee(employee.id, start_from=start, start_before=end))

        return LeaveOverview(
            requests=requests[:DEFAULT_LEAVE_LIST_LIMIT],
            balances=list(balance.per_type_balance(requests).values()),
            pending_count=balance.pending_count(requests),
            rejected_count=balance.rejected_count(requests),
            remaining_balance=balance.remaining_balance(
                requests,
                self._allowance,
                employee.annual_leave_remaining,
                reference=today,
            ),
        )

    def leave_history(self, *, employee: Employee, today: Optional[date] = None) -> LeaveHistory:
        today = today or self._today()
        start, end = year_window(today)
        approved = self._leaves.list_for_employee(
            employee.id,
            start_from=start,
            start_before=end,
            status=LeaveStatus.APPROVED,
            order_by_start=True,
        )
        return balance.split_history(approved, today)

    def list_for_manager(self, *, identity: Identity, limit: int = DEFAULT_MANAGER_LEAVE_LIMIT) -> list[ManagerLeaveRow]:
        require_role(identity, Role.MANAGER, Role.ADMIN)

        by_id = {e.id: e for e in self._employees.list_all()}
        rows: list[ManagerLeaveRow] = []
        for request in self._leaves.list_recent(limit=limit):
            employee = by_id.get(request.employee_id)
            rows.append(
                ManagerLeaveRow(
                    request=request,
                    employee_name=employee.display_name if employee else "Unknown",
                    employee_code=employee.employee_code if employee else "—",
                    remaining_leave=(employee.annual_leave_remaining or 0) if employee else 0,
                )
            )
        return rows
