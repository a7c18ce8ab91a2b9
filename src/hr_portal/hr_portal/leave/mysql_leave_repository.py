from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_optional_int
from .model import LeaveRequest, NewLeaveRequest
from .repository import LeaveRepository

_COLUMNS = """
    id, employee_id, leave_type, start_date, end_date, days_requested, reason,
    status, approved_by, approved_at, rejection_reason, created_at
"""


def _row_to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        leave_type=LeaveType(r["leave_type"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        days_requested=int(r["days_requested"]),
        status=LeaveStatus(r["status"]),
        reason=r.get("reason"),
        approved_by=to_optional_int(r.get("approved_by")),
        approved_at=r.get("approved_at"),
        rejection_reason=r.get("rejection_reason"),
        created_at=r.get("created_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _row_to_leave(r) if r else None

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
        clauses = ["employee_id=%s"]
        params: list[object] = [int(employee_id)]

        if start_from is not None:
            clauses.append("start_date >= %s")
            params.append(start_from)
        if start_before is not None:
            clauses.append("start_date < %s")
            params.append(start_before)
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        order = "start_date DESC" if order_by_start else "created_at DESC, id DESC"
        sql = f"SELECT {_COLUMNS} FROM leave_requests WHERE {' AND '.join(clauses)} ORDER BY {order}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [_row_to_leave(r) for r in fetchall(cur)]

    def list_recent(self, *, limit: int = 100) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM leave_requests ORDER BY created_at DESC, id DESC LIMIT %s",
                (int(limit),),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]

    def create(self, new: NewLeaveRequest) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, leave_type, start_date, end_date, reason, days_requested, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(new.employee_id),
                    new.leave_type.value,
                    new.start_date,
                    new.end_date,
                    new.reason,
                    int(new.days_requested),
                    LeaveStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def delete(self, leave_id: int) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM leave_requests WHERE id=%s", (int(leave_id),))
            return cur.rowcount > 0

    def decide(
        self,
        leave_id: int,
        *,
        status: LeaveStatus,
        decided_by: int,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, approved_by=%s, approved_at=%s, rejection_reason=%s
                WHERE id=%s AND status=%s
                """,
                (
                    status.value,
                    int(decided_by),
                    now_local(),
                    rejection_reason,
                    int(leave_id),
                    LeaveStatus.PENDING.value,
                ),
            )
            if cur.rowcount == 0:
                return False

            if status == LeaveStatus.APPROVED:
                cur.execute(
                    """
                    UPDATE employees e
                    JOIN leave_requests lr ON lr.employee_id = e.id
                    SET e.annual_leave_remaining = GREATEST(e.annual_leave_remaining - lr.days_requested, 0)
                    WHERE lr.id=%s AND e.annual_leave_remaining IS NOT NULL
                    """,
                    (int(leave_id),),
                )
            return True
