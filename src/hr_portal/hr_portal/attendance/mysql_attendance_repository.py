from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, to_float, to_optional_int
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    id, employee_id, date, status, total_hours, check_in_time, check_out_time,
    break_duration_minutes, notes
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        date=r["date"],
        status=AttendanceStatus(r["status"]),
        total_hours=to_float(r.get("total_hours")),
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        break_duration_minutes=to_optional_int(r.get("break_duration_minutes")),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int, *, date_from: date, date_before: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND date >= %s AND date < %s
                ORDER BY date DESC
                """,
                (int(employee_id), date_from, date_before),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_for_employees(self, employee_ids: Sequence[int], *, date_from: date, date_to: date) -> Sequence[AttendanceRecord]:
        if not employee_ids:
            return []

        ids = [int(i) for i in employee_ids]
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id IN ({in_clause(ids)}) AND date BETWEEN %s AND %s
                ORDER BY date DESC, employee_id ASC
                """,
                (*ids, date_from, date_to),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def upsert_status(self, *, employee_id: int, day: date, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(employee_id), day, status.value),
            )
