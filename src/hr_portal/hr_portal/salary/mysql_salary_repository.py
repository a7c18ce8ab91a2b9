from __future__ import annotations

from typing import Sequence

from ..core.enums import SalaryType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, to_float
from .model import SalaryRecord
from .repository import SalaryRepository

_COLUMNS = "id, employee_id, base_salary, effective_date, salary_type, currency, created_at"


def _row_to_salary(r: dict) -> SalaryRecord:
    return SalaryRecord(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        base_salary=to_float(r["base_salary"]) or 0.0,
        effective_date=r["effective_date"],
        salary_type=SalaryType(r["salary_type"]),
        currency=str(r.get("currency") or "USD"),
        created_at=r.get("created_at"),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM salary_records
                WHERE employee_id=%s
                ORDER BY effective_date DESC, id DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_row_to_salary(r) for r in fetchall(cur)]

    def list_latest_for_employees(self, employee_ids: Sequence[int]) -> Sequence[SalaryRecord]:
        if not employee_ids:
            return []

        ids = [int(i) for i in employee_ids]
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM salary_records s
                WHERE s.employee_id IN ({in_clause(ids)})
                  AND NOT EXISTS (
                    SELECT 1 FROM salary_records newer
                    WHERE newer.employee_id = s.employee_id
                      AND (newer.effective_date > s.effective_date
                           OR (newer.effective_date = s.effective_date AND newer.id > s.id))
                  )
                ORDER BY s.employee_id
                """,
                tuple(ids),
            )
            return [_row_to_salary(r) for r in fetchall(cur)]
