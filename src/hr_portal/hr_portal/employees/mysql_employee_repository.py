from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_optional_int
from .model import Department, Employee, ProfileInput
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.id, e.user_id, e.employee_id, e.first_name, e.last_name, e.email,
           e.date_of_birth, e.date_of_joining, e.department_id, e.position, e.phone,
           e.address, e.emergency_contact_name, e.emergency_contact_phone,
           e.annual_leave_remaining,
           d.name AS department_name, d.description AS department_description,
           d.manager_id AS department_manager_id
    FROM employees e
    LEFT JOIN departments d ON d.id = e.department_id
"""


def _row_to_employee(r: dict) -> Employee:
    department = None
    if r.get("department_id") is not None and r.get("department_name"):
        department = Department(
            id=int(r["department_id"]),
            name=r["department_name"],
            description=r.get("department_description"),
            manager_id=to_optional_int(r.get("department_manager_id")),
        )
    return Employee(
        id=int(r["id"]),
        user_id=str(r["user_id"]),
        employee_code=r["employee_id"],
        first_name=r["first_name"],
        last_name=r["last_name"],
        email=r["email"],
        date_of_joining=r["date_of_joining"],
        date_of_birth=r.get("date_of_birth"),
        department_id=to_optional_int(r.get("department_id")),
        position=r.get("position"),
        phone=r.get("phone"),
        address=r.get("address"),
        emergency_contact_name=r.get("emergency_contact_name"),
        emergency_contact_phone=r.get("emergency_contact_phone"),
        annual_leave_remaining=to_optional_int(r.get("annual_leave_remaining")),
        department=department,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_SELECT + " WHERE e.id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_SELECT + " WHERE e.user_id=%s", (user_id,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def code_exists(self, employee_code: str) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("SELECT id FROM employees WHERE employee_id=%s", (employee_code,))
            return fetchone(cur) is not None

    def create(self, *, user_id: str, employee_code: str, email: str, profile: ProfileInput) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO employees(
                    user_id, employee_id, first_name, last_name, email, date_of_birth,
                    date_of_joining, department_id, position, phone, address,
                    emergency_contact_name, emergency_contact_phone
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    user_id,
                    employee_code,
                    profile.first_name,
                    profile.last_name,
                    email,
                    profile.date_of_birth,
                    profile.date_of_joining,
                    profile.department_id,
                    profile.position,
                    profile.phone,
                    profile.address,
                    profile.emergency_contact_name,
                    profile.emergency_contact_phone,
                ),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, *, profile: ProfileInput) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, date_of_birth=%s, date_of_joining=%s,
                    department_id=%s, position=%s, phone=%s, address=%s,
                    emergency_contact_name=%s, emergency_contact_phone=%s
                WHERE id=%s
                """,
                (
                    profile.first_name,
                    profile.last_name,
                    profile.date_of_birth,
                    profile.date_of_joining,
                    profile.department_id,
                    profile.position,
                    profile.phone,
                    profile.address,
                    profile.emergency_contact_name,
                    profile.emergency_contact_phone,
                    int(employee_id),
                ),
            )
            return cur.rowcount > 0

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def list_all(self, *, department_id: Optional[int] = None) -> Sequence[Employee]:
        where = ""
        params: tuple = ()
        if department_id is not None:
            where = " WHERE e.department_id=%s"
            params = (int(department_id),)

        with db_cursor(self._conn_factory) as cur:
            cur.execute(_SELECT + where + " ORDER BY e.last_name ASC", params)
            return [_row_to_employee(r) for r in fetchall(cur)]
