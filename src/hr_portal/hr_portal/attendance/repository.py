from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_id: int, *, date_from: date, date_before: date) -> Sequence[AttendanceRecord]:
        """Records in the half-open window [date_from, date_before), newest first."""

        raise NotImplementedError

    def list_for_employees(self, employee_ids: Sequence[int], *, date_from: date, date_to: date) -> Sequence[AttendanceRecord]:
        """Records in the inclusive range [date_from, date_to], newest first."""

        raise NotImplementedError

    def upsert_status(self, *, employee_id: int, day: date, status: AttendanceStatus) -> None:
        """Insert or update the (employee_id, date) row."""

        raise NotImplementedError
