from __future__ import annotations

from typing import Protocol, Sequence

from .model import SalaryRecord


class SalaryRepository(Protocol):
    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[SalaryRecord]:
        """Latest records first, by effective date."""

        raise NotImplementedError

    def list_latest_for_employees(self, employee_ids: Sequence[int]) -> Sequence[SalaryRecord]:
        """The current record of each listed employee that has one."""

        raise NotImplementedError
