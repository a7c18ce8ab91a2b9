from __future__ import annotations

from typing import Protocol, Sequence

from .model import PerformanceEvaluation


class PerformanceRepository(Protocol):
    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[PerformanceEvaluation]:
        """Latest evaluations first, by period end."""

        raise NotImplementedError

    def list_all(self) -> Sequence[PerformanceEvaluation]:
        raise NotImplementedError
