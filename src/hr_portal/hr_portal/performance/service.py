from __future__ import annotations

from ..core.authorization import Identity, require_role
from ..core.enums import Role
from .model import PerformanceEvaluation, TeamPerformanceSummary
from .repository import PerformanceRepository
from .summary import latest_per_employee, summarize_team


class PerformanceService:
    def __init__(self, evaluations: PerformanceRepository):
        self._evaluations = evaluations

    def latest_by_employee(self) -> dict[int, PerformanceEvaluation]:
        return latest_per_employee(self._evaluations.list_all())

    def team_performance(self, *, identity: Identity) -> TeamPerformanceSummary:
        require_role(identity, Role.MANAGER, Role.ADMIN)
        return summarize_team(list(self.latest_by_employee().values()))
