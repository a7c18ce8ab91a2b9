from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_float, to_optional_int
from .model import PerformanceEvaluation
from .repository import PerformanceRepository

_COLUMNS = """
    id, employee_id, evaluation_period_start, evaluation_period_end, overall_rating,
    performance_score, goals_achieved, total_goals, evaluator_id, comments,
    salary_adjustment_percentage, bonus_amount, created_at
"""


def _row_to_evaluation(r: dict) -> PerformanceEvaluation:
    return PerformanceEvaluation(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        evaluation_period_start=r["evaluation_period_start"],
        evaluation_period_end=r["evaluation_period_end"],
        overall_rating=to_float(r.get("overall_rating")),
        performance_score=to_float(r.get("performance_score")),
        goals_achieved=to_optional_int(r.get("goals_achieved")),
        total_goals=to_optional_int(r.get("total_goals")),
        evaluator_id=to_optional_int(r.get("evaluator_id")),
        comments=r.get("comments"),
        salary_adjustment_percentage=to_float(r.get("salary_adjustment_percentage")),
        bonus_amount=to_float(r.get("bonus_amount")),
        created_at=r.get("created_at"),
    )


class MySQLPerformanceRepository(PerformanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[PerformanceEvaluation]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM performance_evaluations
                WHERE employee_id=%s
                ORDER BY evaluation_period_end DESC, id DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_row_to_evaluation(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[PerformanceEvaluation]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM performance_evaluations ORDER BY evaluation_period_end DESC, id DESC")
            return [_row_to_evaluation(r) for r in fetchall(cur)]
