"""Salary change between the two most recent salary records."""

from __future__ import annotations

from typing import Sequence

from ..core.enums import Direction
from .model import SalaryDelta, SalaryRecord

NO_DATA_LABEL = "no data"
INITIAL_LABEL = "initial salary"
INCREMENT_LABEL = "increment applied"
DECREMENT_LABEL = "decrement applied"
UNCHANGED_LABEL = "no change since last review"


def project_delta(history: Sequence[SalaryRecord]) -> SalaryDelta:
    """``history`` must be ordered most recent first; older entries are ignored."""
    if not history:
        return SalaryDelta(direction=Direction.FLAT, delta=0.0, label=NO_DATA_LABEL)

    current = history[0]
    if len(history) == 1:
        return SalaryDelta(
            direction=Direction.UP,
            delta=float(current.base_salary),
            label=INITIAL_LABEL,
            current=current,
        )

    previous = history[1]
    delta = float(current.base_salary) - float(previous.base_salary)
    if delta > 0:
        direction, label = Direction.UP, INCREMENT_LABEL
    elif delta < 0:
        direction, label = Direction.DOWN, DECREMENT_LABEL
    else:
        direction, label = Direction.FLAT, UNCHANGED_LABEL

    return SalaryDelta(direction=direction, delta=delta, label=label, current=current, previous=previous)
