from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """User roles used for access control."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Return the role for ``value`` or None for unknown/missing roles."""
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class LeaveType(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    EMERGENCY = "emergency"
    MATERNITY = "maternity"
    PATERNITY = "paternity"


class LeaveStatus(str, Enum):
    """Leave approval workflow: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    PARTIAL = "partial"
    HOLIDAY = "holiday"
    SICK = "sick"


class SalaryType(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"


class Direction(str, Enum):
    """Direction of a salary change between the two latest records."""

    UP = "up"
    DOWN = "down"
    FLAT = "flat"
