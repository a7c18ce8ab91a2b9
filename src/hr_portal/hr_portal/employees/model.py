from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Department:
    id: int
    name: str
    description: Optional[str] = None
    manager_id: Optional[int] = None


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee profile.

    ``employee_code`` is the generated public code (``EMP-...``) stored in the
    ``employee_id`` column. ``annual_leave_remaining`` is a manually managed
    override; None means "use the computed balance".
    """

    id: int
    user_id: str
    employee_code: str
    first_name: str
    last_name: str
    email: str
    date_of_joining: date
    date_of_birth: Optional[date] = None
    department_id: Optional[int] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    annual_leave_remaining: Optional[int] = None
    department: Optional[Department] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class ProfileInput:
    """Validated profile fields shared by create and update."""

    first_name: str
    last_name: str
    date_of_joining: date
    date_of_birth: Optional[date] = None
    department_id: Optional[int] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
