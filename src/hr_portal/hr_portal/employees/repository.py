from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, ProfileInput


class EmployeeRepository(Protocol):
    """Repository interface for employee profiles.

    Note: services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def code_exists(self, employee_code: str) -> bool:
        raise NotImplementedError

    def create(self, *, user_id: str, employee_code: str, email: str, profile: ProfileInput) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, *, profile: ProfileInput) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: int) -> bool:
        raise NotImplementedError

    def list_all(self, *, department_id: Optional[int] = None) -> Sequence[Employee]:
        """Employees ordered by last name."""

        raise NotImplementedError
