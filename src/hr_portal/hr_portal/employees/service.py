from __future__ import annotations

import logging
import re
import uuid
from typing import Callable, Iterable, Mapping, Optional, Sequence

from ..common.validators import (
    optional_date,
    optional_positive_int,
    optional_text,
    require_max_length,
    require_non_empty,
    required_date,
)
from ..core.authorization import Identity
from ..core.constants import EMPLOYEE_CODE_ATTEMPTS, MAX_ADDRESS_LENGTH, MAX_NAME_LENGTH
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Employee, ProfileInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def parse_profile(form: Mapping) -> ProfileInput:
    """Validate a submitted profile form."""
    first_name = require_max_length(require_non_empty(form.get("first_name"), "First name"), "First name", MAX_NAME_LENGTH)
    last_name = require_max_length(require_non_empty(form.get("last_name"), "Last name"), "Last name", MAX_NAME_LENGTH)

    return ProfileInput(
        first_name=first_name,
        last_name=last_name,
        date_of_joining=required_date(form.get("date_of_joining"), "joining date"),
        date_of_birth=optional_date(form.get("date_of_birth"), "date of birth"),
        department_id=optional_positive_int(form.get("department_id"), "Department"),
        position=optional_text(form.get("position"), "Position", MAX_NAME_LENGTH),
        phone=optional_text(form.get("phone"), "Phone", MAX_NAME_LENGTH),
        address=optional_text(form.get("address"), "Address", MAX_ADDRESS_LENGTH),
        emergency_contact_name=optional_text(form.get("emergency_contact_name"), "Emergency contact name", MAX_NAME_LENGTH),
        emergency_contact_phone=optional_text(form.get("emergency_contact_phone"), "Emergency contact phone", MAX_NAME_LENGTH),
    )


def team_remaining_leave(employees: Iterable[Employee]) -> int:
    """Sum of manually tracked remaining leave across a team (missing counts as 0)."""
    return sum(e.annual_leave_remaining or 0 for e in employees)


class EmployeeService:
    """Use case: manage the signed-in user's employee profile."""

    def __init__(self, employees: EmployeeRepository, *, token_factory: Optional[Callable[[], str]] = None):
        self._employees = employees
        self._token_factory = token_factory or (lambda: uuid.uuid4().hex)

    def get_for_user(self, user_id: str) -> Optional[Employee]:
        return self._employees.get_by_user_id(user_id)

    def require_for_user(self, user_id: str) -> Employee:
        employee = self._employees.get_by_user_id(user_id)
        if not employee:
            raise NotFoundError("Employee profile not found.")
        return employee

    def _require_owned(self, identity: Identity, employee_id: int, action: str) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found.")
        if employee.user_id != identity.user_id:
            raise AuthorizationError(f"You can only {action} your own profile.")
        return employee

    def _candidate_code(self, user_id: str) -> str:
        sanitized = re.sub(r"[^a-zA-Z0-9]", "", user_id).upper()
        prefix = sanitized[:6] or "USER"
        return f"EMP-{prefix}{self._token_factory()[:4].upper()}"

    def generate_employee_code(self, user_id: str) -> str:
        for _ in range(EMPLOYEE_CODE_ATTEMPTS):
            candidate = self._candidate_code(user_id)
            if not self._employees.code_exists(candidate):
                return candidate
        logger.warning("Employee code collisions for user %s, using random code", user_id)
        return f"EMP-{self._token_factory()[:10].upper()}"

    def create_profile(self, *, identity: Identity, form: Mapping) -> int:
        profile = parse_profile(form)

        if not identity.email:
            raise ValidationError("Your account must have an email address configured.")

        if self._employees.get_by_user_id(identity.user_id):
            raise ValidationError("You already have an employee profile.")

        code = self.generate_employee_code(identity.user_id)
        employee_id = self._employees.create(
            user_id=identity.user_id,
            employee_code=code,
            email=identity.email,
            profile=profile,
        )
        logger.info("Created employee profile %s (%s) for user %s", employee_id, code, identity.user_id)
        return employee_id

    def update_profile(self, *, identity: Identity, employee_id: int, form: Mapping) -> None:
        profile = parse_profile(form)
        self._require_owned(identity, employee_id, "update")

        if not self._employees.update(int(employee_id), profile=profile):
            raise ValidationError("Could not save your changes.")

    def delete_profile(self, *, identity: Identity, employee_id: int) -> None:
        self._require_owned(identity, employee_id, "delete")

        if not self._employees.delete(int(employee_id)):
            raise ValidationError("Could not delete your profile.")
        logger.info("Deleted employee profile %s for user %s", employee_id, identity.user_id)

    def list_team(self, *, department_id: Optional[int] = None) -> Sequence[Employee]:
        return self._employees.list_all(department_id=department_id)
