from __future__ import annotations

from datetime import date
from itertools import cycle

import pytest

from src.hr_portal.hr_portal.core.authorization import Identity
from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hr_portal.hr_portal.employees.service import EmployeeService, team_remaining_leave


def _tokens(*values):
    source = cycle(values)
    return lambda: next(source)


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo, token_factory=_tokens("a1b2c3d4e5f6a7b8"))


def _form(**overrides):
    form = {
        "first_name": " Sam ",
        "last_name": "Rivera",
        "date_of_joining": "2024-02-01",
        "date_of_birth": "1990-06-15",
        "department_id": "3",
        "phone": "",
    }
    form.update(overrides)
    return form


def test_create_profile_generates_code(service, employees_repo):
    identity = Identity(user_id="3f2a-91bc-77de", email="sam@example.com", role=Role.EMPLOYEE)

    employee_id = service.create_profile(identity=identity, form=_form())

    created = employees_repo.get_by_id(employee_id)
    assert created.employee_code == "EMP-3F2A91A1B2"
    assert created.first_name == "Sam"
    assert created.email == "sam@example.com"
    assert created.date_of_joining == date(2024, 2, 1)
    assert created.department_id == 3
    assert created.phone is None
    assert created.annual_leave_remaining is None


def test_code_uses_placeholder_for_user_ids_without_alphanumerics(employees_repo):
    service = EmployeeService(employees_repo, token_factory=_tokens("ffff0000"))

    assert service.generate_employee_code("---") == "EMP-USERFFFF"


def test_code_falls_back_after_repeated_collisions(employees_repo):
    service = EmployeeService(employees_repo, token_factory=_tokens("abcd1234ef567890"))
    employees_repo.taken_codes.add("EMP-USER1ABCD")

    assert service.generate_employee_code("user-1") == "EMP-ABCD1234EF"


def test_one_profile_per_user(service, employee_identity):
    with pytest.raises(ValidationError) as exc:
        service.create_profile(identity=employee_identity, form=_form())

    assert str(exc.value) == "You already have an employee profile."


def test_email_is_required(service):
    identity = Identity(user_id="new-user", email=None, role=Role.EMPLOYEE)

    with pytest.raises(ValidationError):
        service.create_profile(identity=identity, form=_form())


@pytest.mark.parametrize(
    "overrides",
    [
        {"first_name": "  "},
        {"last_name": "x" * 256},
        {"date_of_joining": ""},
        {"date_of_joining": "2024-02-31"},
        {"date_of_birth": "someday"},
        {"department_id": "-1"},
        {"department_id": "sales"},
        {"address": "a" * 1025},
    ],
)
def test_profile_validation(service, overrides):
    identity = Identity(user_id="new-user", email="new@example.com", role=Role.EMPLOYEE)

    with pytest.raises(ValidationError):
        service.create_profile(identity=identity, form=_form(**overrides))


def test_update_and_delete_only_own_profile(service, employees_repo, employee_identity, manager_identity):
    with pytest.raises(AuthorizationError):
        service.update_profile(identity=manager_identity, employee_id=1, form=_form())

    service.update_profile(identity=employee_identity, employee_id=1, form=_form(position="Analyst"))
    assert employees_repo.get_by_id(1).position == "Analyst"

    with pytest.raises(AuthorizationError):
        service.delete_profile(identity=manager_identity, employee_id=1)
    with pytest.raises(NotFoundError):
        service.delete_profile(identity=employee_identity, employee_id=404)

    service.delete_profile(identity=employee_identity, employee_id=1)
    assert employees_repo.get_by_id(1) is None


def test_require_for_user(service):
    assert service.require_for_user("user-1").id == 1
    with pytest.raises(NotFoundError):
        service.require_for_user("ghost")


def test_team_listing_and_remaining_leave(service, employees_repo, make_employee_factory):
    employees_repo.add(make_employee_factory(3, "user-3", department_id=5, annual_leave_remaining=12))
    employees_repo.set_remaining(1, 8)

    team = service.list_team()

    assert [e.id for e in team] == [2, 1, 3]
    assert [e.id for e in service.list_team(department_id=5)] == [3]
    assert team_remaining_leave(team) == 20
