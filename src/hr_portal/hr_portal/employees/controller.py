from __future__ import annotations

from flask import Flask, request

from ..common.validators import optional_positive_int
from ..common.web import form_data, json_view, ok
from ..core.authorization import require_role
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/profile", methods=["GET"], endpoint="employee_profile")
    @json_view
    def employee_profile(identity):
        return ok(container.employee_service.require_for_user(identity.user_id))

    @app.route("/employee/profile", methods=["POST"], endpoint="employee_profile_create")
    @json_view
    def employee_profile_create(identity):
        employee_id = container.employee_service.create_profile(identity=identity, form=form_data())
        return ok(message="Profile created successfully.", id=employee_id, status=201)

    @app.route("/employee/profile/<int:employee_id>", methods=["PUT", "POST"], endpoint="employee_profile_update")
    @json_view
    def employee_profile_update(identity, employee_id: int):
        container.employee_service.update_profile(identity=identity, employee_id=employee_id, form=form_data())
        return ok(message="Profile updated successfully.")

    @app.route("/employee/profile/<int:employee_id>", methods=["DELETE"], endpoint="employee_profile_delete")
    @json_view
    def employee_profile_delete(identity, employee_id: int):
        container.employee_service.delete_profile(identity=identity, employee_id=employee_id)
        return ok(message="Profile deleted.")

    @app.route("/manager/team", methods=["GET"], endpoint="manager_team")
    @json_view
    def manager_team(identity):
        require_role(identity, Role.MANAGER)
        department_id = optional_positive_int(request.args.get("department_id"), "Department")
        return ok(container.employee_service.list_team(department_id=department_id))
