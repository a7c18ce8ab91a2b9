from __future__ import annotations

from flask import Flask

from ..common.web import json_view, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/salary", methods=["GET"], endpoint="employee_salary")
    @json_view
    def employee_salary(identity):
        employee = container.employee_service.require_for_user(identity.user_id)
        return ok(container.salary_service.salary_overview(employee=employee))
