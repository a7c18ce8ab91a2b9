from __future__ import annotations

from flask import Flask

from ..common.web import json_view, ok
from ..core.authorization import dashboard_for
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/dashboard", methods=["GET"], endpoint="employee_dashboard")
    @json_view
    def employee_dashboard(identity):
        employee = container.employee_service.get_for_user(identity.user_id)
        if employee is None:
            # No profile yet: the client shows the setup form.
            return ok({"profile_required": True, "setup_path": "/employee/profile"})
        return ok(container.dashboard_service.employee_overview(employee=employee))

    @app.route("/manager/dashboard", methods=["GET"], endpoint="manager_dashboard")
    @json_view
    def manager_dashboard(identity):
        return ok(container.dashboard_service.manager_dashboard(identity=identity))

    @app.route("/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @json_view
    def admin_dashboard(identity):
        return ok(container.dashboard_service.admin_dashboard(identity=identity))

    @app.route("/protected", methods=["GET"], endpoint="protected")
    @json_view
    def protected(identity):
        # Reached only by signed-in users without a known role.
        return ok(
            {
                "email": identity.email,
                "role": identity.role.value if identity.role else None,
                "dashboard": dashboard_for(identity.role),
            }
        )
