from __future__ import annotations

from flask import Flask, request

from ..common.web import form_data, json_view, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/attendance", methods=["GET"], endpoint="employee_attendance")
    @json_view
    def employee_attendance(identity):
        employee = container.employee_service.require_for_user(identity.user_id)
        reference = request.args.get("month") or None
        return ok(
            {
                "month": container.attendance_service.month_summary(employee=employee, reference=reference),
                "trend": container.attendance_service.weekly_trend(employee=employee, reference=reference),
            }
        )

    @app.route("/manager/attendance", methods=["GET"], endpoint="manager_attendance")
    @json_view
    def manager_attendance(identity):
        return ok(
            container.attendance_service.team_attendance(
                identity=identity,
                date_from=request.args.get("from") or None,
                date_to=request.args.get("to") or None,
            )
        )

    @app.route("/manager/attendance", methods=["POST"], endpoint="manager_attendance_mark")
    @json_view
    def manager_attendance_mark(identity):
        form = form_data()
        container.attendance_service.mark_attendance(
            identity=identity,
            employee_id=form.get("employee_id"),
            day=form.get("date"),
            status=form.get("status"),
        )
        return ok(message="Attendance updated.")
