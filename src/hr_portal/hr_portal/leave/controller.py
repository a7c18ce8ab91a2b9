from __future__ import annotations

from flask import Flask

from ..common.web import form_data, json_view, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _employee(identity):
        return container.employee_service.require_for_user(identity.user_id)

    @app.route("/employee/leave", methods=["GET"], endpoint="employee_leave")
    @json_view
    def employee_leave(identity):
        return ok(container.leave_service.leave_overview(employee=_employee(identity)))

    @app.route("/employee/leave/history", methods=["GET"], endpoint="employee_leave_history")
    @json_view
    def employee_leave_history(identity):
        return ok(container.leave_service.leave_history(employee=_employee(identity)))

    @app.route("/employee/leave", methods=["POST"], endpoint="employee_leave_submit")
    @json_view
    def employee_leave_submit(identity):
        leave_id = container.leave_service.submit_leave_request(identity=identity, form=form_data())
        return ok(message="Leave request submitted.", id=leave_id, status=201)

    @app.route("/employee/leave/<int:leave_id>", methods=["DELETE"], endpoint="employee_leave_delete")
    @json_view
    def employee_leave_delete(identity, leave_id: int):
        container.leave_service.delete_leave_request(identity=identity, leave_id=leave_id)
        return ok(message="Leave request deleted.")

    @app.route("/manager/leave", methods=["GET"], endpoint="manager_leave")
    @json_view
    def manager_leave(identity):
        return ok(container.leave_service.list_for_manager(identity=identity))

    @app.route("/manager/leave/<int:leave_id>/approve", methods=["POST"], endpoint="manager_leave_approve")
    @json_view
    def manager_leave_approve(identity, leave_id: int):
        container.leave_service.approve_leave(identity=identity, leave_id=leave_id)
        return ok(message="Leave request approved.")

    @app.route("/manager/leave/<int:leave_id>/reject", methods=["POST"], endpoint="manager_leave_reject")
    @json_view
    def manager_leave_reject(identity, leave_id: int):
        reason = form_data().get("rejection_reason") or ""
        container.leave_service.reject_leave(identity=identity, leave_id=leave_id, rejection_reason=reason)
        return ok(message="Leave request rejected.")
