from __future__ import annotations

from flask import Flask

from ..common.web import json_view, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/manager/performance", methods=["GET"], endpoint="manager_performance")
    @json_view
    def manager_performance(identity):
        return ok(container.performance_service.team_performance(identity=identity))
