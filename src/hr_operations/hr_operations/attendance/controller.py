from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, token_required
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<int:employee_id>/check-in", methods=["POST"], endpoint="attendance_check_in")
    @token_required
    def attendance_check_in(employee_id: int):
        try:
            record = container.attendance_service.check_in(employee_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "status": record.status.value, "date": record.work_date.isoformat()}), 201

    @app.route("/api/attendance/<int:employee_id>/history", methods=["GET"], endpoint="attendance_history")
    @token_required
    def attendance_history(employee_id: int):
        limit = request.args.get("limit", type=int) or DEFAULT_HISTORY_LIMIT
        try:
            rows = container.attendance_service.history(employee_id, limit=min(limit, 365))
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "records": rows})
