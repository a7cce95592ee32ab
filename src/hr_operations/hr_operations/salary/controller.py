from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.salary_service

    @app.route("/api/salaries/<int:employee_id>", methods=["GET", "PUT"], endpoint="salary_detail")
    @token_required
    def salary_detail(employee_id: int):
        try:
            if request.method == "PUT":
                state = service.set_base_salary(employee_id, json_body().get("base_salary"))
            else:
                state = service.get(employee_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "salary": service.to_dict(state)})

    @app.route(
        "/api/salaries/<int:employee_id>/clear-deductions", methods=["POST"], endpoint="salary_clear_deductions"
    )
    @token_required
    def salary_clear_deductions(employee_id: int):
        try:
            state = service.clear_deductions(employee_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "salary": service.to_dict(state)})
