from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_datetime
from ..common.http import error_response, json_body, token_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/jobs/check-suspension-expiry", methods=["POST"], endpoint="job_check_suspension_expiry")
    @token_required
    def check_suspension_expiry():
        try:
            result = container.suspension_service.expire_due()
        except Exception as e:
            return error_response(e)
        return jsonify(result.to_dict())

    @app.route("/api/suspensions", methods=["POST"], endpoint="suspension_request")
    @token_required
    def suspension_request():
        try:
            data = json_body()
            try:
                employee_id = int(data.get("employee_id") or 0)
                suspension_end = parse_iso_datetime(str(data.get("suspension_end") or ""))
            except ValueError:
                raise ValidationError("employee_id and suspension_end (ISO datetime) are required")

            suspension = container.suspension_service.request(
                employee_id=employee_id,
                reason=str(data.get("reason") or ""),
                suspension_end=suspension_end,
                salary_deduction_percentage=data.get("salary_deduction_percentage") or 0,
            )
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "suspension": suspension.to_dict()}), 201

    @app.route("/api/suspensions/<int:suspension_id>/approve", methods=["POST"], endpoint="suspension_approve")
    @token_required
    def suspension_approve(suspension_id: int):
        try:
            suspension = container.suspension_service.approve(suspension_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "suspension": suspension.to_dict()})

    @app.route("/api/suspensions/<int:suspension_id>/reject", methods=["POST"], endpoint="suspension_reject")
    @token_required
    def suspension_reject(suspension_id: int):
        try:
            suspension = container.suspension_service.reject(suspension_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "suspension": suspension.to_dict()})
