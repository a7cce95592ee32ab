from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/jobs/process-daily-attendance", methods=["POST"], endpoint="job_process_daily_attendance")
    @token_required
    def process_daily_attendance():
        try:
            result = container.settlement_job.run()
        except Exception as e:
            return error_response(e)
        return jsonify(result.to_dict())

    @app.route("/api/jobs/recalculate-deductions", methods=["POST"], endpoint="job_recalculate_deductions")
    @token_required
    def recalculate_deductions():
        try:
            result = container.deduction_recalculator.run()
        except Exception as e:
            return error_response(e)
        return jsonify(result.to_dict())

    @app.route("/api/jobs/reset-monthly-salary", methods=["POST"], endpoint="job_reset_monthly_salary")
    @token_required
    def reset_monthly_salary():
        try:
            result = container.monthly_reset.run()
        except Exception as e:
            return error_response(e)
        return jsonify(result.to_dict())
