from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/settlement", methods=["GET", "PUT"], endpoint="settlement_settings")
    @token_required
    def settlement_settings():
        try:
            if request.method == "PUT":
                data = json_body()
                config = container.settings_service.update_settlement_settings(
                    deduction_percentage=data.get("deduction_percentage"),
                    working_days_per_month=data.get("working_days_per_month"),
                    cutoff_hour=data.get("cutoff_hour"),
                    non_working_days=data.get("non_working_days"),
                )
            else:
                config = container.settings_service.load_settlement_config()
            last_runs = container.settings_service.last_runs()
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "settings": config.to_dict(), "last_runs": last_runs})
