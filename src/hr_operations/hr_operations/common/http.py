from __future__ import annotations

import hmac
import logging
from functools import wraps

from flask import current_app, jsonify, request

from ..core.exceptions import AuthorizationError, ConfigurationError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Api-Token"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConfigurationError, 500),
)


def token_required(view):
    """Shared-secret guard for callers such as the external scheduler."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        expected = current_app.config.get("API_TOKEN") or ""
        supplied = request.headers.get(TOKEN_HEADER, "")
        if not expected or not hmac.compare_digest(supplied.encode(), expected.encode()):
            return jsonify({"success": False, "error": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper


def error_response(e: Exception):
    if isinstance(e, DomainError):
        status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls)), 400)
        if status >= 500:
            logger.error("%s: %s", request.path, e)
        return jsonify({"success": False, "error": str(e)}), status

    logger.exception("Unhandled error on %s", request.path)
    return jsonify({"success": False, "error": str(e) or "Unknown error occurred"}), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
