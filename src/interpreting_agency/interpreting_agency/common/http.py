from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.exceptions import ConflictError, DomainError, NotFoundError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    """Request JSON as a dict; missing or malformed bodies read as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def domain_error_response(e: DomainError):
    if isinstance(e, NotFoundError):
        status = 404
    elif isinstance(e, ConflictError):
        status = 409
    else:
        status = 400
    return jsonify({"success": False, "message": str(e)}), status


def unexpected_error_response(action: str):
    logger.exception("Unexpected error while %s", action)
    return jsonify({"success": False, "message": f"System error while {action}"}), 500
