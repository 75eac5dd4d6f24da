from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def not_found(entity_label: str):
    return fail(f"{entity_label} not found", 404)


def json_body() -> Any:
    """Request JSON or None when the body is missing / not JSON."""
    return request.get_json(silent=True)


def api_endpoint(failure_message: str):
    """Translate domain errors to 400 and anything unexpected to a logged 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return fail(str(e), 400)
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return fail(failure_message, 500)

        return wrapper

    return decorator
