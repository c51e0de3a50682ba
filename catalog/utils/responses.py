"""Helpers for the JSON response envelope.

Every body has the shape ``{"success": bool, "data": ..., "error": ...}``.
"""

from __future__ import annotations

from typing import Any

from flask import jsonify
from flask.typing import ResponseReturnValue


def ok(data: Any, status_code: int = 200) -> ResponseReturnValue:
    return jsonify({"success": True, "data": data, "error": None}), status_code


def no_content() -> ResponseReturnValue:
    """Empty 204, used where there is nothing to return."""

    return "", 204


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> ResponseReturnValue:
    """Error response."""

    return (
        jsonify(
            {
                "success": False,
                "data": None,
                "error": {"code": code, "message": message, "details": details},
            }
        ),
        status_code,
    )
