"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify

from .errors import AppError, ensure_app_error


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    response = jsonify({"success": True, "data": data})
    response.status_code = status
    return response


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a standardized failure envelope."""

    if isinstance(error, AppError):
        response = jsonify({"success": False, "error": error.to_dict()})
        response.status_code = status or error.status_code
        return response

    response = jsonify({"success": False, "error": dict(error)})
    response.status_code = status or 400
    return response


def fail_from_exception(error: Exception, *, fallback_code: str = "internal_error") -> Response:
    """Render any exception as a failure envelope without leaking internals."""

    return fail(ensure_app_error(error, fallback_code=fallback_code))


__all__ = ["ok", "fail", "fail_from_exception"]
