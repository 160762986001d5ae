"""JSON error envelope shared by every API blueprint."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..logging_config import get_logger
from .forms import JsonForm, format_errors

logger = get_logger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
SERVER_ERROR = "SERVER_ERROR"


def error_response(code: str, message: str, status: int, *, details: Any = None):
    """Return ``{"error": {"code", "message", "details"?}}`` with ``status``."""

    payload: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        payload["details"] = details
    return jsonify({"error": payload}), status


def validation_error(form: JsonForm):
    return error_response(
        VALIDATION_ERROR, format_errors(form.errors), 400, details=form.errors
    )


def not_found(entity: str):
    return error_response(NOT_FOUND, f"{entity} not found", 404)


def register_error_handlers(app: Flask) -> None:
    """Render HTTP and unexpected errors with the JSON envelope."""

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        code = NOT_FOUND if exc.code == 404 else "HTTP_ERROR"
        return error_response(code, exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def _unexpected_error(exc: Exception):
        logger.exception("Unhandled error while serving request")
        return error_response(SERVER_ERROR, "An unexpected error occurred", 500)
