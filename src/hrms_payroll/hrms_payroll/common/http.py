from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException

from ..core.exceptions import NotFoundError, ValidationError


def ok(data: Any, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


def require_arg(name: str) -> str:
    value = request.args.get(name)
    if not value:
        raise BadRequest(f"Missing query parameter {name!r}")
    return value


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return fail(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), 404)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)
