"""Application exceptions, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(AppError):
    status_code = 404

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class StoreError(AppError):
    """A failure reported by DynamoDB (or the transport in front of it)."""


def validation_errors(err: ValidationError) -> dict[str, list[str]]:
    fields: dict[str, list[str]] = {}
    for item in err.errors():
        loc = ".".join(str(part) for part in item.get("loc", ())) or "body"
        fields.setdefault(loc, []).append(item.get("msg", "invalid"))
    return fields


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def unprocessable(err: ValidationError):
        fields = validation_errors(err)
        first = next(iter(fields.values()))[0] if fields else "invalid request"
        return jsonify({"message": first, "errors": fields}), 422

    @app.errorhandler(NotFound)
    def not_found(err: NotFound):
        return jsonify({"message": err.message}), err.status_code

    @app.errorhandler(StoreError)
    def store_failure(err: StoreError):
        return jsonify({"message": err.message}), err.status_code

    @app.errorhandler(HTTPException)
    def http_error(err: HTTPException):  # type: ignore[override]
        return jsonify({"message": err.description}), err.code or 500


def ok(data: Any, status: int = 200):
    return jsonify(data), status
