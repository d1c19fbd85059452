from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from ..users.model import Caller
from ..users.tokens import TokenService

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (UnauthorizedError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    parts = header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def make_token_required(tokens: TokenService):
    """Build a view decorator that validates the bearer token and stores the caller on ``g``."""

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.caller = tokens.validate(bearer_token())
            return view(*args, **kwargs)

        return wrapper

    return token_required


def current_caller() -> Caller:
    return g.caller


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    @app.errorhandler(AuthenticationError)
    @app.errorhandler(UnauthorizedError)
    @app.errorhandler(AuthorizationError)
    @app.errorhandler(NotFoundError)
    def handle_domain_error(e):
        status = next(code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls))
        return jsonify({"message": str(e)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"message": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Server error"}), 500
