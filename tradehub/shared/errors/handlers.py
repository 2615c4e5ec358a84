"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses carry a human-readable "message".
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tradehub.domain.accounts.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from tradehub.domain.errors import DomainError
from tradehub.domain.wallet.errors import WithdrawalValidationError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_500 = 500

VALUE_ERROR_PREFIX = "Value error, "


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None, **extra: Any
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten Pydantic validation errors into a single sentence.

    Produces messages such as "email: Invalid email address; password: Field required".
    """
    parts = []
    for error in errors:
        if error.get("type") == "json_invalid":
            return "Invalid JSON body"
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith(VALUE_ERROR_PREFIX):
            message = message[len(VALUE_ERROR_PREFIX):]
        parts.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request payloads."""
        message = describe_validation_errors(list(exc.errors()))
        logger.warning("Request validation failed on %s: %s", request.url.path, message)
        return _error_response(HTTP_400, message)

    @app.exception_handler(WithdrawalValidationError)
    async def handle_withdrawal_validation(
        _request: Request, exc: WithdrawalValidationError
    ) -> JSONResponse:
        """Handle withdrawal requests that break a withdrawal rule."""
        logger.warning("Withdrawal rejected: %s", exc.message)
        return _error_response(HTTP_400, exc.message, errors=exc.errors)

    @app.exception_handler(EmailAlreadyRegisteredError)
    async def handle_email_taken(
        _request: Request, exc: EmailAlreadyRegisteredError
    ) -> JSONResponse:
        """Handle sign-up with an email that already has an account."""
        logger.warning("Sign-up rejected: email already registered")
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(
        _request: Request, exc: InvalidCredentialsError
    ) -> JSONResponse:
        """Handle a wrong email or password."""
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(MissingTokenError)
    async def handle_missing_token(
        request: Request, exc: MissingTokenError
    ) -> JSONResponse:
        """Handle a protected route called without a bearer token."""
        logger.warning("Missing bearer token on %s", request.url.path)
        return _error_response(
            HTTP_401, exc.message, headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(InvalidTokenError)
    async def handle_invalid_token(
        request: Request, exc: InvalidTokenError
    ) -> JSONResponse:
        """Handle a forged, malformed or expired bearer token."""
        logger.warning("Invalid bearer token on %s (%s)", request.url.path, exc.reason)
        return _error_response(HTTP_403, exc.message)

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle a valid token for a user that no longer exists."""
        logger.warning("User not found: %s", exc.user_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(DomainError)
    async def handle_domain(_request: Request, exc: DomainError) -> JSONResponse:
        """Catch-all for unhandled domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
