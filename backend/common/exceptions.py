"""
Standardized error handling for API responses.

Every error leaving the service is rendered in the same JSON envelope the
successful routes use:

    {"success": false, "message": "<safe message>", ...extra fields}

Architecture:
    The module uses a two-tier approach:
    1. Internal errors are logged with full details for debugging
    2. User-facing errors contain only safe messages (provider messages or
       fixed texts); unexpected failures collapse to "Internal server error"

Example:
    ```python
    from common.exceptions import APIError

    if not email:
        raise APIError("Email is required", status_code=400)
    ```
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

# HTTP Status Code Constants
HTTP_400_BAD_REQUEST = 400
HTTP_401_UNAUTHORIZED = 401
HTTP_500_INTERNAL_SERVER_ERROR = 500

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"
INVALID_REQUEST_BODY_MESSAGE = "Invalid request body"


class APIError(Exception):
    """
    Base exception class for API errors with user-friendly messages.

    Attributes:
        message (str): Message that can be safely exposed to clients.
        status_code (int): HTTP status code to return (default: 500).
        internal_error (Exception | None): The original exception, logged but
            never exposed to clients.
        payload (dict[str, Any]): Extra envelope fields, e.g.
            ``{"needsVerification": True}``.

    Example:
        ```python
        raise APIError(
            message="Please verify your email before logging in",
            status_code=401,
            payload={"needsVerification": True},
        )
        ```
    """

    def __init__(
        self,
        message: str,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        internal_error: Exception | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.internal_error = internal_error
        self.payload = payload or {}
        super().__init__(self.message)


def error_envelope(message: str, **extra: Any) -> dict[str, Any]:
    """Build the failure body shared by every endpoint."""
    return {"success": False, **extra, "message": message}


def internal_server_error(operation: str, error: Exception) -> APIError:
    """
    Log an unexpected failure and return the generic 500 error for it.

    Args:
        operation: Description of what was being done (e.g. "Signup").
        error: The exception that escaped the provider call.

    Returns:
        APIError with status 500 and the fixed "Internal server error" message.
        Nothing from ``error`` reaches the client.
    """
    logger.opt(exception=error).error(f"{operation} error: {error}")
    return APIError(
        INTERNAL_SERVER_ERROR_MESSAGE,
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        internal_error=error,
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.message, **exc.payload),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed JSON or wrongly-typed fields: never reaches the provider
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content=error_envelope(INVALID_REQUEST_BODY_MESSAGE),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        f"Unhandled exception in {request.method} {request.url.path}: {exc}"
    )
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(INTERNAL_SERVER_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to ``app``."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
