"""
Exception handlers for FastAPI application.

This module provides:
- Application error handler (ApplicationError), mapping each failure kind
  to its HTTP status by error code
- Pydantic validation error handler (RequestValidationError)
- General unhandled exception handler (Exception)
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.application.exceptions import ApplicationError

logger = logging.getLogger(__name__)

# error_code -> HTTP status
ERROR_STATUS_CODES: dict[str, int] = {
    "INVALID_REQUEST": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "COIN_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EXCHANGE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONVERSION_DATA_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PROVIDER_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _debug_enabled(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.debug)


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """
    Handle application errors.

    Converts ApplicationError to proper HTTP responses with consistent format.
    """
    status_code = ERROR_STATUS_CODES.get(exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Application error: {exc.error_code} - {exc.message} "
        f"(request_id={_request_id(request) or 'unknown'})"
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
            },
            "meta": {
                "request_id": _request_id(request),
            },
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to consistent error response format.
    """
    logger.warning(
        f"Validation error: {exc.errors()} "
        f"(request_id={_request_id(request) or 'unknown'})"
    )

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": errors,
            },
            "meta": {
                "request_id": _request_id(request),
            },
        },
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full error and returns a generic error response to the client
    (don't expose internal error details in production).
    """
    logger.error(
        f"Unexpected error: {str(exc)} "
        f"(request_id={_request_id(request) or 'unknown'})",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": (
                    "An unexpected error occurred. Please contact support."
                    if not _debug_enabled(request)
                    else str(exc)
                ),
                "details": {},
            },
            "meta": {
                "request_id": _request_id(request),
            },
        },
    )
