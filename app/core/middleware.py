"""
Custom middleware for FastAPI application.

This module provides:
- Request ID generation and tracking
- Request/response logging
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import correlation_id_ctx

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and track request IDs.

    This middleware:
    - Reuses an incoming X-Request-ID header or generates a UUID
    - Stores it in request.state.request_id and in the logging context
    - Adds X-Request-ID header to responses
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        token = correlation_id_ctx.set(request_id)

        try:
            response = await call_next(request)
        finally:
            correlation_id_ctx.reset(token)

        response.headers["X-Request-ID"] = request_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all incoming requests and outgoing responses.

    Log format:
    - INFO: Successful requests (2xx, 3xx)
    - WARNING: Client errors (4xx)
    - ERROR: Server errors (5xx)
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: FastAPI Request object
            call_next: Next middleware or endpoint handler

        Returns:
            Response object
        """
        start_time = time.time()

        method = request.method
        path = request.url.path
        client_host = request.client.host if request.client else "unknown"
        request_id = getattr(request.state, "request_id", "unknown")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"Request failed: {method} {path} - "
                f"request_id={request_id} client={client_host} "
                f"duration={duration:.3f}s error={str(e)}",
                exc_info=True,
            )
            raise

        duration = time.time() - start_time

        status_code = response.status_code
        log_message = (
            f"{method} {path} {status_code} - "
            f"request_id={request_id} client={client_host} duration={duration:.3f}s"
        )

        if status_code >= 500:
            logger.error(log_message)
        elif status_code >= 400:
            logger.warning(log_message)
        else:
            logger.info(log_message)

        return response
