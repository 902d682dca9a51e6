"""
FastAPI application entry point.

This module sets up:
- FastAPI application with middleware
- Exception handlers
- API routes
- CORS configuration
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import currencies, health
from app.application.exceptions import ApplicationError
from app.core.config import Settings, get_settings
from app.core.handlers import (
    application_error_handler,
    general_exception_handler,
    validation_exception_handler,
)
from app.core.lifespan import build_lifespan
from app.core.logging import setup_logging
from app.core.middleware import RequestIDMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to build from; defaults to the process settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description=settings.description,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=build_lifespan(settings),
    )
    app.state.settings = settings

    # ------------------------------------------------------------------------
    # Exception Handlers
    # ------------------------------------------------------------------------
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # ------------------------------------------------------------------------
    # Middleware Setup (last added runs first)
    # ------------------------------------------------------------------------
    app.add_middleware(RequestLoggingMiddleware)
    # Outside the logger so request_id is set before it reads it
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------------------------------------------------------
    # API Routes
    # ------------------------------------------------------------------------
    app.include_router(health.router)
    app.include_router(currencies.router)

    return app


app = create_app()
