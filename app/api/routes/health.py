"""
Health Check Endpoints
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_app_settings
from app.core.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """
    Basic health check endpoint.

    Returns:
        Basic application information and status
    """
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
    }


@router.get("/ready")
async def readiness_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """
    Readiness check endpoint.

    Verifies database connectivity. The in-memory store is always ready.

    Returns:
        Detailed readiness status
    """
    db_config = getattr(request.app.state, "db_config", None)
    db_healthy = await db_config.health_check() if db_config is not None else True

    if not db_healthy:
        logger.warning("Readiness check failed: database unreachable")

    return {
        "status": "ready" if db_healthy else "degraded",
        "app": settings.app_name,
        "version": settings.version,
        "checks": {
            "database": "ok" if db_healthy else "ko",
        },
    }
