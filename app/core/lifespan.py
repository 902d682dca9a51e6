import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import Settings
from app.infrastructure.adapters.outbound.persistence.memory import InMemoryCurrencyStore
from app.infrastructure.adapters.outbound.rates import AwesomeAPIRateProvider
from app.infrastructure.config import (
    DatabaseConfig,
    create_memory_uow_dependency,
    create_uow_dependency,
)

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    """Create the lifespan context manager for an application built from ``settings``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):  # type: ignore
        """
        Lifespan context manager for startup and shutdown events.

        Handles:
        - Currency store creation (database or in-memory) and its UoW factory
        - Rate provider client creation
        - Resource cleanup on shutdown
        """
        logger.info(f"Starting {settings.app_name} v{settings.version}")
        logger.info(f"Environment: {settings.environment}")

        if settings.uses_memory_store:
            app.state.db_config = None
            app.state.uow_dependency = create_memory_uow_dependency(InMemoryCurrencyStore())
            logger.info("Using in-memory currency store")
        else:
            db_config = DatabaseConfig(
                settings.database_url,
                echo=settings.debug,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_timeout=settings.db_pool_timeout,
                pool_recycle=settings.db_pool_recycle,
                pool_pre_ping=settings.db_pool_pre_ping,
            )
            if settings.database_create_tables:
                await db_config.create_tables()
            app.state.db_config = db_config
            app.state.uow_dependency = create_uow_dependency(db_config)
            logger.info("Database engine created successfully")

        app.state.rate_provider = AwesomeAPIRateProvider(
            settings.rate_provider_base_url,
            timeout=settings.rate_provider_timeout_seconds,
        )
        logger.info(
            f"Conversion strategy: {settings.conversion_strategy} "
            f"(quote field {settings.rate_quote_field})"
        )

        try:
            yield
        finally:
            logger.info("Shutting down application")
            await app.state.rate_provider.close()
            if app.state.db_config is not None:
                await app.state.db_config.close()
            app.state.uow_dependency = None

    return lifespan
