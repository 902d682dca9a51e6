"""
Dependency injection helpers for infrastructure components.

This module provides dependency injection factories that can be used
throughout the application without relying on global state.

Usage in FastAPI:
    db_config = DatabaseConfig(settings.database_url)
    app.state.uow_dependency = create_uow_dependency(db_config)
"""

from collections.abc import AsyncGenerator
from typing import Callable

from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryCurrencyStore,
    InMemoryUnitOfWork,
)
from app.infrastructure.adapters.outbound.persistence.sql.unit_of_work import SqlUnitOfWork
from app.infrastructure.config.database import DatabaseConfig

UowDependency = Callable[[], AsyncGenerator[UnitOfWorkPort, None]]


def create_uow_dependency(db_config: DatabaseConfig) -> UowDependency:
    """
    Create a Unit of Work dependency factory backed by a database.

    Each call of the returned generator opens one session, wraps it in a
    SqlUnitOfWork and closes the session afterwards.

    Args:
        db_config: DatabaseConfig instance

    Returns:
        Async generator function for dependency injection
    """

    async def get_uow() -> AsyncGenerator[SqlUnitOfWork, None]:
        async with db_config.get_session() as session:
            uow = SqlUnitOfWork(session)
            try:
                yield uow
            finally:
                await session.close()

    return get_uow


def create_memory_uow_dependency(store: InMemoryCurrencyStore) -> UowDependency:
    """Create a Unit of Work dependency factory over the in-process store."""

    async def get_uow() -> AsyncGenerator[InMemoryUnitOfWork, None]:
        yield InMemoryUnitOfWork(store)

    return get_uow
