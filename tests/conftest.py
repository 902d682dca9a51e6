"""
Pytest configuration and fixtures for Currency API tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory store fixtures
- A static rate provider
- Async HTTP client fixtures against the ASGI app
"""

# Set environment variables BEFORE importing anything from app
import os

os.environ["DATABASE_URL"] = "memory://"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_rate_provider, get_uow
from app.core.config import Settings
from app.domain.value_objects.rate_quote import RateQuote
from app.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryCurrencyStore,
    InMemoryUnitOfWork,
)
from app.infrastructure.adapters.outbound.persistence.sql import SqlUnitOfWork
from app.infrastructure.adapters.outbound.rates import StaticRateProvider
from app.infrastructure.config import DatabaseConfig
from app.main import create_app

SQLITE_MEMORY_URL = "sqlite+aiosqlite://"


# ============================================================================
# Database Fixtures
# ============================================================================
@pytest_asyncio.fixture
async def db_config() -> AsyncGenerator[DatabaseConfig, None]:
    """
    Create a fresh in-memory SQLite database for one test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        SQLITE_MEMORY_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    config = DatabaseConfig(SQLITE_MEMORY_URL, engine=engine)
    await config.create_tables()

    yield config

    await config.drop_tables()
    await config.close()


@pytest_asyncio.fixture
async def sql_uow(db_config: DatabaseConfig) -> AsyncGenerator[SqlUnitOfWork, None]:
    """Unit of Work over a session of the test database."""
    async with db_config.get_session() as session:
        yield SqlUnitOfWork(session)


# ============================================================================
# In-Memory Store Fixtures
# ============================================================================
@pytest.fixture
def memory_store() -> InMemoryCurrencyStore:
    return InMemoryCurrencyStore()


@pytest.fixture
def memory_uow(memory_store: InMemoryCurrencyStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(memory_store)


# ============================================================================
# Rate Provider Fixtures
# ============================================================================
@pytest.fixture
def usd_brl_quote() -> RateQuote:
    return RateQuote(
        code="USD",
        codein="BRL",
        name="Dólar Americano/Real Brasileiro",
        high=Decimal("5.40"),
        low=Decimal("5.30"),
        var_bid=Decimal("0.02"),
        pct_change=Decimal("0.37"),
        bid=Decimal("5.36"),
        ask=Decimal("5.37"),
        timestamp="1700000000",
        create_date="2023-11-14 19:13:20",
    )


@pytest.fixture
def rate_provider(usd_brl_quote: RateQuote) -> StaticRateProvider:
    return StaticRateProvider({"USD-BRL": usd_brl_quote})


# ============================================================================
# FastAPI Client Fixtures
# ============================================================================
@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="memory://",
        conversion_strategy="provider",
        log_level="WARNING",
    )


@pytest.fixture
def test_app(test_settings, memory_store, rate_provider):
    """
    Application wired to the in-memory store and the static provider.

    ASGITransport does not run the lifespan, so the dependencies that read
    app.state are overridden instead.
    """
    app = create_app(test_settings)

    async def override_get_uow():
        yield InMemoryUnitOfWork(memory_store)

    app.dependency_overrides[get_uow] = override_get_uow
    app.dependency_overrides[get_rate_provider] = lambda: rate_provider

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Create an async client for the test application."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def sql_async_client(
    test_settings, db_config: DatabaseConfig, rate_provider
) -> AsyncGenerator[AsyncClient, None]:
    """Async client for an application backed by the SQLite test database."""
    app = create_app(test_settings)
    app.state.db_config = db_config

    async def override_get_uow():
        async with db_config.get_session() as session:
            yield SqlUnitOfWork(session)

    app.dependency_overrides[get_uow] = override_get_uow
    app.dependency_overrides[get_rate_provider] = lambda: rate_provider

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
