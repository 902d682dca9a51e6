"""
SQLAlchemy implementation of Unit of Work pattern.

This module implements the Unit of Work pattern for managing database transactions
and coordinating repository operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.infrastructure.adapters.outbound.persistence.sql.repositories.currency_repository import (
    SqlCurrencyRepository,
)


class SqlUnitOfWork(UnitOfWorkPort):
    """
    SQLAlchemy implementation of Unit of Work pattern.

    Repositories share one session, so everything done inside an
    ``async with uow:`` block is committed or rolled back together.

    Usage:
        async with uow:
            currency = await uow.currencies.find_by_id(currency_id)
            currency.replace_details(name, code, exchanges)
            await uow.currencies.save(currency)
            await uow.commit()

        # On exception, automatic rollback occurs

    Attributes:
        currencies: Currency repository
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Unit of Work with a database session.

        Args:
            session: SQLAlchemy AsyncSession for database operations
        """
        self._session = session
        self.currencies = SqlCurrencyRepository(session)

    async def __aenter__(self) -> "SqlUnitOfWork":
        # The session begins its transaction lazily on first use
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred during the context, rollback the transaction.
        Otherwise, commit the transaction.
        """
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self._session.rollback()
