"""Unit of Work port interface."""

from typing import Protocol

from app.application.ports.outbound.currency_repository_port import (
    CurrencyRepositoryPort,
)


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing transactions.

    Usage:
        async with uow:
            currency = await uow.currencies.find_by_id(currency_id)
            currency.replace_details(name, code, exchanges)
            await uow.currencies.save(currency)
            await uow.commit()

        # On exception, automatic rollback occurs
    """

    currencies: CurrencyRepositoryPort

    async def __aenter__(self) -> "UnitOfWorkPort":
        """
        Enter async context manager (begin transaction).

        Returns:
            Self (UnitOfWorkPort instance)
        """
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred, the transaction is rolled back.
        Otherwise, the transaction is committed.
        """
        ...

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
