"""
In-process implementation of CurrencyRepositoryPort.

Currencies live in a dict keyed by id with a secondary index on name.
Entities are copied on the way in and on the way out, so callers never
hold references into the store.
"""

import asyncio
import copy
from typing import Optional

from app.application.exceptions import AlreadyExistsError, NotFoundError
from app.application.ports.outbound.currency_repository_port import CurrencyRepositoryPort
from app.domain.entities.currency import Currency


class InMemoryCurrencyStore:
    """
    Shared state behind every in-memory repository.

    One store lives for the whole process; each unit of work gets a
    repository view onto it. The lock serializes writers so the name
    uniqueness check and the write are atomic.
    """

    def __init__(self) -> None:
        self.currencies: dict[int, Currency] = {}
        self.ids_by_name: dict[str, int] = {}
        self.next_id = 1
        self.lock = asyncio.Lock()


class InMemoryCurrencyRepository(CurrencyRepositoryPort):
    """Dict-backed currency repository."""

    def __init__(self, store: InMemoryCurrencyStore):
        self.store = store

    async def find_all(self) -> list[Currency]:
        return [copy.deepcopy(self.store.currencies[key]) for key in sorted(self.store.currencies)]

    async def find_by_id(self, currency_id: int) -> Optional[Currency]:
        currency = self.store.currencies.get(currency_id)
        return copy.deepcopy(currency) if currency is not None else None

    async def find_by_name(self, name: str) -> Optional[Currency]:
        currency_id = self.store.ids_by_name.get(name)
        if currency_id is None:
            return None
        return copy.deepcopy(self.store.currencies[currency_id])

    async def save(self, currency: Currency) -> Currency:
        async with self.store.lock:
            owner = self.store.ids_by_name.get(currency.name)

            if currency.id is None:
                if owner is not None:
                    raise AlreadyExistsError(
                        message="Coin already exists",
                        resource_type="Currency",
                        field="name",
                        value=currency.name,
                    )
                currency.id = self.store.next_id
                self.store.next_id += 1
            else:
                previous = self.store.currencies.get(currency.id)
                if previous is None:
                    raise NotFoundError(
                        message=f"Coin not found: {currency.id}",
                        resource_type="Currency",
                        resource_id=str(currency.id),
                    )
                if owner is not None and owner != currency.id:
                    raise AlreadyExistsError(
                        message="Coin with the same name already exists",
                        resource_type="Currency",
                        field="name",
                        value=currency.name,
                    )
                del self.store.ids_by_name[previous.name]

            self.store.currencies[currency.id] = copy.deepcopy(currency)
            self.store.ids_by_name[currency.name] = currency.id

        return copy.deepcopy(currency)

    async def delete_by_id(self, currency_id: int) -> None:
        async with self.store.lock:
            currency = self.store.currencies.pop(currency_id, None)
            if currency is None:
                raise NotFoundError(
                    message=f"Coin not found: {currency_id}",
                    resource_type="Currency",
                    resource_id=str(currency_id),
                )
            del self.store.ids_by_name[currency.name]
