"""In-process Unit of Work."""

from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.infrastructure.adapters.outbound.persistence.memory.currency_repository import (
    InMemoryCurrencyRepository,
    InMemoryCurrencyStore,
)


class InMemoryUnitOfWork(UnitOfWorkPort):
    """
    Unit of Work over an InMemoryCurrencyStore.

    Every repository call applies immediately and atomically, so commit
    and rollback have nothing to do. A failed multi-step operation can
    only fail before its single write.
    """

    def __init__(self, store: InMemoryCurrencyStore):
        self.store = store
        self.currencies = InMemoryCurrencyRepository(store)

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass
