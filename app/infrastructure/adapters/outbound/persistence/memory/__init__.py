"""In-process persistence adapter, selected with DATABASE_URL=memory://."""

from app.infrastructure.adapters.outbound.persistence.memory.currency_repository import (
    InMemoryCurrencyRepository,
    InMemoryCurrencyStore,
)
from app.infrastructure.adapters.outbound.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
)

__all__ = ["InMemoryCurrencyRepository", "InMemoryCurrencyStore", "InMemoryUnitOfWork"]
