"""SQLAlchemy repository implementations."""

from app.infrastructure.adapters.outbound.persistence.sql.repositories.currency_repository import (
    SqlCurrencyRepository,
)

__all__ = ["SqlCurrencyRepository"]
