"""
SQLAlchemy models for relational persistence.

These are pure SQLAlchemy models with NO business logic.
Business logic lives in the Domain layer (app.domain.entities).

Models:
- Base: Declarative base with constraint naming convention
- CurrencyModel: Registered currencies
- CurrencyExchangeModel: Locally stored exchange rates

Mixins:
- TimestampMixin: created_at and updated_at timestamps
"""

from app.infrastructure.adapters.outbound.persistence.sql.models.base import Base
from app.infrastructure.adapters.outbound.persistence.sql.models.currency_model import (
    CurrencyExchangeModel,
    CurrencyModel,
)
from app.infrastructure.adapters.outbound.persistence.sql.models.mixins import (
    TimestampMixin,
)

__all__ = [
    # Base
    "Base",
    # Models
    "CurrencyModel",
    "CurrencyExchangeModel",
    # Mixins
    "TimestampMixin",
]
