"""
SQLAlchemy persistence adapter.

Implements the currency repository and unit of work ports on top of an
async SQLAlchemy session.
"""

from app.infrastructure.adapters.outbound.persistence.sql.repositories.currency_repository import (
    SqlCurrencyRepository,
)
from app.infrastructure.adapters.outbound.persistence.sql.unit_of_work import SqlUnitOfWork

__all__ = ["SqlCurrencyRepository", "SqlUnitOfWork"]
