"""Mappers between domain entities and SQLAlchemy models."""

from app.infrastructure.adapters.outbound.persistence.sql.mappers.currency_mapper import (
    CurrencyMapper,
)

__all__ = ["CurrencyMapper"]
