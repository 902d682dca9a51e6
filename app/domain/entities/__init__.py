"""Domain entities."""

from app.domain.entities.currency import Currency

__all__ = ["Currency"]
