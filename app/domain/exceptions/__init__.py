"""Domain exceptions package."""

from app.domain.exceptions.base import DomainException
from app.domain.exceptions.currency_exceptions import (
    CurrencyDomainException,
    InvalidCurrencyError,
    InvalidExchangeRateError,
)

__all__ = [
    # Base
    "DomainException",
    # Currency exceptions
    "CurrencyDomainException",
    "InvalidCurrencyError",
    "InvalidExchangeRateError",
]
