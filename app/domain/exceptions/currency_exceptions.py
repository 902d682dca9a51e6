"""Currency domain exceptions."""

from app.domain.exceptions.base import DomainException


class CurrencyDomainException(DomainException):
    """Base exception for currency-related domain errors."""


class InvalidCurrencyError(CurrencyDomainException):
    """Raised when a currency would be built in an invalid state."""

    code = "INVALID_CURRENCY"

    def __init__(self, field: str, reason: str):
        super().__init__(f"invalid currency, {reason}", field=field)


class InvalidExchangeRateError(CurrencyDomainException):
    """Raised when an exchange rate is not a positive decimal."""

    code = "INVALID_EXCHANGE_RATE"

    def __init__(self, target: str, rate: object):
        self.target = target
        self.rate = rate
        super().__init__(f"rate {rate} is not a positive decimal", field=f"exchanges.{target}")
