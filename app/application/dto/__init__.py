"""Data Transfer Objects (DTOs) for application layer."""

from app.application.dto.currency_dto import (
    ConvertCurrencyInput,
    ConvertCurrencyOutput,
    CreatedCurrencyOutput,
    CurrencyInput,
    CurrencyLabelOutput,
    CurrencyOutput,
    RateQuoteOutput,
)

__all__ = [
    "ConvertCurrencyInput",
    "ConvertCurrencyOutput",
    "CreatedCurrencyOutput",
    "CurrencyInput",
    "CurrencyLabelOutput",
    "CurrencyOutput",
    "RateQuoteOutput",
]
