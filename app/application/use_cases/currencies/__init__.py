"""Currency use cases."""

from app.application.use_cases.currencies.convert_currency import (
    ConversionStrategy,
    ConvertCurrencyUseCase,
)
from app.application.use_cases.currencies.create_currency import CreateCurrencyUseCase
from app.application.use_cases.currencies.delete_currency import DeleteCurrencyUseCase
from app.application.use_cases.currencies.get_latest_quotes import GetLatestQuotesUseCase
from app.application.use_cases.currencies.list_currencies import ListCurrenciesUseCase
from app.application.use_cases.currencies.update_currency import UpdateCurrencyUseCase

__all__ = [
    "ConversionStrategy",
    "ConvertCurrencyUseCase",
    "CreateCurrencyUseCase",
    "DeleteCurrencyUseCase",
    "GetLatestQuotesUseCase",
    "ListCurrenciesUseCase",
    "UpdateCurrencyUseCase",
]
