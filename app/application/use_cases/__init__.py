"""Use cases (application layer business logic)."""

# Currency use cases
from app.application.use_cases.currencies import (
    ConversionStrategy,
    ConvertCurrencyUseCase,
    CreateCurrencyUseCase,
    DeleteCurrencyUseCase,
    GetLatestQuotesUseCase,
    ListCurrenciesUseCase,
    UpdateCurrencyUseCase,
)

__all__ = [
    "ConversionStrategy",
    "ConvertCurrencyUseCase",
    "CreateCurrencyUseCase",
    "DeleteCurrencyUseCase",
    "GetLatestQuotesUseCase",
    "ListCurrenciesUseCase",
    "UpdateCurrencyUseCase",
]
