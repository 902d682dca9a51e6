"""
FastAPI dependencies.

This module provides:
- Settings the application was created with
- Unit of Work per request, from the factory installed at startup
- The shared rate provider client
- Use case factories wired from the two above and the settings
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from app.application.ports.outbound.rate_provider_port import RateProviderPort
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.application.use_cases.currencies import (
    ConversionStrategy,
    ConvertCurrencyUseCase,
    CreateCurrencyUseCase,
    DeleteCurrencyUseCase,
    GetLatestQuotesUseCase,
    ListCurrenciesUseCase,
    UpdateCurrencyUseCase,
)
from app.core.config import Settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


async def get_uow(request: Request) -> AsyncGenerator[UnitOfWorkPort, None]:
    """
    Yield a Unit of Work for the current request.

    The factory lives on app.state and is installed by the lifespan, so
    the same routes work against the SQL and the in-memory store.
    """
    async for uow in request.app.state.uow_dependency():
        yield uow


def get_rate_provider(request: Request) -> RateProviderPort:
    """Return the application-wide rate provider client."""
    return request.app.state.rate_provider


def get_list_currencies_use_case(
    uow: UnitOfWorkPort = Depends(get_uow),
) -> ListCurrenciesUseCase:
    return ListCurrenciesUseCase(uow)


def get_create_currency_use_case(
    uow: UnitOfWorkPort = Depends(get_uow),
) -> CreateCurrencyUseCase:
    return CreateCurrencyUseCase(uow)


def get_update_currency_use_case(
    uow: UnitOfWorkPort = Depends(get_uow),
) -> UpdateCurrencyUseCase:
    return UpdateCurrencyUseCase(uow)


def get_delete_currency_use_case(
    uow: UnitOfWorkPort = Depends(get_uow),
) -> DeleteCurrencyUseCase:
    return DeleteCurrencyUseCase(uow)


def get_convert_currency_use_case(
    uow: UnitOfWorkPort = Depends(get_uow),
    rate_provider: RateProviderPort = Depends(get_rate_provider),
    settings: Settings = Depends(get_app_settings),
) -> ConvertCurrencyUseCase:
    """Build the conversion use case with the configured strategy."""
    return ConvertCurrencyUseCase(
        uow=uow,
        rate_provider=rate_provider,
        strategy=ConversionStrategy(settings.conversion_strategy),
        quote_field=settings.rate_quote_field,
        pair_tag_format=settings.rate_pair_tag_format,
    )


def get_latest_quotes_use_case(
    rate_provider: RateProviderPort = Depends(get_rate_provider),
) -> GetLatestQuotesUseCase:
    return GetLatestQuotesUseCase(rate_provider)
