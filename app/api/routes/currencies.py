"""
Currency API routes.

This module provides:
- GET /currency - List currency labels
- POST /currency - Register a currency
- PUT /currency/{currency_id} - Replace a currency's details
- DELETE /currency/{currency_id} - Remove a currency
- POST /currency/convert - Convert an amount between two currencies
- GET /currency/json/last - Latest provider quotes for several pairs
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status

from app.api.dependencies import (
    get_convert_currency_use_case,
    get_create_currency_use_case,
    get_delete_currency_use_case,
    get_latest_quotes_use_case,
    get_list_currencies_use_case,
    get_update_currency_use_case,
)
from app.application.dto import (
    ConvertCurrencyInput,
    ConvertCurrencyOutput,
    CreatedCurrencyOutput,
    CurrencyInput,
    CurrencyLabelOutput,
    CurrencyOutput,
    RateQuoteOutput,
)
from app.application.use_cases.currencies import (
    ConvertCurrencyUseCase,
    CreateCurrencyUseCase,
    DeleteCurrencyUseCase,
    GetLatestQuotesUseCase,
    ListCurrenciesUseCase,
    UpdateCurrencyUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/currency", tags=["Currencies"])


@router.get(
    "",
    response_model=list[CurrencyLabelOutput],
    summary="List currencies",
)
async def list_currencies(
    use_case: ListCurrenciesUseCase = Depends(get_list_currencies_use_case),
) -> list[CurrencyLabelOutput]:
    """
    List every registered currency.

    Returns:
        One label per currency, in the form "<id> - <name>"
    """
    return await use_case.execute()


@router.post(
    "",
    response_model=CreatedCurrencyOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create currency",
)
async def create_currency(
    data: Optional[CurrencyInput] = Body(default=None),
    use_case: CreateCurrencyUseCase = Depends(get_create_currency_use_case),
) -> CreatedCurrencyOutput:
    """
    Register a new currency.

    Request body:
        - name: Unique currency name (required)
        - code: Currency code (required)
        - exchanges: Rates keyed by target currency name (optional)

    Raises:
        - 400 Bad Request: If the payload is invalid
        - 409 Conflict: If the name is already taken
    """
    currency_id = await use_case.execute(data)
    return CreatedCurrencyOutput(id=currency_id)


@router.post(
    "/convert",
    response_model=ConvertCurrencyOutput,
    summary="Convert amount",
)
async def convert_currency(
    data: Optional[ConvertCurrencyInput] = Body(default=None),
    use_case: ConvertCurrencyUseCase = Depends(get_convert_currency_use_case),
) -> ConvertCurrencyOutput:
    """
    Convert an amount from one currency to another.

    Request body:
        - from: Source currency
        - to: Target currency
        - amount: Amount to convert

    Raises:
        - 400 Bad Request: If the payload is invalid
        - 404 Not Found: If no rate is known for the pair
        - 503 Service Unavailable: If the rate provider cannot be reached
    """
    return await use_case.execute(data)


@router.get(
    "/json/last",
    response_model=dict[str, RateQuoteOutput],
    summary="Latest quotes",
)
async def latest_quotes(
    currencies: Optional[str] = Query(
        default=None,
        description="Comma-separated pair codes, e.g. USD-BRL,EUR-BRL",
    ),
    use_case: GetLatestQuotesUseCase = Depends(get_latest_quotes_use_case),
) -> dict[str, RateQuoteOutput]:
    """Pass a multi-pair quote request through to the rate provider."""
    codes = currencies.split(",") if currencies is not None else None
    return await use_case.execute(codes)


@router.put(
    "/{currency_id}",
    response_model=CurrencyOutput,
    summary="Update currency",
)
async def update_currency(
    currency_id: int,
    data: Optional[CurrencyInput] = Body(default=None),
    use_case: UpdateCurrencyUseCase = Depends(get_update_currency_use_case),
) -> CurrencyOutput:
    """
    Replace a currency's name, code and exchanges.

    Raises:
        - 400 Bad Request: If the id or payload is invalid
        - 404 Not Found: If the currency doesn't exist
        - 409 Conflict: If the new name belongs to another currency
    """
    return await use_case.execute(currency_id, data)


@router.delete(
    "/{currency_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete currency",
)
async def delete_currency(
    currency_id: int,
    use_case: DeleteCurrencyUseCase = Depends(get_delete_currency_use_case),
) -> None:
    """
    Delete a currency.

    Raises:
        - 400 Bad Request: If the id is invalid
        - 404 Not Found: If the currency doesn't exist
    """
    await use_case.execute(currency_id)
