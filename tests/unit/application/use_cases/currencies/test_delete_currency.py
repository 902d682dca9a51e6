"""Unit tests for DeleteCurrencyUseCase."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from app.application.dto import CurrencyInput
from app.application.exceptions import InvalidRequestError, NotFoundError
from app.application.use_cases.currencies import CreateCurrencyUseCase, DeleteCurrencyUseCase
from app.domain.entities.currency import Currency


class TestDeleteCurrencyUseCase:
    @pytest.mark.asyncio
    async def test_delete_success(self, mock_uow):
        mock_uow.currencies.find_by_id = AsyncMock(
            return_value=Currency(id=1, name="USD", code="USD")
        )
        mock_uow.currencies.delete_by_id = AsyncMock()

        await DeleteCurrencyUseCase(mock_uow).execute(1)

        mock_uow.currencies.delete_by_id.assert_called_once_with(1)
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_uow):
        mock_uow.currencies.find_by_id = AsyncMock(return_value=None)
        mock_uow.currencies.delete_by_id = AsyncMock()

        with pytest.raises(NotFoundError):
            await DeleteCurrencyUseCase(mock_uow).execute(5)

        mock_uow.currencies.delete_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, mock_uow):
        with pytest.raises(InvalidRequestError):
            await DeleteCurrencyUseCase(mock_uow).execute(0)

    @pytest.mark.asyncio
    async def test_exchanges_naming_deleted_currency_are_kept(self, memory_uow):
        create = CreateCurrencyUseCase(memory_uow)
        usd_id = await create.execute(
            CurrencyInput(name="USD", code="USD", exchanges={"EUR": Decimal("0.9")})
        )
        eur_id = await create.execute(CurrencyInput(name="EUR", code="EUR"))

        await DeleteCurrencyUseCase(memory_uow).execute(eur_id)

        assert await memory_uow.currencies.find_by_id(eur_id) is None
        usd = await memory_uow.currencies.find_by_id(usd_id)
        assert usd.exchanges == {"EUR": Decimal("0.9")}

    @pytest.mark.asyncio
    async def test_second_delete_fails(self, memory_uow):
        currency_id = await CreateCurrencyUseCase(memory_uow).execute(
            CurrencyInput(name="USD", code="USD")
        )
        use_case = DeleteCurrencyUseCase(memory_uow)

        await use_case.execute(currency_id)
        with pytest.raises(NotFoundError):
            await use_case.execute(currency_id)
