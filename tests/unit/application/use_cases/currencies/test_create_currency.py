"""Unit tests for CreateCurrencyUseCase."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from app.application.dto import CurrencyInput
from app.application.exceptions import AlreadyExistsError, InvalidRequestError
from app.application.use_cases.currencies import CreateCurrencyUseCase
from app.domain.entities.currency import Currency


@pytest.fixture
def create_currency_input():
    return CurrencyInput(name="USD", code="USD", exchanges={"EUR": Decimal("0.9")})


class TestCreateCurrencyUseCase:
    """Test CreateCurrencyUseCase."""

    @pytest.mark.asyncio
    async def test_create_currency_success(self, mock_uow, create_currency_input):
        # Arrange
        mock_uow.currencies.find_by_name = AsyncMock(return_value=None)
        mock_uow.currencies.save = AsyncMock(
            return_value=Currency(id=1, name="USD", code="USD", exchanges={"EUR": Decimal("0.9")})
        )
        use_case = CreateCurrencyUseCase(mock_uow)

        # Act
        result = await use_case.execute(create_currency_input)

        # Assert
        assert result == 1
        mock_uow.currencies.find_by_name.assert_called_once_with("USD")
        saved = mock_uow.currencies.save.call_args.args[0]
        assert saved.id is None
        assert saved.exchanges == {"EUR": Decimal("0.9")}
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_create_currency_duplicate_name(self, mock_uow, create_currency_input):
        """Test creation fails when the name is already registered."""
        mock_uow.currencies.find_by_name = AsyncMock(
            return_value=Currency(id=4, name="USD", code="USD")
        )
        mock_uow.currencies.save = AsyncMock()
        use_case = CreateCurrencyUseCase(mock_uow)

        with pytest.raises(AlreadyExistsError) as exc_info:
            await use_case.execute(create_currency_input)

        assert exc_info.value.message == "Coin already exists"
        mock_uow.currencies.save.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_currency_invalid_payload_never_touches_store(self, mock_uow):
        mock_uow.currencies.find_by_name = AsyncMock()
        use_case = CreateCurrencyUseCase(mock_uow)

        with pytest.raises(InvalidRequestError):
            await use_case.execute(CurrencyInput(name="", code="USD"))

        mock_uow.currencies.find_by_name.assert_not_called()
        mock_uow.__aenter__.assert_not_called()

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, memory_uow):
        use_case = CreateCurrencyUseCase(memory_uow)

        first = await use_case.execute(CurrencyInput(name="USD", code="USD"))
        second = await use_case.execute(CurrencyInput(name="EUR", code="EUR"))

        assert first != second
        assert {first, second} == {1, 2}

    @pytest.mark.asyncio
    async def test_duplicate_name_leaves_store_unchanged(self, memory_uow):
        use_case = CreateCurrencyUseCase(memory_uow)
        await use_case.execute(CurrencyInput(name="USD", code="USD"))

        with pytest.raises(AlreadyExistsError):
            await use_case.execute(CurrencyInput(name="USD", code="XXX"))

        stored = await memory_uow.currencies.find_all()
        assert len(stored) == 1
        assert stored[0].code == "USD"

    @pytest.mark.asyncio
    async def test_names_differing_only_in_case_are_distinct(self, memory_uow):
        use_case = CreateCurrencyUseCase(memory_uow)

        await use_case.execute(CurrencyInput(name="USD", code="USD"))
        await use_case.execute(CurrencyInput(name="usd", code="USD"))

        assert len(await memory_uow.currencies.find_all()) == 2

    @pytest.mark.asyncio
    async def test_created_currency_can_be_looked_up(self, memory_uow):
        payload = CurrencyInput(name="USD", code="USD", exchanges={"EUR": Decimal("0.9")})

        currency_id = await CreateCurrencyUseCase(memory_uow).execute(payload)
        stored = await memory_uow.currencies.find_by_id(currency_id)

        assert (stored.name, stored.code, stored.exchanges) == (
            "USD",
            "USD",
            {"EUR": Decimal("0.9")},
        )
