"""Tests for the SQLAlchemy currency repository against in-memory SQLite."""

from decimal import Decimal

import pytest

from app.application.exceptions import AlreadyExistsError, NotFoundError
from app.domain.entities.currency import Currency
from app.infrastructure.adapters.outbound.persistence.sql import SqlUnitOfWork


class TestSqlCurrencyRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, sql_uow):
        async with sql_uow:
            saved = await sql_uow.currencies.save(
                Currency(id=None, name="USD", code="USD", exchanges={"EUR": Decimal("0.9")})
            )

        assert saved.id is not None

        async with sql_uow:
            by_id = await sql_uow.currencies.find_by_id(saved.id)
            by_name = await sql_uow.currencies.find_by_name("USD")

        assert by_id.name == "USD"
        assert by_id.exchanges == {"EUR": Decimal("0.9")}
        assert by_name.id == saved.id

    @pytest.mark.asyncio
    async def test_find_missing(self, sql_uow):
        async with sql_uow:
            assert await sql_uow.currencies.find_by_id(1) is None
            assert await sql_uow.currencies.find_by_name("USD") is None

    @pytest.mark.asyncio
    async def test_find_all_ordered_by_id(self, sql_uow):
        async with sql_uow:
            for name in ("USD", "EUR", "BRL"):
                await sql_uow.currencies.save(Currency(id=None, name=name, code=name))

        async with sql_uow:
            currencies = await sql_uow.currencies.find_all()

        assert [c.name for c in currencies] == ["USD", "EUR", "BRL"]
        assert [c.id for c in currencies] == sorted(c.id for c in currencies)

    @pytest.mark.asyncio
    async def test_unique_name_enforced_by_database(self, sql_uow):
        async with sql_uow:
            await sql_uow.currencies.save(Currency(id=None, name="USD", code="USD"))

        with pytest.raises(AlreadyExistsError):
            async with sql_uow:
                await sql_uow.currencies.save(Currency(id=None, name="USD", code="XXX"))

        async with sql_uow:
            currencies = await sql_uow.currencies.find_all()
        assert len(currencies) == 1
        assert currencies[0].code == "USD"

    @pytest.mark.asyncio
    async def test_update_exchanges_in_place(self, sql_uow):
        async with sql_uow:
            saved = await sql_uow.currencies.save(
                Currency(
                    id=None,
                    name="USD",
                    code="USD",
                    exchanges={"EUR": Decimal("0.9"), "GBP": Decimal("0.8")},
                )
            )

        saved.replace_details(
            "USD", "USD", {"EUR": Decimal("0.95"), "BRL": Decimal("5.36")}
        )
        async with sql_uow:
            await sql_uow.currencies.save(saved)

        async with sql_uow:
            reloaded = await sql_uow.currencies.find_by_id(saved.id)

        assert reloaded.exchanges == {"EUR": Decimal("0.95"), "BRL": Decimal("5.36")}

    @pytest.mark.asyncio
    async def test_update_missing(self, sql_uow):
        with pytest.raises(NotFoundError):
            async with sql_uow:
                await sql_uow.currencies.save(Currency(id=99, name="USD", code="USD"))

    @pytest.mark.asyncio
    async def test_delete_removes_currency_and_its_exchanges(self, sql_uow):
        async with sql_uow:
            saved = await sql_uow.currencies.save(
                Currency(id=None, name="USD", code="USD", exchanges={"EUR": Decimal("0.9")})
            )

        async with sql_uow:
            await sql_uow.currencies.delete_by_id(saved.id)

        async with sql_uow:
            assert await sql_uow.currencies.find_by_id(saved.id) is None
            # Name is free again
            again = await sql_uow.currencies.save(Currency(id=None, name="USD", code="USD"))
        assert again.exchanges == {}

    @pytest.mark.asyncio
    async def test_delete_missing(self, sql_uow):
        with pytest.raises(NotFoundError):
            async with sql_uow:
                await sql_uow.currencies.delete_by_id(1)

    @pytest.mark.asyncio
    async def test_separate_sessions_see_committed_data(self, db_config):
        async with db_config.get_session() as session:
            uow = SqlUnitOfWork(session)
            async with uow:
                saved = await uow.currencies.save(Currency(id=None, name="USD", code="USD"))

        async with db_config.get_session() as session:
            uow = SqlUnitOfWork(session)
            async with uow:
                found = await uow.currencies.find_by_id(saved.id)

        assert found.name == "USD"

    @pytest.mark.asyncio
    async def test_health_check(self, db_config):
        assert await db_config.health_check() is True


async def save_and_reload(db_config, currency: Currency) -> Currency:
    """Save in one session and read back through a fresh one."""
    async with db_config.get_session() as session:
        uow = SqlUnitOfWork(session)
        async with uow:
            saved = await uow.currencies.save(currency)

    async with db_config.get_session() as session:
        uow = SqlUnitOfWork(session)
        async with uow:
            return await uow.currencies.find_by_id(saved.id)


class TestSqlRatePrecision:
    """Rates read back from the database equal the rates written."""

    @pytest.mark.asyncio
    async def test_long_fraction_is_not_rounded(self, db_config):
        reloaded = await save_and_reload(
            db_config,
            Currency(
                id=None, name="USD", code="USD", exchanges={"EUR": Decimal("1.23456789012345678")}
            ),
        )

        assert reloaded.exchanges == {"EUR": Decimal("1.23456789012345678")}

    @pytest.mark.asyncio
    async def test_tiny_rate_stays_positive(self, db_config):
        reloaded = await save_and_reload(
            db_config,
            Currency(id=None, name="USD", code="USD", exchanges={"EUR": Decimal("0.00000000001")}),
        )

        assert reloaded.exchanges["EUR"] == Decimal("0.00000000001")

        async with db_config.get_session() as session:
            uow = SqlUnitOfWork(session)
            async with uow:
                assert [c.name for c in await uow.currencies.find_all()] == ["USD"]

    @pytest.mark.asyncio
    async def test_large_rate(self, db_config):
        rate = Decimal("123456789012345678901234567890.5")

        reloaded = await save_and_reload(
            db_config, Currency(id=None, name="USD", code="USD", exchanges={"EUR": rate})
        )

        assert reloaded.exchanges["EUR"] == rate

    @pytest.mark.asyncio
    async def test_updated_rates_survive_a_new_session(self, db_config):
        original = await save_and_reload(
            db_config,
            Currency(
                id=None,
                name="USD",
                code="USD",
                exchanges={"EUR": Decimal("0.9"), "GBP": Decimal("0.8")},
            ),
        )
        original.replace_details(
            "USD", "USD", {"EUR": Decimal("0.912345678901"), "BRL": Decimal("5.36")}
        )

        reloaded = await save_and_reload(db_config, original)

        assert reloaded.exchanges == {
            "EUR": Decimal("0.912345678901"),
            "BRL": Decimal("5.36"),
        }
