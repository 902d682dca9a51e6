"""
SQLAlchemy implementation of CurrencyRepositoryPort.

Works against any async driver SQLAlchemy supports; asyncpg in production
and aiosqlite for development and tests.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.exceptions import AlreadyExistsError, NotFoundError
from app.application.ports.outbound.currency_repository_port import CurrencyRepositoryPort
from app.domain.entities.currency import Currency
from app.infrastructure.adapters.outbound.persistence.sql.mappers.currency_mapper import (
    CurrencyMapper,
)
from app.infrastructure.adapters.outbound.persistence.sql.models.currency_model import (
    CurrencyModel,
)

logger = logging.getLogger(__name__)


class SqlCurrencyRepository(CurrencyRepositoryPort):
    """SQLAlchemy implementation of CurrencyRepositoryPort."""

    def __init__(self, session: AsyncSession):
        """
        Initialize currency repository.

        Args:
            session: SQLAlchemy async session shared with the unit of work
        """
        self.session = session
        self.mapper = CurrencyMapper

    async def _get_model(self, currency_id: int) -> Optional[CurrencyModel]:
        stmt = select(CurrencyModel).where(CurrencyModel.id == currency_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self) -> list[Currency]:
        stmt = select(CurrencyModel).order_by(CurrencyModel.id)
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def find_by_id(self, currency_id: int) -> Optional[Currency]:
        model = await self._get_model(currency_id)
        if model is None:
            return None
        return self.mapper.to_entity(model)

    async def find_by_name(self, name: str) -> Optional[Currency]:
        stmt = select(CurrencyModel).where(CurrencyModel.name == name)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None
        return self.mapper.to_entity(model)

    async def save(self, currency: Currency) -> Currency:
        """
        Insert or replace a currency.

        The flush happens here so unique-name violations surface as
        AlreadyExistsError inside the caller's unit of work.

        Raises:
            AlreadyExistsError: If another currency already has the same name
            NotFoundError: If an update targets a missing id
        """
        if currency.id is None:
            model = self.mapper.to_model(currency)
            self.session.add(model)
        else:
            existing = await self._get_model(currency.id)
            if existing is None:
                raise NotFoundError(
                    message=f"Coin not found: {currency.id}",
                    resource_type="Currency",
                    resource_id=str(currency.id),
                )
            model = self.mapper.to_model(currency, existing)

        try:
            await self.session.flush()
        except IntegrityError as e:
            logger.warning("Unique name violation saving currency %r: %s", currency.name, e.orig)
            raise AlreadyExistsError(
                message="Coin already exists",
                resource_type="Currency",
                field="name",
                value=currency.name,
            ) from e

        currency.id = model.id
        return self.mapper.to_entity(model)

    async def delete_by_id(self, currency_id: int) -> None:
        model = await self._get_model(currency_id)
        if model is None:
            raise NotFoundError(
                message=f"Coin not found: {currency_id}",
                resource_type="Currency",
                resource_id=str(currency_id),
            )

        await self.session.delete(model)
        await self.session.flush()
