"""
Mapper between Currency domain entity and CurrencyModel database model.

This mapper handles bidirectional conversion:
- to_entity(): Convert SQLAlchemy model → Domain entity
- to_model(): Convert Domain entity → SQLAlchemy model

Exchanges are a dict on the entity and child rows on the model. Rates are
stored as their exact decimal text and parsed back into Decimal.
"""

from decimal import Decimal
from typing import Optional

from app.domain.entities.currency import Currency
from app.infrastructure.adapters.outbound.persistence.sql.models.currency_model import (
    CurrencyExchangeModel,
    CurrencyModel,
)


class CurrencyMapper:
    """Mapper between Currency entity and CurrencyModel."""

    @staticmethod
    def to_entity(model: CurrencyModel) -> Currency:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: CurrencyModel from database, exchanges loaded

        Returns:
            Currency domain entity
        """
        return Currency(
            id=model.id,
            name=model.name,
            code=model.code,
            exchanges={
                exchange.target_name: Decimal(exchange.rate) for exchange in model.exchanges
            },
        )

    @staticmethod
    def to_model(entity: Currency, existing_model: Optional[CurrencyModel] = None) -> CurrencyModel:
        """
        Convert domain entity to SQLAlchemy model.

        When updating, existing exchange rows are changed in place rather
        than replaced, so a flush never inserts a (currency, target) pair
        that is still present on a row pending deletion.

        Args:
            entity: Currency domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            CurrencyModel for database persistence
        """
        if existing_model is None:
            model = CurrencyModel(name=entity.name, code=entity.code)
            model.exchanges = [
                CurrencyExchangeModel(target_name=target, rate=str(rate))
                for target, rate in entity.exchanges.items()
            ]
            return model

        existing_model.name = entity.name
        existing_model.code = entity.code

        by_target = {exchange.target_name: exchange for exchange in existing_model.exchanges}

        for target, exchange in by_target.items():
            if target not in entity.exchanges:
                existing_model.exchanges.remove(exchange)

        for target, rate in entity.exchanges.items():
            exchange = by_target.get(target)
            if exchange is None:
                existing_model.exchanges.append(
                    CurrencyExchangeModel(target_name=target, rate=str(rate))
                )
            elif Decimal(exchange.rate) != rate:
                exchange.rate = str(rate)

        return existing_model
