"""
Currency and CurrencyExchange SQLAlchemy models.

This module defines:
- CurrencyModel: a registered currency, unique on name
- CurrencyExchangeModel: one directional local rate from a currency to a
  target currency name

Exchanges reference their target by name, not by foreign key: deleting a
currency leaves rates pointing at it in place, where they stop resolving.
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.adapters.outbound.persistence.sql.models.base import Base
from app.infrastructure.adapters.outbound.persistence.sql.models.mixins import (
    TimestampMixin,
)


class CurrencyModel(Base, TimestampMixin):
    """
    Currency SQLAlchemy model.

    This is the ORM model for database persistence. Pure SQLAlchemy with no business logic.
    Business logic lives in domain.entities.currency.Currency.

    The unique index on name is what serializes concurrent creates and
    renames: whichever transaction flushes second fails.
    """

    __tablename__ = "currencies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )

    code: Mapped[str] = mapped_column(String(20), nullable=False)

    exchanges: Mapped[list["CurrencyExchangeModel"]] = relationship(
        back_populates="currency",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="CurrencyExchangeModel.target_name",
    )


class CurrencyExchangeModel(Base):
    """Directional exchange rate stored on a currency."""

    __tablename__ = "currency_exchanges"
    __table_args__ = (
        UniqueConstraint("currency_id", "target_name", name="uq_currency_exchanges_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    target_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Exact decimal text, parsed back to Decimal by CurrencyMapper
    rate: Mapped[str] = mapped_column(String(64), nullable=False)

    currency: Mapped[CurrencyModel] = relationship(back_populates="exchanges")
