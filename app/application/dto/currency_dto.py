"""Currency DTOs (Data Transfer Objects)."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.currency import Currency
from app.domain.value_objects.rate_quote import RateQuote


class CurrencyInput(BaseModel):
    """
    Input DTO for creating or updating a currency.

    Fields are optional at the schema level; presence and emptiness are
    checked by the validator so that missing data surfaces as an
    INVALID_REQUEST failure rather than a schema error.
    """

    name: Optional[str] = Field(None, description="Unique currency name")
    code: Optional[str] = Field(None, description="Short identifying code (e.g. ISO 4217)")
    exchanges: Optional[dict[str, Decimal]] = Field(
        None, description="Rates from this currency keyed by target currency name"
    )

    model_config = ConfigDict(frozen=True)


class CurrencyLabelOutput(BaseModel):
    """Display projection of a stored currency."""

    label: str = Field(..., description="Label in the form '<id> - <name>'")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entity(cls, currency: Currency) -> "CurrencyLabelOutput":
        return cls(label=currency.label)


class CurrencyOutput(BaseModel):
    """Output DTO for currency information."""

    id: int = Field(..., description="Currency's unique identifier")
    name: str = Field(..., description="Currency name")
    code: str = Field(..., description="Currency code")
    exchanges: dict[str, Decimal] = Field(
        default_factory=dict, description="Locally stored exchange rates"
    )

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @classmethod
    def from_entity(cls, currency: Currency) -> "CurrencyOutput":
        """
        Create DTO from Currency entity.

        Args:
            currency: Currency domain entity

        Returns:
            CurrencyOutput DTO
        """
        return cls(
            id=currency.id,
            name=currency.name,
            code=currency.code,
            exchanges=dict(currency.exchanges),
        )


class CreatedCurrencyOutput(BaseModel):
    """Output DTO for a freshly created currency."""

    id: int = Field(..., description="Generated currency id")

    model_config = ConfigDict(frozen=True)


class ConvertCurrencyInput(BaseModel):
    """Input DTO for a conversion request."""

    from_: Optional[str] = Field(None, alias="from", description="Source currency")
    to: Optional[str] = Field(None, description="Target currency")
    amount: Optional[Decimal] = Field(None, description="Amount to convert")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ConvertCurrencyOutput(BaseModel):
    """Output DTO for a conversion result."""

    amount: Decimal = Field(..., description="Converted amount")

    model_config = ConfigDict(frozen=True)


class RateQuoteOutput(BaseModel):
    """Output DTO mirroring a provider quote."""

    code: Optional[str] = None
    codein: Optional[str] = None
    name: Optional[str] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
    var_bid: Optional[Decimal] = Field(None, alias="varBid")
    pct_change: Optional[Decimal] = Field(None, alias="pctChange")
    bid: Optional[Decimal] = None
    ask: Optional[Decimal] = None
    timestamp: Optional[str] = None
    create_date: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_quote(cls, quote: RateQuote) -> "RateQuoteOutput":
        return cls(**quote.as_dict())
