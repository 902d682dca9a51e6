"""Rate quote value object."""

from dataclasses import dataclass, fields
from decimal import Decimal

# Numeric quote fields that can be designated as "the" conversion rate.
QUOTE_FIELDS = ("bid", "ask", "low", "high")


@dataclass(frozen=True)
class RateQuote:
    """
    Quote returned by a rate provider for one currency pair.

    Every numeric field is optional: a provider may answer for a pair
    while leaving individual prices empty.
    """

    code: str | None = None
    codein: str | None = None
    name: str | None = None
    high: Decimal | None = None
    low: Decimal | None = None
    var_bid: Decimal | None = None
    pct_change: Decimal | None = None
    bid: Decimal | None = None
    ask: Decimal | None = None
    timestamp: str | None = None
    create_date: str | None = None

    def price(self, field_name: str) -> Decimal | None:
        """
        Get one designated price field.

        Args:
            field_name: One of QUOTE_FIELDS

        Raises:
            ValueError: If field_name is not a quote field
        """
        if field_name not in QUOTE_FIELDS:
            raise ValueError(
                f"Unsupported quote field: {field_name}. "
                f"Supported fields: {', '.join(QUOTE_FIELDS)}"
            )
        return getattr(self, field_name)

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
