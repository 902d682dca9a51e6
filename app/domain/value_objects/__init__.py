"""Domain value objects."""

from app.domain.value_objects.currency_pair import DEFAULT_PAIR_TAG_FORMAT, CurrencyPair
from app.domain.value_objects.rate_quote import QUOTE_FIELDS, RateQuote

__all__ = [
    "CurrencyPair",
    "DEFAULT_PAIR_TAG_FORMAT",
    "QUOTE_FIELDS",
    "RateQuote",
]
