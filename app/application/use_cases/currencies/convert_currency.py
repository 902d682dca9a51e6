"""Convert currency use case.

Resolves one exchange rate and multiplies the requested amount by it.
Two resolution strategies are supported:

- ``local``: the rate stored on the source currency's ``exchanges`` map,
  looked up by currency name.
- ``provider``: the designated price field of the quote returned by the
  external rate provider for the pair tag built from ``from`` and ``to``.

Arithmetic is Decimal end to end and the product is not quantized, so the
result keeps the precision of both the amount and the rate.
"""

import logging
from decimal import Decimal
from enum import Enum

from app.application.dto.currency_dto import ConvertCurrencyInput, ConvertCurrencyOutput
from app.application.exceptions import (
    CoinNotFoundError,
    ConversionDataNotFoundError,
    ExchangeNotFoundError,
)
from app.application.ports.outbound.rate_provider_port import RateProviderPort
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.application.validation import validate_convert_payload
from app.domain.value_objects.currency_pair import DEFAULT_PAIR_TAG_FORMAT, CurrencyPair

logger = logging.getLogger(__name__)


class ConversionStrategy(str, Enum):
    """Where the conversion rate comes from."""

    LOCAL = "local"
    PROVIDER = "provider"


class ConvertCurrencyUseCase:
    """Use case for converting an amount between two currencies."""

    def __init__(
        self,
        uow: UnitOfWorkPort,
        rate_provider: RateProviderPort | None = None,
        strategy: ConversionStrategy = ConversionStrategy.PROVIDER,
        quote_field: str = "bid",
        pair_tag_format: str = DEFAULT_PAIR_TAG_FORMAT,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work used for local rate lookups
            rate_provider: External rate feed, required for the provider strategy
            strategy: Rate resolution strategy
            quote_field: Quote price used as the rate (bid, ask, low or high)
            pair_tag_format: Template for provider pair tags
        """
        if strategy == ConversionStrategy.PROVIDER and rate_provider is None:
            raise ValueError("The provider strategy requires a rate provider")

        self.uow = uow
        self.rate_provider = rate_provider
        self.strategy = ConversionStrategy(strategy)
        self.quote_field = quote_field
        self.pair_tag_format = pair_tag_format

    async def execute(self, input_dto: ConvertCurrencyInput | None) -> ConvertCurrencyOutput:
        """
        Convert an amount.

        Args:
            input_dto: Conversion request

        Returns:
            Converted amount

        Raises:
            InvalidRequestError: If the request is malformed
            CoinNotFoundError: Local strategy, source currency not registered
            ExchangeNotFoundError: No usable rate for the pair
            ConversionDataNotFoundError: Provider strategy, no data for the pair
            ProviderUnavailableError: Provider strategy, feed unreachable
        """
        validate_convert_payload(input_dto)

        pair = CurrencyPair(source=input_dto.from_, target=input_dto.to)

        if self.strategy == ConversionStrategy.LOCAL:
            rate = await self._resolve_local_rate(pair)
        else:
            rate = await self._resolve_provider_rate(pair)

        amount = input_dto.amount * rate
        logger.debug("Converted %s %s at %s (%s)", input_dto.amount, pair, rate, self.strategy.value)
        return ConvertCurrencyOutput(amount=amount)

    async def _resolve_local_rate(self, pair: CurrencyPair) -> Decimal:
        async with self.uow:
            currency = await self.uow.currencies.find_by_name(pair.source)

        if currency is None:
            raise CoinNotFoundError(pair.source)

        rate = currency.rate_to(pair.target)
        if rate is None:
            raise ExchangeNotFoundError(pair.source, pair.target)
        return rate

    async def _resolve_provider_rate(self, pair: CurrencyPair) -> Decimal:
        pair_tag = pair.tag(self.pair_tag_format)
        quote = await self.rate_provider.get_rate(pair_tag)

        if quote is None:
            logger.warning("Rate provider returned no data for %s", pair_tag)
            raise ConversionDataNotFoundError(pair.source, pair.target, pair_tag)

        rate = quote.price(self.quote_field)
        if rate is None:
            raise ExchangeNotFoundError(pair.source, pair.target)
        return rate
