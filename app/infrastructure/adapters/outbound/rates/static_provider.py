"""Fixed-table rate provider for local runs and tests."""

from typing import Optional

from app.application.ports.outbound.rate_provider_port import RateProviderPort
from app.domain.value_objects.rate_quote import RateQuote
from app.infrastructure.adapters.outbound.rates.awesome_api_provider import response_key


class StaticRateProvider(RateProviderPort):
    """
    RateProviderPort answering from an in-memory table of quotes.

    Quotes are keyed by pair tag ("USD-BRL"). Latest-quote lookups return
    them under the feed-style key ("USDBRL") like the live provider does.
    """

    def __init__(self, quotes: Optional[dict[str, RateQuote]] = None):
        self.quotes: dict[str, RateQuote] = dict(quotes or {})
        self.requested: list[str] = []

    async def get_rate(self, pair_tag: str) -> Optional[RateQuote]:
        self.requested.append(pair_tag)
        return self.quotes.get(pair_tag)

    async def get_latest(self, codes: list[str]) -> dict[str, RateQuote]:
        self.requested.extend(codes)
        return {
            response_key(code): self.quotes[code]
            for code in codes
            if code in self.quotes
        }

    async def close(self) -> None:
        pass
