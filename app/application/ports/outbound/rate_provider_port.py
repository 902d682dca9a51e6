"""Rate provider port interface."""

from typing import Optional, Protocol

from app.domain.value_objects.rate_quote import RateQuote


class RateProviderPort(Protocol):
    """Client interface for an external exchange-rate feed."""

    async def get_rate(self, pair_tag: str) -> Optional[RateQuote]:
        """
        Fetch the latest quote for one currency pair.

        Args:
            pair_tag: Pair identifier, e.g. "USD-BRL"

        Returns:
            The quote, or None when the provider has no entry for the pair

        Raises:
            ProviderUnavailableError: On timeout or transport failure
        """
        ...

    async def get_latest(self, codes: list[str]) -> dict[str, RateQuote]:
        """
        Fetch the latest quotes for several pairs at once.

        Args:
            codes: Pair identifiers, e.g. ["USD-BRL", "EUR-BRL"]

        Returns:
            Quotes keyed the way the provider keys them; pairs without data
            are simply absent

        Raises:
            ProviderUnavailableError: On timeout or transport failure
        """
        ...
