"""Get latest quotes use case."""

from app.application.dto.currency_dto import RateQuoteOutput
from app.application.ports.outbound.rate_provider_port import RateProviderPort
from app.application.validation import validate_quote_codes


class GetLatestQuotesUseCase:
    """Use case passing a multi-pair quote request through to the rate provider."""

    def __init__(self, rate_provider: RateProviderPort):
        self.rate_provider = rate_provider

    async def execute(self, codes: list[str] | None) -> dict[str, RateQuoteOutput]:
        """
        Fetch the latest quotes for several pairs.

        Args:
            codes: Pair codes such as "USD-BRL"

        Returns:
            Quotes keyed as the provider keys them

        Raises:
            InvalidRequestError: If no codes, or a blank code, are given
            ProviderUnavailableError: If the provider cannot be reached
        """
        cleaned = validate_quote_codes(codes)
        quotes = await self.rate_provider.get_latest(cleaned)
        return {key: RateQuoteOutput.from_quote(quote) for key, quote in quotes.items()}
