"""
AwesomeAPI rate provider.

Talks to the public AwesomeAPI economy feed:

    GET {base_url}/json/last/USD-BRL
    {"USDBRL": {"code": "USD", "codein": "BRL", "bid": "5.36", ...}}

The response is keyed by the pair tag with its separators removed. Prices
arrive as strings and are parsed straight into Decimal.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from app.application.exceptions import ProviderUnavailableError
from app.application.ports.outbound.rate_provider_port import RateProviderPort
from app.domain.value_objects.rate_quote import RateQuote

logger = logging.getLogger(__name__)

SERVICE_NAME = "awesomeapi"

_SEPARATORS = re.compile(r"[^A-Za-z0-9]")


def response_key(pair_tag: str) -> str:
    """Key under which the feed returns a pair, e.g. "USD-BRL" -> "USDBRL"."""
    return _SEPARATORS.sub("", pair_tag)


def _decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        parsed = Decimal(str(value))
    except InvalidOperation:
        logger.warning("Ignoring non-numeric quote value %r", value)
        return None
    return parsed if parsed.is_finite() else None


def parse_quote(payload: dict[str, Any]) -> RateQuote:
    """Build a RateQuote from one entry of the feed's response."""
    return RateQuote(
        code=payload.get("code"),
        codein=payload.get("codein"),
        name=payload.get("name"),
        high=_decimal(payload.get("high")),
        low=_decimal(payload.get("low")),
        var_bid=_decimal(payload.get("varBid")),
        pct_change=_decimal(payload.get("pctChange")),
        bid=_decimal(payload.get("bid")),
        ask=_decimal(payload.get("ask")),
        timestamp=payload.get("timestamp"),
        create_date=payload.get("create_date"),
    )


class AwesomeAPIRateProvider(RateProviderPort):
    """
    RateProviderPort backed by AwesomeAPI over httpx.

    The client is created once and reused for the lifetime of the
    application; call close() on shutdown.

    Usage:
        provider = AwesomeAPIRateProvider("https://economia.awesomeapi.com.br")
        quote = await provider.get_rate("USD-BRL")
        await provider.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize provider.

        Args:
            base_url: Feed base URL
            timeout: Request timeout in seconds
            client: Preconfigured client, mainly for tests with a mock transport
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    async def _fetch(self, path_tags: str) -> Optional[dict[str, Any]]:
        url = f"{self.base_url}/json/last/{path_tags}"

        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            logger.error("Rate provider timed out for %s", path_tags)
            raise ProviderUnavailableError(
                message="Rate provider timed out",
                service=SERVICE_NAME,
            ) from e
        except httpx.TransportError as e:
            logger.error("Rate provider unreachable for %s: %s", path_tags, e)
            raise ProviderUnavailableError(
                message="Rate provider unreachable",
                service=SERVICE_NAME,
            ) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("Rate provider has no data for %s", path_tags)
            return None

        if response.is_error:
            logger.error(
                "Rate provider returned %s for %s", response.status_code, path_tags
            )
            raise ProviderUnavailableError(
                message="Rate provider returned an error",
                service=SERVICE_NAME,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderUnavailableError(
                message="Rate provider returned malformed data",
                service=SERVICE_NAME,
                status_code=response.status_code,
            ) from e

        return data if isinstance(data, dict) else None

    async def get_rate(self, pair_tag: str) -> Optional[RateQuote]:
        data = await self._fetch(pair_tag)
        if not data:
            return None

        entry = data.get(response_key(pair_tag))
        if not isinstance(entry, dict):
            return None
        return parse_quote(entry)

    async def get_latest(self, codes: list[str]) -> dict[str, RateQuote]:
        if not codes:
            return {}

        data = await self._fetch(",".join(codes))
        if not data:
            return {}

        return {
            key: parse_quote(entry)
            for key, entry in data.items()
            if isinstance(entry, dict)
        }

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
