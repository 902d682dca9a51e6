"""Exchange-rate provider adapters."""

from app.infrastructure.adapters.outbound.rates.awesome_api_provider import (
    AwesomeAPIRateProvider,
)
from app.infrastructure.adapters.outbound.rates.static_provider import StaticRateProvider

__all__ = ["AwesomeAPIRateProvider", "StaticRateProvider"]
