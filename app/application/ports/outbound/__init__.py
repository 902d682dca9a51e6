"""Outbound ports (interfaces for infrastructure adapters)."""

from app.application.ports.outbound.currency_repository_port import (
    CurrencyRepositoryPort,
)
from app.application.ports.outbound.rate_provider_port import RateProviderPort
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort

__all__ = [
    "CurrencyRepositoryPort",
    "RateProviderPort",
    "UnitOfWorkPort",
]
