"""Currency repository port interface."""

from typing import Optional, Protocol

from app.domain.entities.currency import Currency


class CurrencyRepositoryPort(Protocol):
    """Repository interface for Currency entity."""

    async def find_all(self) -> list[Currency]:
        """
        List every stored currency.

        Returns:
            Currency entities ordered by id
        """
        ...

    async def find_by_id(self, currency_id: int) -> Optional[Currency]:
        """
        Retrieve currency by ID.

        Args:
            currency_id: Currency's unique identifier

        Returns:
            Currency entity if found, None otherwise
        """
        ...

    async def find_by_name(self, name: str) -> Optional[Currency]:
        """
        Find currency by its exact (case-sensitive) name.

        Args:
            name: Currency name

        Returns:
            Currency entity if found, None otherwise
        """
        ...

    async def save(self, currency: Currency) -> Currency:
        """
        Insert a new currency (id is None) or replace an existing one.

        Implementations must enforce name uniqueness themselves, so two
        writers that both passed a find_by_name check cannot both succeed.

        Args:
            currency: Currency entity to persist

        Returns:
            Persisted currency entity with its id assigned

        Raises:
            AlreadyExistsError: If another currency already has the same name
            NotFoundError: If an update targets a missing id
        """
        ...

    async def delete_by_id(self, currency_id: int) -> None:
        """
        Delete currency by ID.

        Args:
            currency_id: Currency's unique identifier

        Raises:
            NotFoundError: If currency doesn't exist
        """
        ...
