"""Delete currency use case."""

import logging

from app.application.exceptions import NotFoundError
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.application.validation import validate_id

logger = logging.getLogger(__name__)


class DeleteCurrencyUseCase:
    """
    Use case for removing a currency.

    Exchanges on other currencies that name the deleted one are left in
    place; they simply stop resolving.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self, currency_id: int | None) -> None:
        """
        Delete a currency.

        Args:
            currency_id: Currency's unique identifier

        Raises:
            InvalidRequestError: If the id is malformed
            NotFoundError: If the currency doesn't exist
        """
        validate_id(currency_id)

        async with self.uow:
            currency = await self.uow.currencies.find_by_id(currency_id)

            if currency is None:
                raise NotFoundError(
                    message=f"Coin not found: {currency_id}",
                    resource_type="Currency",
                    resource_id=str(currency_id),
                )

            await self.uow.currencies.delete_by_id(currency.id)

            await self.uow.commit()

        logger.info("Deleted currency id=%s name=%r", currency_id, currency.name)
