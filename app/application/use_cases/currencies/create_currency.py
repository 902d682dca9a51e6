"""Create currency use case."""

import logging

from app.application.dto.currency_dto import CurrencyInput
from app.application.exceptions import AlreadyExistsError
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.application.validation import validate_currency_payload
from app.domain.entities.currency import Currency

logger = logging.getLogger(__name__)


class CreateCurrencyUseCase:
    """Use case for registering a new currency."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self, input_dto: CurrencyInput | None) -> int:
        """
        Create a new currency.

        Args:
            input_dto: Currency creation data

        Returns:
            Generated id of the new currency

        Raises:
            InvalidRequestError: If the payload is malformed
            AlreadyExistsError: If a currency with the same name exists
        """
        validate_currency_payload(input_dto)

        async with self.uow:
            existing = await self.uow.currencies.find_by_name(input_dto.name)
            if existing:
                logger.warning("Rejected duplicate currency name %r", input_dto.name)
                raise AlreadyExistsError(
                    message="Coin already exists",
                    resource_type="Currency",
                    field="name",
                    value=input_dto.name,
                )

            currency = Currency(
                id=None,
                name=input_dto.name,
                code=input_dto.code,
                exchanges=dict(input_dto.exchanges or {}),
            )

            # save() enforces the unique name again for concurrent creates
            saved = await self.uow.currencies.save(currency)

            await self.uow.commit()

        logger.info("Created currency id=%s name=%r", saved.id, saved.name)
        return saved.id
