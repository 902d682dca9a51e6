"""Update currency use case."""

import logging

from app.application.dto.currency_dto import CurrencyInput, CurrencyOutput
from app.application.exceptions import AlreadyExistsError, NotFoundError
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from app.application.validation import validate_currency_payload, validate_id

logger = logging.getLogger(__name__)


class UpdateCurrencyUseCase:
    """Use case for replacing a currency's name, code and exchanges."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, currency_id: int | None, input_dto: CurrencyInput | None
    ) -> CurrencyOutput:
        """
        Update a currency.

        Args:
            currency_id: Currency's unique identifier
            input_dto: Replacement data

        Returns:
            Updated currency information

        Raises:
            InvalidRequestError: If the id or payload is malformed
            NotFoundError: If the currency doesn't exist
            AlreadyExistsError: If the new name belongs to another currency
        """
        validate_id(currency_id)
        validate_currency_payload(input_dto)

        async with self.uow:
            currency = await self.uow.currencies.find_by_id(currency_id)

            if currency is None:
                raise NotFoundError(
                    message=f"Coin not found: {currency_id}",
                    resource_type="Currency",
                    resource_id=str(currency_id),
                )

            if input_dto.name != currency.name:
                existing = await self.uow.currencies.find_by_name(input_dto.name)
                if existing and existing.id != currency_id:
                    logger.warning(
                        "Rejected rename of currency id=%s to taken name %r",
                        currency_id,
                        input_dto.name,
                    )
                    raise AlreadyExistsError(
                        message="Coin with the same name already exists",
                        resource_type="Currency",
                        field="name",
                        value=input_dto.name,
                    )

            currency.replace_details(
                name=input_dto.name,
                code=input_dto.code,
                exchanges=dict(input_dto.exchanges or {}),
            )

            updated = await self.uow.currencies.save(currency)

            await self.uow.commit()

        logger.info("Updated currency id=%s", updated.id)
        return CurrencyOutput.from_entity(updated)
