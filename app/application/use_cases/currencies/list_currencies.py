"""List currencies use case."""

from app.application.dto.currency_dto import CurrencyLabelOutput
from app.application.ports.outbound.unit_of_work_port import UnitOfWorkPort


class ListCurrenciesUseCase:
    """Use case for listing stored currencies in display form."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self) -> list[CurrencyLabelOutput]:
        """
        List every stored currency.

        Returns:
            One label per currency, ordered by id
        """
        async with self.uow:
            currencies = await self.uow.currencies.find_all()

        return [CurrencyLabelOutput.from_entity(currency) for currency in currencies]
