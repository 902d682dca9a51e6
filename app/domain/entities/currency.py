"""Currency domain entity."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from app.domain.exceptions import InvalidCurrencyError, InvalidExchangeRateError


def _to_rate(target: str, value: object) -> Decimal:
    """Coerce a rate to Decimal and reject anything that is not positive."""
    try:
        rate = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidExchangeRateError(target, value)

    if not rate.is_finite() or rate <= 0:
        raise InvalidExchangeRateError(target, value)
    return rate


@dataclass
class Currency:
    """
    Currency entity representing a named unit of value.

    A currency is identified by a store-generated integer id and by a
    registry-wide unique name. It may carry directional exchange rates
    keyed by the name of the target currency.
    """

    id: int | None
    name: str
    code: str
    exchanges: dict[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate currency after initialization."""
        if not self.name or not self.name.strip():
            raise InvalidCurrencyError("name", "cannot be empty")

        if not self.code or not self.code.strip():
            raise InvalidCurrencyError("code", "cannot be empty")

        self.exchanges = self._normalize_exchanges(self.exchanges)

    @staticmethod
    def _normalize_exchanges(exchanges: dict[str, object] | None) -> dict[str, Decimal]:
        normalized: dict[str, Decimal] = {}
        for target, rate in (exchanges or {}).items():
            if not target:
                raise InvalidCurrencyError("exchanges", "target name cannot be empty")
            normalized[target] = _to_rate(target, rate)
        return normalized

    def rate_to(self, target: str) -> Decimal | None:
        """
        Get the locally stored rate from this currency to ``target``.

        Args:
            target: Name of the target currency

        Returns:
            The rate, or None when no local rate is known
        """
        return self.exchanges.get(target)

    def replace_details(
        self, name: str, code: str, exchanges: dict[str, object] | None
    ) -> None:
        """
        Replace name, code and exchanges wholesale.

        The id is never touched. Validation happens before any attribute
        is assigned so a rejected update leaves the entity unchanged.

        Raises:
            InvalidCurrencyError: If name or code is empty
            InvalidExchangeRateError: If a rate is not a positive decimal
        """
        if not name or not name.strip():
            raise InvalidCurrencyError("name", "cannot be empty")
        if not code or not code.strip():
            raise InvalidCurrencyError("code", "cannot be empty")

        normalized = self._normalize_exchanges(exchanges)

        self.name = name
        self.code = code
        self.exchanges = normalized

    @property
    def label(self) -> str:
        """Human readable label combining id and name."""
        return f"{self.id} - {self.name}"

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id) once persisted."""
        if not isinstance(other, Currency):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"Currency(id={self.id}, name={self.name!r}, code={self.code!r})"
