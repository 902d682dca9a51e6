"""Application layer exceptions.

Every failure kind the registry and the conversion engine can produce has
its own class and machine-readable ``error_code``, so the boundary layer can
map a failure to a response without inspecting message text.
"""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class InvalidRequestError(ApplicationError):
    """Raised when input is malformed or missing, before any store access."""

    def __init__(
        self,
        message: str = "Invalid request",
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """
        Initialize invalid request error.

        Args:
            message: Human-readable error message
            field: Field that failed validation
            value: Invalid value
        """
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(message, "INVALID_REQUEST", details)


class NotFoundError(ApplicationError):
    """Raised when a referenced currency id does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        """
        Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource (e.g., 'Currency')
            resource_id: ID of the resource that was not found
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(message, "NOT_FOUND", details)


class AlreadyExistsError(ApplicationError):
    """Raised when a currency name collides on create or update."""

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
    ):
        """
        Initialize already exists error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource (e.g., 'Currency')
            field: Field that has duplicate value
            value: The duplicate value
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(message, "ALREADY_EXISTS", details)


class CoinNotFoundError(ApplicationError):
    """Raised when a currency named in a conversion is not in the registry."""

    def __init__(self, name: str):
        super().__init__(
            f"Coin not found: {name}",
            "COIN_NOT_FOUND",
            {"name": name},
        )


class ExchangeNotFoundError(ApplicationError):
    """Raised when no usable rate exists for a pair."""

    def __init__(self, source: str, target: str):
        super().__init__(
            f"Exchange rate not found for {source} to {target}",
            "EXCHANGE_NOT_FOUND",
            {"from": source, "to": target},
        )


class ConversionDataNotFoundError(ApplicationError):
    """Raised when the rate provider returned nothing for a pair."""

    def __init__(self, source: str, target: str, pair_tag: Optional[str] = None):
        details = {"from": source, "to": target}
        if pair_tag:
            details["pair_tag"] = pair_tag

        super().__init__(
            f"Currency conversion data not found for {source} to {target}",
            "CONVERSION_DATA_NOT_FOUND",
            details,
        )


class ProviderUnavailableError(ApplicationError):
    """Raised when the rate provider times out or cannot be reached."""

    def __init__(
        self,
        message: str = "Rate provider unavailable",
        service: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        """
        Initialize provider unavailable error.

        Args:
            message: Human-readable error message
            service: Name of the external service
            status_code: HTTP status code if applicable
        """
        details = {}
        if service:
            details["service"] = service
        if status_code:
            details["status_code"] = status_code

        super().__init__(message, "PROVIDER_UNAVAILABLE", details)
