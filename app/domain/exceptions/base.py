"""Base domain exception classes."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for invariants broken inside the domain model.

    ``code`` is fixed per subclass. ``field`` names the attribute of the
    entity that broke the invariant, when there is one.
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
