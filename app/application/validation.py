"""Request validation.

Pure predicate checks run before any store or provider access. They never
touch a collaborator and have no side effects; every violation raises
InvalidRequestError.
"""

from typing import Optional

from app.application.dto.currency_dto import ConvertCurrencyInput, CurrencyInput
from app.application.exceptions import InvalidRequestError

INVALID_CURRENCY_REQUEST = "Invalid CurrencyRequest"
INVALID_CURRENCY_ID = "Invalid Currency ID"
INVALID_CONVERT_REQUEST = "Invalid ConvertCurrencyRequest"

# Significant digits a stored rate may carry
MAX_RATE_DIGITS = 40


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_currency_payload(payload: Optional[CurrencyInput]) -> None:
    """
    Validate a create/update payload.

    Requires a non-empty name and code. Exchange rates, when given, must
    be keyed by a non-empty name, be positive and carry at most
    MAX_RATE_DIGITS significant digits.

    Raises:
        InvalidRequestError: If the payload is absent or malformed
    """
    if payload is None:
        raise InvalidRequestError(INVALID_CURRENCY_REQUEST)

    if _is_blank(payload.name):
        raise InvalidRequestError(INVALID_CURRENCY_REQUEST, field="name")

    if _is_blank(payload.code):
        raise InvalidRequestError(INVALID_CURRENCY_REQUEST, field="code")

    for target, rate in (payload.exchanges or {}).items():
        if _is_blank(target):
            raise InvalidRequestError(INVALID_CURRENCY_REQUEST, field="exchanges")
        if (
            rate is None
            or not rate.is_finite()
            or rate <= 0
            or len(rate.as_tuple().digits) > MAX_RATE_DIGITS
        ):
            raise InvalidRequestError(
                INVALID_CURRENCY_REQUEST, field=f"exchanges.{target}", value=rate
            )


def validate_id(currency_id: Optional[int]) -> None:
    """
    Validate a currency id.

    Raises:
        InvalidRequestError: If the id is absent or not positive
    """
    if currency_id is None or currency_id <= 0:
        raise InvalidRequestError(INVALID_CURRENCY_ID, field="id", value=currency_id)


def validate_convert_payload(payload: Optional[ConvertCurrencyInput]) -> None:
    """
    Validate a conversion request.

    Raises:
        InvalidRequestError: If the payload is absent, from/to are empty or
            the amount is missing
    """
    if payload is None:
        raise InvalidRequestError(INVALID_CONVERT_REQUEST)

    if _is_blank(payload.from_):
        raise InvalidRequestError(INVALID_CONVERT_REQUEST, field="from")

    if _is_blank(payload.to):
        raise InvalidRequestError(INVALID_CONVERT_REQUEST, field="to")

    if payload.amount is None:
        raise InvalidRequestError(INVALID_CONVERT_REQUEST, field="amount")


def validate_quote_codes(codes: Optional[list[str]]) -> list[str]:
    """
    Validate and clean a list of provider pair codes.

    Returns:
        Codes with surrounding whitespace stripped

    Raises:
        InvalidRequestError: If no codes are given or any code is blank
    """
    if not codes:
        raise InvalidRequestError("At least one currency pair code is required", field="currencies")

    cleaned = []
    for code in codes:
        if _is_blank(code):
            raise InvalidRequestError("Currency pair code cannot be empty", field="currencies")
        cleaned.append(code.strip())
    return cleaned
