"""
Request validation for resource operations.

Pure functions: each returns the validated value or raises
InvalidRequestError. Nothing here touches a store.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from app.domain.resources.entities import MAX_SAFE_INTEGER, Payload, ResourceId
from app.domain.resources.errors import InvalidRequestError

# Plain decimal notation with an optional exponent, e.g. "12", "-3", "1e3".
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class PayloadSchema(BaseModel):
    """Exact shape of a resource payload."""

    model_config = ConfigDict(extra="forbid", strict=True)

    brand: str
    color: str


def validate_id(raw: Any) -> ResourceId:
    """Validate a resource identifier.

    Accepts integers and values that convert to a finite integer
    whose magnitude is at most 2**53 - 1.

    Args:
        raw: Path parameter or any other raw identifier.

    Returns:
        The identifier as an int.

    Raises:
        InvalidRequestError: If the value is not a safe integer.
    """
    if isinstance(raw, bool):
        raise InvalidRequestError(f"id {raw!r} is not a number")

    if isinstance(raw, (int, float)):
        number = Decimal(raw)
    elif isinstance(raw, str) and _NUMBER_PATTERN.fullmatch(raw.strip()):
        try:
            number = Decimal(raw.strip())
        except InvalidOperation:
            raise InvalidRequestError(f"id {raw!r} is not a number") from None
    else:
        raise InvalidRequestError(f"id {raw!r} is not a number")

    if not number.is_finite():
        raise InvalidRequestError(f"id {raw!r} is not finite")
    # adjusted() is the exponent of the leading digit; 2**53 - 1 has 16 digits.
    if number.adjusted() > 15 or number.copy_abs() > MAX_SAFE_INTEGER:
        raise InvalidRequestError(f"id {raw!r} exceeds the safe integer range")
    if number != number.to_integral_value():
        raise InvalidRequestError(f"id {raw!r} is not an integer")
    return int(number)


def validate_payload(raw: Any) -> Payload:
    """Validate a resource payload.

    Args:
        raw: Decoded JSON value.

    Returns:
        The payload, carrying exactly ``brand`` and ``color``.

    Raises:
        InvalidRequestError: If ``raw`` is not an object with exactly
            two string fields ``brand`` and ``color``.
    """
    try:
        schema = PayloadSchema.model_validate(raw)
    except ValidationError as exc:
        raise InvalidRequestError(
            f"payload has {exc.error_count()} validation error(s)"
        ) from None
    return Payload(brand=schema.brand, color=schema.color)


def validate_create_body(raw: Any) -> Payload:
    """Validate a ``{"data": {...}}`` request envelope.

    Raises:
        InvalidRequestError: If the envelope or its ``data`` is invalid.
    """
    if not isinstance(raw, dict) or "data" not in raw:
        raise InvalidRequestError("body must be an object with a data field")
    return validate_payload(raw["data"])
