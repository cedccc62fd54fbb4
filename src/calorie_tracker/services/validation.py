"""Input validation helpers shared by the services."""

import math
from decimal import ROUND_HALF_UP, Decimal

from calorie_tracker.domain.errors import ValidationError


def require_positive_number(value: object, field_name: str) -> float:
    """Return value as a finite float greater than zero.

    Numeric strings are accepted the same way form input is.
    """
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError) as exc:
        raise ValidationError(f"{field_name} must be a number") from exc
    if not math.isfinite(number) or number <= 0:
        raise ValidationError(f"{field_name} must be a number greater than zero")
    return number


def require_text(value: object, field_name: str) -> str:
    """Return stripped text, rejecting empty input."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_choice(value: object, choices: tuple[str, ...], field_name: str) -> str:
    """Return value when it is one of the allowed choices."""
    if value not in choices:
        allowed = ", ".join(choices)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
    return str(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (exact for floats)."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
