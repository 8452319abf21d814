"""Input rules shared by the invoice aggregator and the expense computer."""
from decimal import Decimal, InvalidOperation
from typing import Any

from accubooks.core.exceptions import InvalidInputError

GST_RATE_MIN = Decimal("0")
GST_RATE_MAX = Decimal("28")


def to_decimal(value: Any, field: str) -> Decimal:
    """Coerce a numeric input to Decimal without passing through binary float."""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise InvalidInputError(f"{field} must be a number", field=field, value=value)
    else:
        try:
            result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise InvalidInputError(f"{field} must be a number", field=field, value=value) from exc
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be a finite number", field=field, value=value)
    return result


def check_gst_rate(rate: Decimal, field: str = "gst_rate_percent") -> Decimal:
    if rate < GST_RATE_MIN or rate > GST_RATE_MAX:
        raise InvalidInputError(
            f"GST rate must be between {GST_RATE_MIN} and {GST_RATE_MAX} percent",
            field=field,
            value=rate,
        )
    return rate


def check_non_negative(amount: Decimal, field: str) -> Decimal:
    if amount < 0:
        raise InvalidInputError(f"{field} cannot be negative", field=field, value=amount)
    return amount
