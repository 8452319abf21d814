from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

PAISE = Decimal("0.01")


def quantize_money(amount: Decimal) -> Decimal:
    """Round to two fraction digits, half away from zero."""
    return amount.quantize(PAISE, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal | None) -> str | None:
    """API representation of a money amount: always two fraction digits."""
    if amount is None:
        return None
    return format(quantize_money(Decimal(amount)), "f")

