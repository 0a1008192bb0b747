from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Coerce numeric input (Decimal, int, float, str, None) into Decimal.

    Blank or unparseable input becomes 0, matching how empty form fields are
    treated by the attendance sheet.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip() or "0")
        except InvalidOperation:
            return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def round2(value: Any) -> Decimal:
    """Round half-up to 2 decimal places."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Any) -> str:
    return f"${round2(value)}"
