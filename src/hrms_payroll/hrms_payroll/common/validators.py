from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.exceptions import ValidationError
from .money import to_decimal


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount


def require_non_negative(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value)
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount
