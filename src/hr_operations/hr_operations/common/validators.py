from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.exceptions import ValidationError
from .money import to_decimal


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_amount(value: Any, field_name: str, *, minimum: Decimal = Decimal("0")) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()) or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        amount = to_decimal(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite() or amount < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}")
    return amount


def require_percentage(value: Any, field_name: str) -> Decimal:
    pct = require_amount(value, field_name)
    if pct > Decimal("100"):
        raise ValidationError(f"{field_name} must be between 0 and 100")
    return pct


def require_int_range(value: Any, field_name: str, low: int, high: int) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number
