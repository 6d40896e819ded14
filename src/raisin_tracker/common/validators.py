from __future__ import annotations

import math
from typing import Optional

from ..core.constants import MAX_AMOUNT, MONEY_PLACES
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_id(value: Optional[int], field_name: str) -> int:
    if value is None or isinstance(value, bool) or int(value) <= 0:
        raise ValidationError(f"{field_name} is required")
    return int(value)


def require_amount(value: Optional[float], field_name: str) -> float:
    """Non-negative amount rounded to two decimals.

    Zero is a legitimate value; only a missing, negative or out-of-range amount
    is rejected.
    """
    if value is None:
        raise ValidationError(f"{field_name} is required")
    amount = float(value)
    if not math.isfinite(amount) or amount > MAX_AMOUNT:
        raise ValidationError(f"{field_name} must not exceed {MAX_AMOUNT:,.2f}")
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return round(amount, MONEY_PLACES)
