from __future__ import annotations

import math

from ...core.constants import DEFAULT_RATE_PER_KG, MONEY_PLACES
from .base import EarningsCalculator


class FixedRateCalculator(EarningsCalculator):
    """Standard rule: kgs_cleaned * rate, rounded to two decimals."""

    def __init__(self, rate_per_kg: float = DEFAULT_RATE_PER_KG):
        if not math.isfinite(rate_per_kg) or rate_per_kg < 0:
            raise ValueError("rate_per_kg must be a finite, non-negative number")
        self.rate_per_kg = float(rate_per_kg)

    def earnings(self, kgs_cleaned: float) -> float:
        amount = float(kgs_cleaned) * self.rate_per_kg
        if not math.isfinite(amount):
            raise ValueError(f"earnings overflow for {kgs_cleaned} kg")
        return round(amount, MONEY_PLACES)
