from __future__ import annotations

from abc import ABC, abstractmethod


class EarningsCalculator(ABC):
    """Calculator interface (Strategy Pattern for piecework pay)."""

    @abstractmethod
    def earnings(self, kgs_cleaned: float) -> float:
        raise NotImplementedError
