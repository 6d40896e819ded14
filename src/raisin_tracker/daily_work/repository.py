from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyWorkEntry, WorkTotals


class DailyWorkRepository(Protocol):
    def list_for_date(self, work_date: date) -> Sequence[DailyWorkEntry]:
        """Entries for one date joined with employee names, ordered by name."""

        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[DailyWorkEntry]:
        """Entries with start_date <= date <= end_date, ordered by date then name."""

        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[DailyWorkEntry]:
        raise NotImplementedError

    def create(self, *, employee_id: int, work_date: date, kgs_cleaned: float, earnings: float) -> int:
        raise NotImplementedError

    def update_amounts(self, *, entry_id: int, kgs_cleaned: float, earnings: float) -> bool:
        raise NotImplementedError

    def delete_by_id(self, entry_id: int) -> bool:
        raise NotImplementedError

    def totals_between(self, *, start_date: date, end_date: date) -> WorkTotals:
        raise NotImplementedError
