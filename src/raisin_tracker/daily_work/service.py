from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, now_utc
from ..common.validators import require_amount, require_positive_id
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import EarningsCalculator
from ..payroll.calculator.fixed_rate_calculator import FixedRateCalculator
from .model import DailyWorkEntry, EntryDeletion, EntryUpdate
from .repository import DailyWorkRepository


class DailyWorkService:
    """Use case: the daily work ledger.

    One entry per employee per date. The uniqueness rule belongs to the store:
    a duplicate insert is not pre-checked here and fails there.
    """

    def __init__(
        self,
        entries: DailyWorkRepository,
        employees: EmployeeRepository,
        *,
        calculator: EarningsCalculator | None = None,
    ):
        self._entries = entries
        self._employees = employees
        self._calculator = calculator or FixedRateCalculator()

    def _resolve_earnings(self, kgs_cleaned: float, earnings: Optional[float]) -> float:
        # Earnings sent by the caller are stored as given; otherwise the rate applies.
        if earnings is None:
            return require_amount(self._calculator.earnings(kgs_cleaned), "earnings")
        return require_amount(earnings, "earnings")

    def list_for_date(self, work_date: date | None = None) -> Sequence[DailyWorkEntry]:
        work_date = work_date or now_local().date()
        return self._entries.list_for_date(work_date)

    def create_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        kgs_cleaned: float,
        earnings: Optional[float] = None,
    ) -> DailyWorkEntry:
        employee_id = require_positive_id(employee_id, "employee_id")
        if work_date is None:
            raise ValidationError("date is required")
        kgs_cleaned = require_amount(kgs_cleaned, "kgs_cleaned")
        earnings = self._resolve_earnings(kgs_cleaned, earnings)

        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")

        entry_id = self._entries.create(
            employee_id=employee_id,
            work_date=work_date,
            kgs_cleaned=kgs_cleaned,
            earnings=earnings,
        )

        entry = self._entries.get_by_id(entry_id)
        if not entry:
            raise DomainError(f"Daily work entry {entry_id} vanished after insert")
        return entry

    def update_entry(
        self,
        *,
        entry_id: int,
        kgs_cleaned: float,
        earnings: Optional[float] = None,
        now: datetime | None = None,
    ) -> EntryUpdate:
        entry_id = require_positive_id(entry_id, "id")
        kgs_cleaned = require_amount(kgs_cleaned, "kgs_cleaned")
        earnings = self._resolve_earnings(kgs_cleaned, earnings)

        if not self._entries.update_amounts(entry_id=entry_id, kgs_cleaned=kgs_cleaned, earnings=earnings):
            raise NotFoundError("No entry found with the provided ID")

        # Modification time is not stored; report when the request was served.
        return EntryUpdate(
            entry_id=entry_id,
            kgs_cleaned=kgs_cleaned,
            earnings=earnings,
            updated_at=now or now_utc(),
        )

    def delete_entry(self, *, entry_id: int, now: datetime | None = None) -> EntryDeletion:
        entry_id = require_positive_id(entry_id, "id")

        if not self._entries.delete_by_id(entry_id):
            raise NotFoundError("No entry found with the provided ID")

        return EntryDeletion(entry_id=entry_id, deleted_at=now or now_utc())
