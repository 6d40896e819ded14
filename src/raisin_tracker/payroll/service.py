from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, week_dates, week_start
from ..core.constants import MONEY_PLACES
from ..daily_work.model import DailyWorkEntry, WorkTotals
from ..daily_work.repository import DailyWorkRepository
from ..employees.repository import EmployeeRepository


def _money(value: float) -> float:
    return round(value, MONEY_PLACES)


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    today: WorkTotals
    week: WorkTotals
    week_start: date
    as_of: date


@dataclass(frozen=True)
class DailySummary:
    work_date: date
    entries: Sequence[DailyWorkEntry]
    total_kgs: float
    total_earnings: float


@dataclass
class WeeklyRow:
    employee_id: int
    name: str
    total_kgs: float = 0.0
    total_earnings: float = 0.0
    # date -> WorkTotals, filled only for the detailed view
    daily: dict[date, WorkTotals] = field(default_factory=dict)


@dataclass(frozen=True)
class WeeklySummary:
    week_start: date
    dates: list[date]
    rows: list[WeeklyRow]
    total_kgs: float
    total_earnings: float
    detailed: bool = False
    # date -> grand totals across employees, detailed view only
    daily_totals: dict[date, WorkTotals] = field(default_factory=dict)


class PayrollReportService:
    """Read-side aggregation over the ledger. Recomputed on every call."""

    def __init__(self, entries: DailyWorkRepository, employees: EmployeeRepository):
        self._entries = entries
        self._employees = employees

    def dashboard(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or now_local().date()
        start = week_start(today)

        return DashboardStats(
            total_employees=self._employees.count(),
            today=self._entries.totals_between(start_date=today, end_date=today),
            # Sunday of the current week through today, both inclusive
            week=self._entries.totals_between(start_date=start, end_date=today),
            week_start=start,
            as_of=today,
        )

    def daily_summary(self, work_date: Optional[date] = None) -> DailySummary:
        work_date = work_date or now_local().date()
        entries = self._entries.list_for_date(work_date)

        return DailySummary(
            work_date=work_date,
            entries=entries,
            total_kgs=_money(sum(e.kgs_cleaned for e in entries)),
            total_earnings=_money(sum(e.earnings for e in entries)),
        )

    def weekly_summary(self, start: Optional[date] = None, *, detailed: bool = False) -> WeeklySummary:
        """Per-employee totals for the 7 days beginning at ``start``.

        ``start`` defaults to the Sunday of the current week; any other date is
        taken as given. Every employee gets a row, even with no entries.
        """

        start = start or week_start(now_local().date())
        dates = week_dates(start)

        rows = [WeeklyRow(employee_id=e.employee_id, name=e.name) for e in self._employees.list_all()]
        by_employee = {r.employee_id: r for r in rows}
        day_kgs: dict[date, float] = {}
        day_earnings: dict[date, float] = {}

        for entry in self._entries.list_between(start_date=dates[0], end_date=dates[-1]):
            row = by_employee.get(entry.employee_id)
            if not row:
                continue
            row.total_kgs += entry.kgs_cleaned
            row.total_earnings += entry.earnings
            if detailed:
                row.daily[entry.work_date] = WorkTotals(total_kgs=entry.kgs_cleaned, total_earnings=entry.earnings)
                day_kgs[entry.work_date] = day_kgs.get(entry.work_date, 0.0) + entry.kgs_cleaned
                day_earnings[entry.work_date] = day_earnings.get(entry.work_date, 0.0) + entry.earnings

        for row in rows:
            row.total_kgs = _money(row.total_kgs)
            row.total_earnings = _money(row.total_earnings)

        return WeeklySummary(
            week_start=start,
            dates=dates,
            rows=rows,
            total_kgs=_money(sum(r.total_kgs for r in rows)),
            total_earnings=_money(sum(r.total_earnings for r in rows)),
            detailed=detailed,
            daily_totals={
                d: WorkTotals(total_kgs=_money(day_kgs[d]), total_earnings=_money(day_earnings[d])) for d in sorted(day_kgs)
            },
        )
