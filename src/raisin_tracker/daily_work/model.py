from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class DailyWorkEntry:
    """Domain entity: one employee's cleaned quantity and earnings for one date."""

    entry_id: int
    employee_id: int
    work_date: date
    kgs_cleaned: float
    earnings: float
    created_at: Optional[datetime] = None
    employee_name: Optional[str] = None


@dataclass(frozen=True)
class EntryUpdate:
    entry_id: int
    kgs_cleaned: float
    earnings: float
    updated_at: datetime


@dataclass(frozen=True)
class EntryDeletion:
    entry_id: int
    deleted_at: datetime


@dataclass(frozen=True)
class WorkTotals:
    """Read-model: summed quantity and earnings over a set of entries."""

    total_kgs: float = 0.0
    total_earnings: float = 0.0
