from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional

import pytest

from raisin_tracker.daily_work.model import DailyWorkEntry, WorkTotals
from raisin_tracker.employees.model import Employee
from raisin_tracker.main import create_app


class InMemoryEmployees:
    def __init__(self, names: tuple[str, ...] = ()):
        self._by_id: dict[int, Employee] = {}
        self._id = 0
        for name in names:
            self.create(name=name)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: e.name)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def create(self, *, name: str) -> int:
        self._id += 1
        self._by_id[self._id] = Employee(employee_id=self._id, name=name, created_at=datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc))
        return self._id

    def count(self) -> int:
        return len(self._by_id)


class InMemoryDailyWork:
    """Mimics the store: UNIQUE(employee_id, date) fails the insert."""

    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self._by_id: dict[int, DailyWorkEntry] = {}
        self._id = 0

    def _named(self, e: DailyWorkEntry) -> DailyWorkEntry:
        emp = self._employees.get_by_id(e.employee_id)
        return replace(e, employee_name=emp.name if emp else None)

    def list_for_date(self, work_date: date):
        rows = [self._named(e) for e in self._by_id.values() if e.work_date == work_date]
        return sorted(rows, key=lambda e: e.employee_name or "")

    def list_between(self, *, start_date: date, end_date: date):
        rows = [self._named(e) for e in self._by_id.values() if start_date <= e.work_date <= end_date]
        return sorted(rows, key=lambda e: (e.work_date, e.employee_name or ""))

    def get_by_id(self, entry_id: int):
        e = self._by_id.get(entry_id)
        return self._named(e) if e else None

    def create(self, *, employee_id: int, work_date: date, kgs_cleaned: float, earnings: float) -> int:
        for e in self._by_id.values():
            if e.employee_id == employee_id and e.work_date == work_date:
                raise RuntimeError("UNIQUE constraint failed: daily_work.employee_id, daily_work.date")
        self._id += 1
        self._by_id[self._id] = DailyWorkEntry(
            entry_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            kgs_cleaned=kgs_cleaned,
            earnings=earnings,
            created_at=datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc),
        )
        return self._id

    def update_amounts(self, *, entry_id: int, kgs_cleaned: float, earnings: float) -> bool:
        e = self._by_id.get(entry_id)
        if not e:
            return False
        self._by_id[entry_id] = replace(e, kgs_cleaned=kgs_cleaned, earnings=earnings)
        return True

    def delete_by_id(self, entry_id: int) -> bool:
        return self._by_id.pop(entry_id, None) is not None

    def totals_between(self, *, start_date: date, end_date: date) -> WorkTotals:
        rows = [e for e in self._by_id.values() if start_date <= e.work_date <= end_date]
        return WorkTotals(
            total_kgs=round(sum(e.kgs_cleaned for e in rows), 2),
            total_earnings=round(sum(e.earnings for e in rows), 2),
        )

    def __len__(self) -> int:
        return len(self._by_id)


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; the week starts on Sunday 2024-06-02
    return datetime(2024, 6, 5, 9, 0, 0)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(("Asha", "Bhavna"))


@pytest.fixture
def daily_work_repo(employees_repo) -> InMemoryDailyWork:
    return InMemoryDailyWork(employees_repo)


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "DATABASE_URL": f"sqlite:///{tmp_path / 'raisin_tracker.db'}",
            "AUTO_INIT_DB": True,
            "AUTO_SEED_DB": False,
        }
    )
    yield app
    app.extensions["raisin_tracker"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["raisin_tracker"]
