from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy import text

from ..database.connection import DatabaseConnection
from ..database.sql_base import (
    db_transaction,
    fetchall,
    fetchone,
    normalize_sql_amount,
    normalize_sql_date,
    normalize_sql_timestamp,
)
from .model import DailyWorkEntry, WorkTotals
from .repository import DailyWorkRepository

_SELECT_ENTRIES = """
    SELECT dw.id, dw.employee_id, dw.date, dw.kgs_cleaned, dw.earnings, dw.created_at,
           e.name AS employee_name
    FROM daily_work dw
    JOIN employees e ON dw.employee_id = e.id
"""


def _to_entry(row: dict) -> DailyWorkEntry:
    return DailyWorkEntry(
        entry_id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        work_date=normalize_sql_date(row["date"]),
        kgs_cleaned=normalize_sql_amount(row["kgs_cleaned"]),
        earnings=normalize_sql_amount(row["earnings"]),
        created_at=normalize_sql_timestamp(row.get("created_at")),
        employee_name=row.get("employee_name"),
    )


class SQLDailyWorkRepository(DailyWorkRepository):
    # Dates are bound as ISO text: SQLite stores DATE columns as 'YYYY-MM-DD'.

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, work_date: date) -> Sequence[DailyWorkEntry]:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(
                text(_SELECT_ENTRIES + " WHERE dw.date = :work_date ORDER BY e.name"),
                {"work_date": work_date.isoformat()},
            )
            return [_to_entry(r) for r in fetchall(result)]

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[DailyWorkEntry]:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(
                text(_SELECT_ENTRIES + " WHERE dw.date BETWEEN :start AND :end ORDER BY dw.date, e.name"),
                {"start": start_date.isoformat(), "end": end_date.isoformat()},
            )
            return [_to_entry(r) for r in fetchall(result)]

    def get_by_id(self, entry_id: int) -> Optional[DailyWorkEntry]:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(text(_SELECT_ENTRIES + " WHERE dw.id = :id"), {"id": int(entry_id)})
            row = fetchone(result)
            return _to_entry(row) if row else None

    def create(self, *, employee_id: int, work_date: date, kgs_cleaned: float, earnings: float) -> int:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(
                text(
                    """
                    INSERT INTO daily_work (employee_id, date, kgs_cleaned, earnings)
                    VALUES (:employee_id, :work_date, :kgs_cleaned, :earnings)
                    """
                ),
                {
                    "employee_id": int(employee_id),
                    "work_date": work_date.isoformat(),
                    "kgs_cleaned": float(kgs_cleaned),
                    "earnings": float(earnings),
                },
            )
            return int(result.lastrowid)

    def update_amounts(self, *, entry_id: int, kgs_cleaned: float, earnings: float) -> bool:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(
                text(
                    """
                    UPDATE daily_work
                    SET kgs_cleaned = :kgs_cleaned, earnings = :earnings
                    WHERE id = :id
                    """
                ),
                {"kgs_cleaned": float(kgs_cleaned), "earnings": float(earnings), "id": int(entry_id)},
            )
            return result.rowcount > 0

    def delete_by_id(self, entry_id: int) -> bool:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(text("DELETE FROM daily_work WHERE id = :id"), {"id": int(entry_id)})
            return result.rowcount > 0

    def totals_between(self, *, start_date: date, end_date: date) -> WorkTotals:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(
                text(
                    """
                    SELECT COALESCE(SUM(kgs_cleaned), 0) AS total_kgs,
                           COALESCE(SUM(earnings), 0) AS total_earnings
                    FROM daily_work
                    WHERE date BETWEEN :start AND :end
                    """
                ),
                {"start": start_date.isoformat(), "end": end_date.isoformat()},
            )
            row = fetchone(result) or {}
            return WorkTotals(
                total_kgs=round(normalize_sql_amount(row.get("total_kgs")), 2),
                total_earnings=round(normalize_sql_amount(row.get("total_earnings")), 2),
            )
