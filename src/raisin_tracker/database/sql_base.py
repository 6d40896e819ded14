from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.engine import Connection, CursorResult

from ..common.datetime_utils import parse_iso_date
from .connection import DatabaseConnection


@contextmanager
def db_transaction(conn_factory: DatabaseConnection) -> Iterator[Connection]:
    """One unit of work: commit on success, rollback on error."""
    with conn_factory.engine.begin() as conn:
        yield conn


def fetchone(result: CursorResult) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row else None


def fetchall(result: CursorResult) -> List[Dict[str, Any]]:
    return [dict(r) for r in result.mappings().all()]


def normalize_sql_date(value: Any) -> date:
    """Normalize DATE values: SQLite hands back TEXT, other drivers a date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value[:10])
    raise TypeError(f"Unsupported DATE value type: {type(value)!r}")


def normalize_sql_timestamp(value: Any) -> Optional[datetime]:
    """Normalize TIMESTAMP values to zone-aware UTC.

    SQLite's CURRENT_TIMESTAMP is stored as UTC text like '2024-06-03 10:15:00'
    with no offset.
    """

    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if not isinstance(value, datetime):
        raise TypeError(f"Unsupported TIMESTAMP value type: {type(value)!r}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def normalize_sql_amount(value: Any) -> float:
    # DECIMAL columns come back as int, float or Decimal depending on the value
    return float(value or 0)
