from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..core.constants import DAYS_PER_WEEK
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_date_arg(value: Optional[str], *, field_name: str, default: date) -> date:
    """Parse an optional query-string date, falling back to ``default``."""
    if not value:
        return default
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_utc() -> datetime:
    """Current UTC time to the second, zone-aware.

    Every timestamp the API reports uses this convention, matching the
    store's CURRENT_TIMESTAMP (UTC).
    """
    return datetime.now(timezone.utc).replace(microsecond=0)


def week_start(day: date) -> date:
    """Sunday on or before ``day``."""
    # date.weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % DAYS_PER_WEEK)


def week_dates(start: date) -> list[date]:
    return [start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
