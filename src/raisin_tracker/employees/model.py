from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee doing piecework.

    Plain data object; no database access here.
    """

    employee_id: int
    name: str
    created_at: Optional[datetime] = None
