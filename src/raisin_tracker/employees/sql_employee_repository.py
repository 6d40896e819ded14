from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import text

from ..database.connection import DatabaseConnection
from ..database.sql_base import db_transaction, fetchall, fetchone, normalize_sql_timestamp
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["id"]),
        name=row["name"],
        created_at=normalize_sql_timestamp(row.get("created_at")),
    )


class SQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(text("SELECT id, name, created_at FROM employees ORDER BY name"))
            return [_to_employee(r) for r in fetchall(result)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(
                text("SELECT id, name, created_at FROM employees WHERE id=:id"),
                {"id": int(employee_id)},
            )
            row = fetchone(result)
            return _to_employee(row) if row else None

    def create(self, *, name: str) -> int:
        with db_transaction(self._conn_factory) as conn:
            result = conn.execute(text("INSERT INTO employees (name) VALUES (:name)"), {"name": name})
            return int(result.lastrowid)

    def count(self) -> int:
        with db_transaction(self._conn_factory) as conn:
            return int(conn.execute(text("SELECT COUNT(*) FROM employees")).scalar_one())
