from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from sqlalchemy import inspect, text

from .connection import DatabaseConnection
from .sql_base import db_transaction

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

DEMO_EMPLOYEES: tuple[str, ...] = ("Asha", "Bhavna", "Chetan", "Deepa")


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False

    for ch in sql:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = Path(schema_path).read_text(encoding="utf-8")
    with db_transaction(conn_factory) as conn:
        for stmt in _iter_sql_statements(sql):
            conn.exec_driver_sql(stmt)


def ensure_demo_employees(conn_factory: DatabaseConnection, *, names: Sequence[str] = DEMO_EMPLOYEES) -> int:
    """Insert demo employees when the directory is empty. Returns rows added."""

    with db_transaction(conn_factory) as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM employees")).scalar_one()
        if count:
            return 0
        for name in names:
            conn.execute(text("INSERT INTO employees (name) VALUES (:name)"), {"name": name})
        return len(names)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn_factory.engine).get_table_names())
