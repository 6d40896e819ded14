from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine


@dataclass
class DBConfig:
    url: str
    echo: bool = False


def _enable_sqlite_foreign_keys(dbapi_conn, _record) -> None:
    # SQLite leaves FOREIGN KEY enforcement off unless asked, per connection.
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON")
    finally:
        cur.close()


class DatabaseConnection:
    """Store handle owned by the application.

    Built once in the app factory and handed to every repository; released
    with ``close()`` (or by leaving a ``with`` block) at shutdown.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine: Optional[Engine] = create_engine(config.url, echo=config.echo)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database connection already closed")
        return self._engine

    def connect(self) -> Connection:
        return self.engine.connect()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "DatabaseConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
