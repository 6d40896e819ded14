from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from raisin_tracker.config import get_settings_module
from raisin_tracker.database.bootstrap import apply_schema, ensure_demo_employees
from raisin_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    database_url = str(settings.DATABASE_URL)

    with DatabaseConnection(DBConfig(url=database_url)) as conn:
        apply_schema(conn)
        added = ensure_demo_employees(conn)

    print(f"OK: Seeded database -> {database_url} (employees added={added})")


if __name__ == "__main__":
    main()
