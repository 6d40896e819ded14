from __future__ import annotations

import atexit
import importlib
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_RATE_PER_KG
from .daily_work.controller import register as register_daily_work
from .database.bootstrap import apply_schema, ensure_demo_employees, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll

SETTING_NAMES = (
    "SECRET_KEY",
    "DATABASE_URL",
    "DEBUG",
    "TESTING",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
    "RATE_PER_KG",
    "CURRENCY_SYMBOL",
)


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> tuple[str, dict[str, Any]]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    values = {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}
    values.update(overrides or {})
    return settings_module, values


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module, settings = _load_settings(overrides)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["DATABASE_URL"] = str(settings["DATABASE_URL"])
    app.config["RATE_PER_KG"] = float(settings.get("RATE_PER_KG", DEFAULT_RATE_PER_KG))
    app.config["CURRENCY_SYMBOL"] = str(settings.get("CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL))

    if app.config["DEBUG"]:
        app.logger.info("[raisin-tracker] settings=%s db=%s", settings_module, app.config["DATABASE_URL"])

    container = build_container(
        database_url=app.config["DATABASE_URL"],
        rate_per_kg=app.config["RATE_PER_KG"],
    )
    app.extensions["raisin_tracker"] = container
    atexit.register(container.close)

    if settings.get("AUTO_INIT_DB", False):
        apply_schema(container.conn)
        app.logger.info("[raisin-tracker] schema ready (tables=%d)", len(list_tables(container.conn)))
    if settings.get("AUTO_SEED_DB", False):
        added = ensure_demo_employees(container.conn)
        app.logger.info("[raisin-tracker] demo seed ready (employees added=%d)", added)

    register_employees(app, container)
    register_daily_work(app, container)
    register_payroll(app, container)

    return app
