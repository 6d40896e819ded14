from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from flask import jsonify, request
from pydantic import ValidationError as SchemaError


def json_body() -> dict:
    """Request JSON as a dict; anything else (missing, malformed, a list) is empty."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def error_response(message: str, status: int, *, fields: Optional[dict] = None):
    body: dict[str, Any] = {"error": message}
    if fields:
        body["fields"] = fields
    return jsonify(body), status


def schema_fields(exc: SchemaError) -> dict[str, str]:
    """Flatten pydantic errors into {field: message}, first message per field."""
    out: dict[str, str] = {}
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "body"
        out.setdefault(field, err.get("msg", "Invalid value"))
    return out


def iso(value: Optional[date | datetime]) -> Optional[str]:
    return value.isoformat() if value else None
