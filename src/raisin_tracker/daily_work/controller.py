from __future__ import annotations

from flask import Flask, jsonify, request
from pydantic import ValidationError as SchemaError

from ..common.datetime_utils import now_local, parse_date_arg
from ..common.http import error_response, iso, json_body, schema_fields
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import DailyWorkEntry
from .schemas import DailyWorkCreateIn, DailyWorkDeleteIn, DailyWorkUpdateIn


def entry_json(e: DailyWorkEntry) -> dict:
    return {
        "id": e.entry_id,
        "employee_id": e.employee_id,
        "employee_name": e.employee_name,
        "date": iso(e.work_date),
        "kgs_cleaned": e.kgs_cleaned,
        "earnings": e.earnings,
        "created_at": iso(e.created_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.daily_work_service

    @app.route("/api/daily-work", methods=["GET"], endpoint="list_daily_work")
    def list_daily_work():
        try:
            work_date = parse_date_arg(request.args.get("date"), field_name="date", default=now_local().date())
            entries = service.list_for_date(work_date)
            return jsonify([entry_json(e) for e in entries])
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("Error fetching daily work")
            return error_response("Failed to fetch daily work", 500)

    @app.route("/api/daily-work", methods=["POST"], endpoint="create_daily_work")
    def create_daily_work():
        try:
            payload = DailyWorkCreateIn.model_validate(json_body())
            entry = service.create_entry(
                employee_id=payload.employee_id,
                work_date=payload.work_date,
                kgs_cleaned=payload.kgs_cleaned,
                earnings=payload.earnings,
            )
            return jsonify(entry_json(entry))
        except SchemaError as e:
            return error_response("All fields are required", 400, fields=schema_fields(e))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            # Includes the store's UNIQUE(employee_id, date) violation.
            app.logger.exception("Error creating daily work entry")
            return error_response("Failed to create daily work entry", 500)

    @app.route("/api/daily-work", methods=["PUT"], endpoint="update_daily_work")
    def update_daily_work():
        try:
            payload = DailyWorkUpdateIn.model_validate(json_body())
            updated = service.update_entry(
                entry_id=payload.entry_id,
                kgs_cleaned=payload.kgs_cleaned,
                earnings=payload.earnings,
            )
            return jsonify(
                {
                    "id": updated.entry_id,
                    "kgs_cleaned": updated.kgs_cleaned,
                    "earnings": updated.earnings,
                    "updated_at": iso(updated.updated_at),
                }
            )
        except SchemaError as e:
            return error_response("All fields are required", 400, fields=schema_fields(e))
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            app.logger.exception("Error updating daily work entry")
            return error_response("Failed to update daily work entry", 500)

    @app.route("/api/daily-work", methods=["DELETE"], endpoint="delete_daily_work")
    def delete_daily_work():
        try:
            payload = DailyWorkDeleteIn.model_validate(json_body())
            deleted = service.delete_entry(entry_id=payload.entry_id)
            return jsonify({"id": deleted.entry_id, "deleted_at": iso(deleted.deleted_at)})
        except SchemaError as e:
            return error_response("ID is required", 400, fields=schema_fields(e))
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            app.logger.exception("Error deleting daily work entry")
            return error_response("Failed to delete daily work entry", 500)
