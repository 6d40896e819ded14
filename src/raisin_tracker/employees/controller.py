from __future__ import annotations

from flask import Flask, jsonify
from pydantic import ValidationError as SchemaError

from ..common.http import error_response, iso, json_body, schema_fields
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Employee
from .schemas import EmployeeCreateIn


def employee_json(e: Employee) -> dict:
    return {"id": e.employee_id, "name": e.name, "created_at": iso(e.created_at)}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
            return jsonify([employee_json(e) for e in employees])
        except Exception:
            app.logger.exception("Error fetching employees")
            return error_response("Failed to fetch employees", 500)

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            payload = EmployeeCreateIn.model_validate(json_body())
            employee = container.employee_service.add_employee(payload.name)
            return jsonify(employee_json(employee))
        except SchemaError as e:
            return error_response("Name is required", 400, fields=schema_fields(e))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("Error creating employee")
            return error_response("Failed to create employee", 500)
