from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import DomainError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: employee directory (list, add)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(self, name: str) -> Employee:
        # Duplicate names are allowed: two workers may share a name.
        name = require_non_empty(name, "Name")
        employee_id = self._employees.create(name=name)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise DomainError(f"Employee {employee_id} vanished after insert")
        return employee
