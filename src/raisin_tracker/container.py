from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_RATE_PER_KG
from .daily_work.service import DailyWorkService
from .daily_work.sql_daily_work_repository import SQLDailyWorkRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.sql_employee_repository import SQLEmployeeRepository
from .payroll.calculator.fixed_rate_calculator import FixedRateCalculator
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: SQLEmployeeRepository
    daily_work_repo: SQLDailyWorkRepository

    employee_service: EmployeeService
    daily_work_service: DailyWorkService
    payroll_report_service: PayrollReportService

    def close(self) -> None:
        self.conn.close()


def build_container(*, database_url: str, rate_per_kg: float = DEFAULT_RATE_PER_KG, echo: bool = False) -> Container:
    conn = DatabaseConnection(DBConfig(url=database_url, echo=echo))

    employees_repo = SQLEmployeeRepository(conn)
    daily_work_repo = SQLDailyWorkRepository(conn)

    employee_service = EmployeeService(employees_repo)
    daily_work_service = DailyWorkService(
        daily_work_repo,
        employees_repo,
        calculator=FixedRateCalculator(rate_per_kg),
    )
    payroll_report_service = PayrollReportService(daily_work_repo, employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        daily_work_repo=daily_work_repo,
        employee_service=employee_service,
        daily_work_service=daily_work_service,
        payroll_report_service=payroll_report_service,
    )
