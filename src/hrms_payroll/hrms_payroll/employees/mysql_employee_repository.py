from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus, SalaryType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        salary_type=SalaryType(r["salary_type"]),
        basic_salary=as_decimal(r["basic_salary"]),
        status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, salary_type, basic_salary, status
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, salary_type, basic_salary, status
                FROM employees
                WHERE status <> 'Cancelled'
                ORDER BY name ASC
                """
            )
            return [_row_to_employee(r) for r in fetchall(cur)]
