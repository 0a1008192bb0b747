from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ..core.enums import EmployeeStatus, SalaryType


@dataclass(frozen=True)
class Employee:
    """Domain entity: the payroll-relevant subset of an employee.

    basic_salary is a daily rate for Daily employees and a monthly total for
    Monthly employees.
    """

    employee_id: str
    name: str
    salary_type: SalaryType
    basic_salary: Decimal
    status: EmployeeStatus = field(default=EmployeeStatus.ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
