from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import minutes_of_day, parse_hhmm
from ..common.money import round2, to_decimal
from ..core.constants import OT_MULTIPLIER
from ..core.enums import SalaryType
from ..employees.model import Employee
from .calculator.factory import calculator_for


def derive_overtime_hours(salary_type: SalaryType | str, end_time: Optional[str]) -> Decimal:
    """Overtime hours implied by a checkout time.

    Only the time of day is compared against the salary model's threshold
    (17:00 Daily, 19:00 Monthly). A checkout at or before the threshold,
    including one that is really after midnight, yields no overtime.
    """
    out = parse_hhmm(end_time)
    if out is None:
        return round2(0)

    threshold = parse_hhmm(calculator_for(salary_type).overtime_threshold)
    diff_minutes = minutes_of_day(out) - minutes_of_day(threshold)
    if diff_minutes <= 0:
        return round2(0)
    return round2(Decimal(diff_minutes) / 60)


def compute_overtime_pay(employee: Employee, ot_hours: Any) -> Decimal:
    """hourly rate x 1.5 x hours, where the hourly rate depends on the salary model."""
    hours = to_decimal(ot_hours)
    if hours <= 0:
        return round2(0)

    rate = calculator_for(employee.salary_type).hourly_rate(to_decimal(employee.basic_salary))
    return round2(rate * OT_MULTIPLIER * hours)
