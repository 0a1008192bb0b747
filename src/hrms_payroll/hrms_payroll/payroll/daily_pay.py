from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.money import round2, to_decimal
from ..employees.model import Employee
from ..settings.model import AppSettings
from .calculator.factory import calculator_for
from .calendar import is_premium_day
from .overtime import compute_overtime_pay


def daily_rate_for(employee: Employee, day: date) -> Decimal:
    """Unrounded daily rate for the month containing `day`."""
    return calculator_for(employee.salary_type).daily_rate(to_decimal(employee.basic_salary), day)


def compute_daily_pay(
    employee: Employee,
    ot_hours: Any,
    work_day: Any,
    day: date,
    settings: Optional[AppSettings] = None,
) -> Decimal:
    """One day's pay (base + overtime) for immediate feedback on the attendance sheet."""
    settings = settings or AppSettings()

    multiplier = settings.effective_multiplier if is_premium_day(day, settings) else Decimal("1")
    base_pay = daily_rate_for(employee, day) * to_decimal(work_day) * multiplier
    return round2(base_pay + compute_overtime_pay(employee, ot_hours))
