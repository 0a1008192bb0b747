from __future__ import annotations

from datetime import date
from decimal import Decimal

from ...core.constants import HOURS_PER_DAY, MONTHLY_OT_THRESHOLD, WORKING_DAYS_PER_MONTH
from ...core.enums import SalaryType
from ..calendar import working_days_in_month
from .base import SalaryModelCalculator


class MonthlySalaryCalculator(SalaryModelCalculator):
    """basic_salary is a monthly total.

    Overtime uses a fixed 26-day, 8-hour month while the daily rate divides by
    the real number of non-Sunday days in the month being paid.
    """

    salary_type = SalaryType.MONTHLY

    @property
    def overtime_threshold(self) -> str:
        return MONTHLY_OT_THRESHOLD

    def hourly_rate(self, basic_salary: Decimal) -> Decimal:
        return basic_salary / (WORKING_DAYS_PER_MONTH * HOURS_PER_DAY)

    def daily_rate(self, basic_salary: Decimal, day: date) -> Decimal:
        working_days = working_days_in_month(day)
        if working_days <= 0:
            return Decimal("0")
        return basic_salary / working_days
