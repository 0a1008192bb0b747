from __future__ import annotations

from datetime import date
from decimal import Decimal

from ...core.constants import DAILY_OT_THRESHOLD, HOURS_PER_DAY
from ...core.enums import SalaryType
from .base import SalaryModelCalculator


class DailySalaryCalculator(SalaryModelCalculator):
    """basic_salary is the rate for one day of 8 hours."""

    salary_type = SalaryType.DAILY

    @property
    def overtime_threshold(self) -> str:
        return DAILY_OT_THRESHOLD

    def hourly_rate(self, basic_salary: Decimal) -> Decimal:
        return basic_salary / HOURS_PER_DAY

    def daily_rate(self, basic_salary: Decimal, day: date) -> Decimal:
        return basic_salary
