from __future__ import annotations

from ...core.enums import SalaryType
from ...core.exceptions import ValidationError
from .base import SalaryModelCalculator
from .daily_calculator import DailySalaryCalculator
from .monthly_calculator import MonthlySalaryCalculator

_CALCULATORS: dict[SalaryType, SalaryModelCalculator] = {
    SalaryType.DAILY: DailySalaryCalculator(),
    SalaryType.MONTHLY: MonthlySalaryCalculator(),
}


def calculator_for(salary_type: SalaryType | str) -> SalaryModelCalculator:
    """Factory Pattern: pick the salary-model rules for an employee."""
    try:
        return _CALCULATORS[SalaryType(salary_type)]
    except ValueError as exc:
        raise ValidationError(f"Unknown salary type: {salary_type!r}") from exc
