from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from ...core.enums import SalaryType


class SalaryModelCalculator(ABC):
    """Salary-model rules (Strategy Pattern for payroll).

    Each salary model fixes its own overtime threshold, hourly rate used for
    overtime, and daily rate used for base and holiday pay.
    """

    salary_type: SalaryType

    @property
    @abstractmethod
    def overtime_threshold(self) -> str:
        """Time of day ("HH:MM") after which checkout counts as overtime."""
        raise NotImplementedError

    @abstractmethod
    def hourly_rate(self, basic_salary: Decimal) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def daily_rate(self, basic_salary: Decimal, day: date) -> Decimal:
        raise NotImplementedError
