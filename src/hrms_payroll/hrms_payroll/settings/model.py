from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import to_decimal
from ..core.constants import DEFAULT_HOLIDAY_PAY_MULTIPLIER


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str


@dataclass(frozen=True)
class AppSettings:
    """Process-wide payroll configuration.

    Payroll is always recomputed from the current settings, so editing the
    multiplier or the holiday list changes any month that is recomputed.
    """

    holiday_pay_multiplier: Optional[Decimal] = None
    public_holidays: tuple[Holiday, ...] = ()

    @property
    def effective_multiplier(self) -> Decimal:
        # Unset or zero falls back to the default rate.
        multiplier = to_decimal(self.holiday_pay_multiplier)
        return multiplier if multiplier else DEFAULT_HOLIDAY_PAY_MULTIPLIER

    @property
    def holiday_dates(self) -> frozenset[date]:
        return frozenset(h.holiday_date for h in self.public_holidays or ())

    def holiday_on(self, day: date) -> Optional[Holiday]:
        for h in self.public_holidays or ():
            if h.holiday_date == day:
                return h
        return None
