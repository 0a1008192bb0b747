from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from ..settings.model import AppSettings

SUNDAY = 6


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def working_days_in_month(day: date) -> int:
    """Number of non-Sunday days in the calendar month containing `day`."""
    _, last = calendar.monthrange(day.year, day.month)
    return sum(1 for d in range(1, last + 1) if not is_sunday(day.replace(day=d)))


def is_premium_day(day: date, settings: Optional[AppSettings]) -> bool:
    """Sundays and configured public holidays earn the holiday multiplier."""
    if is_sunday(day):
        return True
    return settings is not None and day in settings.holiday_dates
