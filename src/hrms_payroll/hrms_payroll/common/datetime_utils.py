from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid month: {value!r}") from exc


def format_month(day: date) -> str:
    return day.strftime("%Y-%m")


def parse_hhmm(value: Optional[str]) -> Optional[time]:
    """Parse an "HH:MM" time-of-day; blank values mean "not entered"."""
    if not value or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError as exc:
        raise ValidationError(f"Invalid time: {value!r}") from exc


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def add_months(day: date, months: int) -> date:
    """First day of the month `months` after the month of `day`."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def iter_months(start: date, end: date) -> Iterator[date]:
    """Yield the first day of each month from start to end, inclusive."""
    current = start.replace(day=1)
    last = end.replace(day=1)
    while current <= last:
        yield current
        current = add_months(current, 1)


def format_time_12h(value: Optional[str]) -> str:
    """Format "HH:MM" as "h:MM AM/PM"; anything unparseable is returned as-is."""
    if not value:
        return ""
    parts = value.split(":")
    if len(parts) < 2:
        return value
    try:
        hours = int(parts[0])
    except ValueError:
        return value
    suffix = "PM" if hours >= 12 else "AM"
    hours = hours % 12 or 12
    return f"{hours}:{parts[1]} {suffix}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the calendar month containing `day`."""
    first = day.replace(day=1)
    return first, add_months(first, 1) - timedelta(days=1)
