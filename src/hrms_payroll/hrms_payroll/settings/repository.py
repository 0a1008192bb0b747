from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol

from .model import AppSettings, Holiday


class SettingsRepository(Protocol):
    def get(self) -> AppSettings:
        """Current settings; an empty AppSettings when nothing is stored."""

        raise NotImplementedError

    def save_multiplier(self, multiplier: Decimal) -> None:
        raise NotImplementedError

    def add_holiday(self, holiday: Holiday) -> None:
        raise NotImplementedError

    def delete_holiday(self, holiday_date: date) -> bool:
        raise NotImplementedError
