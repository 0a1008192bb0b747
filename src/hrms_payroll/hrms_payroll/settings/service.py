from __future__ import annotations

import logging
from datetime import date
from typing import Any

from ..common.validators import require_non_empty, require_positive
from ..core.exceptions import NotFoundError
from .model import AppSettings, Holiday
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> AppSettings:
        return self._settings.get()

    def update_multiplier(self, value: Any) -> AppSettings:
        multiplier = require_positive(value, "Holiday pay multiplier")
        self._settings.save_multiplier(multiplier)
        logger.info("holiday pay multiplier set to %s", multiplier)
        return self._settings.get()

    def add_holiday(self, holiday_date: date, name: str) -> AppSettings:
        holiday = Holiday(holiday_date=holiday_date, name=require_non_empty(name, "Holiday name"))
        self._settings.add_holiday(holiday)
        logger.info("public holiday %s (%s) added", holiday.holiday_date, holiday.name)
        return self._settings.get()

    def remove_holiday(self, holiday_date: date) -> AppSettings:
        if not self._settings.delete_holiday(holiday_date):
            raise NotFoundError(f"No public holiday on {holiday_date.isoformat()}")
        logger.info("public holiday %s removed", holiday_date)
        return self._settings.get()
