from __future__ import annotations

from datetime import date
from decimal import Decimal

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, fetchone
from .model import AppSettings, Holiday
from .repository import SettingsRepository

_SETTINGS_ROW = 1


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> AppSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_pay_multiplier FROM app_settings WHERE setting_id=%s",
                (_SETTINGS_ROW,),
            )
            r = fetchone(cur)
            cur.execute("SELECT holiday_date, name FROM public_holidays ORDER BY holiday_date ASC")
            holidays = tuple(Holiday(holiday_date=as_date(h["holiday_date"]), name=h["name"]) for h in fetchall(cur))

        multiplier = r.get("holiday_pay_multiplier") if r else None
        return AppSettings(
            holiday_pay_multiplier=Decimal(str(multiplier)) if multiplier is not None else None,
            public_holidays=holidays,
        )

    def save_multiplier(self, multiplier: Decimal) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_settings(setting_id, holiday_pay_multiplier) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE holiday_pay_multiplier=VALUES(holiday_pay_multiplier)
                """,
                (_SETTINGS_ROW, multiplier),
            )

    def add_holiday(self, holiday: Holiday) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO public_holidays(holiday_date, name) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name)
                """,
                (holiday.holiday_date, holiday.name),
            )

    def delete_holiday(self, holiday_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM public_holidays WHERE holiday_date=%s", (holiday_date,))
            return cur.rowcount > 0
