from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, ok
from ..container import Container
from .model import AppSettings


def _settings_dict(settings: AppSettings) -> dict:
    return {
        "holiday_pay_multiplier": str(settings.effective_multiplier),
        "public_holidays": [
            {"date": h.holiday_date.isoformat(), "name": h.name}
            for h in sorted(settings.public_holidays, key=lambda h: h.holiday_date)
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    def settings_get():
        return ok(_settings_dict(container.settings_service.get()))

    @app.route("/api/settings/holiday-multiplier", methods=["PUT"], endpoint="settings_multiplier")
    def settings_multiplier():
        settings = container.settings_service.update_multiplier(json_body().get("multiplier"))
        return ok(_settings_dict(settings))

    @app.route("/api/settings/holidays", methods=["POST"], endpoint="settings_holiday_add")
    def settings_holiday_add():
        body = json_body()
        settings = container.settings_service.add_holiday(
            parse_iso_date(str(body.get("date") or "")),
            str(body.get("name") or ""),
        )
        return ok(_settings_dict(settings), 201)

    @app.route("/api/settings/holidays/<holiday_date>", methods=["DELETE"], endpoint="settings_holiday_delete")
    def settings_holiday_delete(holiday_date: str):
        settings = container.settings_service.remove_holiday(parse_iso_date(holiday_date))
        return ok(_settings_dict(settings))
