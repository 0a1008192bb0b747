from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, ok, require_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/daily", methods=["GET"], endpoint="attendance_daily")
    def attendance_daily():
        """Attendance sheet for one day; blank records are created for untouched employees."""
        work_date = parse_iso_date(require_arg("date"))
        sheet = container.attendance_service.get_daily(work_date)
        return ok(sheet.to_dict())

    @app.route("/api/attendance/<employee_id>/<work_date>", methods=["PATCH"], endpoint="attendance_update")
    def attendance_update(employee_id: str, work_date: str):
        body = json_body()
        record = container.attendance_service.update_field(
            employee_id,
            parse_iso_date(work_date),
            str(body.get("field") or ""),
            body.get("value"),
        )
        return ok(record.to_dict())

    @app.route("/api/attendance/<employee_id>/<work_date>/pay-preview", methods=["GET"], endpoint="attendance_pay_preview")
    def attendance_pay_preview(employee_id: str, work_date: str):
        pay = container.attendance_service.preview_daily_pay(
            employee_id,
            parse_iso_date(work_date),
            ot_hours=request.args.get("ot_hours"),
            work_day=request.args.get("work_day"),
        )
        return ok({"employee_id": employee_id, "date": work_date, "daily_pay": str(pay)})
