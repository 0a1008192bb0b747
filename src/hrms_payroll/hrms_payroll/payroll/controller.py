from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok, require_arg
from ..container import Container
from .model import PayrollAdjustments


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="payroll_monthly_report")
    def payroll_monthly_report(month: str):
        report = container.payroll_service.monthly_report(month)
        return ok(report.to_dict())

    @app.route("/api/payroll/<month>/<employee_id>", methods=["GET"], endpoint="payroll_for_employee")
    def payroll_for_employee(month: str, employee_id: str):
        record = container.payroll_service.payroll_for(employee_id, month)
        return ok(record.to_dict())

    @app.route("/api/payroll/<month>/<employee_id>/adjustments", methods=["GET"], endpoint="payroll_adjustments")
    def payroll_adjustments(month: str, employee_id: str):
        details = container.payroll_service.adjustment_details(employee_id, month)
        return ok(details.to_dict())

    @app.route("/api/payroll/<month>/<employee_id>/adjustments", methods=["PUT"], endpoint="payroll_adjustments_save")
    def payroll_adjustments_save(month: str, employee_id: str):
        body = json_body()
        current = container.payroll_service.adjustment_details(employee_id, month).adjustments
        # Fields left out of the body keep their stored value.
        adjustments = PayrollAdjustments(
            employee_id=employee_id,
            month=current.month,
            transport=body.get("transport", current.transport),
            other=body.get("other", current.other),
            housing=body.get("housing", current.housing),
            advance=body.get("advance", current.advance),
            attached_image=body.get("attached_image", current.attached_image),
        )
        log = container.payroll_service.save_adjustments(adjustments, admin_name=str(body.get("admin_name") or ""))
        return ok({"history": log.to_dict() if log else None})

    @app.route("/api/payslips/<employee_id>", methods=["GET"], endpoint="payslip_range")
    def payslip_range(employee_id: str):
        payslips = container.payroll_service.payslip_range(employee_id, require_arg("start"), require_arg("end"))
        return ok([p.to_dict() for p in payslips])
