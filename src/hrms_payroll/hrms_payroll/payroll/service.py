from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_month, iter_months, month_bounds, now_local, parse_month
from ..common.money import format_money, round2
from ..common.validators import require_non_negative
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..settings.model import AppSettings
from ..settings.repository import SettingsRepository
from .aggregator import compute_monthly_payroll
from .daily_pay import daily_rate_for
from .model import MonthlyPayslip, PayrollAdjustments, PayrollHistoryLog, PayrollRecord, PayslipDay
from .repository import AdjustmentRepository

logger = logging.getLogger(__name__)

_ADJUSTMENT_LABELS = (
    ("transport", "Transport"),
    ("other", "Other Allowances"),
    ("housing", "Housing Deduction"),
    ("advance", "Salary Advance"),
)


def describe_adjustment_changes(old: PayrollAdjustments, new: PayrollAdjustments) -> list[str]:
    """Human-readable audit lines for every field that differs."""
    changes: list[str] = []
    for field, label in _ADJUSTMENT_LABELS:
        before = round2(getattr(old, field))
        after = round2(getattr(new, field))
        if before != after:
            changes.append(f"{label}: {format_money(before)} → {format_money(after)}")

    if not old.attached_image and new.attached_image:
        changes.append("Added Time Card Image")
    elif old.attached_image and not new.attached_image:
        changes.append("Removed Time Card Image")
    elif old.attached_image != new.attached_image:
        changes.append("Updated Time Card Image")
    return changes


@dataclass(frozen=True)
class MonthlyReport:
    month: str
    employees: list[Employee]
    records: list[PayrollRecord]

    def to_dict(self) -> dict:
        names = {e.employee_id: e.name for e in self.employees}
        return {
            "month": self.month,
            "records": [dict(r.to_dict(), name=names.get(r.employee_id, "")) for r in self.records],
        }


@dataclass(frozen=True)
class AdjustmentDetails:
    employee: Employee
    adjustments: PayrollAdjustments
    history: list[PayrollHistoryLog]

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee.employee_id,
            "name": self.employee.name,
            "adjustments": self.adjustments.to_dict(),
            "history": [h.to_dict() for h in self.history],
        }


class PayrollService:
    """Monthly payroll, always recomputed from stored attendance, adjustments and current settings."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        adjustments: AdjustmentRepository,
        settings: SettingsRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._employees = employees
        self._attendance = attendance
        self._adjustments = adjustments
        self._settings = settings
        self._clock = clock
        self._id_factory = id_factory

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _adjustments_for(self, employee_id: str, month: str) -> PayrollAdjustments:
        return self._adjustments.get(employee_id, month) or PayrollAdjustments.empty(employee_id, month)

    def _payroll(self, employee: Employee, month: str, settings: AppSettings) -> PayrollRecord:
        start, end = month_bounds(parse_month(month))
        records = self._attendance.list_for_range(start_date=start, end_date=end, employee_id=employee.employee_id)
        adjustments = self._adjustments_for(employee.employee_id, month)
        return compute_monthly_payroll(employee, month, records, adjustments, settings)

    def monthly_report(self, month: str) -> MonthlyReport:
        """Payroll of every active employee for one month."""
        month_start = parse_month(month)
        month = format_month(month_start)
        start, end = month_bounds(month_start)

        employees = list(self._employees.list_active())
        settings = self._settings.get()
        records = self._attendance.list_for_range(start_date=start, end_date=end)
        adjustments = {a.employee_id: a for a in self._adjustments.list_for_month(month)}

        payroll = [
            compute_monthly_payroll(e, month, records, adjustments.get(e.employee_id), settings)
            for e in employees
        ]
        logger.info("computed payroll for %d employees in %s", len(payroll), month)
        return MonthlyReport(month=month, employees=employees, records=payroll)

    def payroll_for(self, employee_id: str, month: str) -> PayrollRecord:
        month = format_month(parse_month(month))
        return self._payroll(self._get_employee(employee_id), month, self._settings.get())

    def adjustment_details(self, employee_id: str, month: str) -> AdjustmentDetails:
        month = format_month(parse_month(month))
        employee = self._get_employee(employee_id)
        adjustments = self._adjustments_for(employee_id, month)
        history = list(self._adjustments.history_for(adjustments.adjustment_id))
        return AdjustmentDetails(employee=employee, adjustments=adjustments, history=history)

    def save_adjustments(
        self,
        adjustments: PayrollAdjustments,
        *,
        admin_name: str,
        now: Optional[datetime] = None,
    ) -> Optional[PayrollHistoryLog]:
        """Store a month's adjustments and log what changed.

        Returns the history entry, or None when nothing differed from the
        stored values (the adjustments are still saved).
        """
        self._get_employee(adjustments.employee_id)
        adjustments = replace(
            adjustments,
            month=format_month(parse_month(adjustments.month)),
            transport=require_non_negative(adjustments.transport, "Transport"),
            other=require_non_negative(adjustments.other, "Other allowances"),
            housing=require_non_negative(adjustments.housing, "Housing deduction"),
            advance=require_non_negative(adjustments.advance, "Salary advance"),
        )

        previous = self._adjustments_for(adjustments.employee_id, adjustments.month)
        changes = describe_adjustment_changes(previous, adjustments)
        if not changes:
            self._adjustments.save(adjustments)
            return None

        log = PayrollHistoryLog(
            log_id=self._id_factory(),
            adjustment_id=adjustments.adjustment_id,
            timestamp=now or self._clock(),
            admin_name=(admin_name or "").strip() or "Unknown Admin",
            changes=tuple(changes),
        )
        self._adjustments.save(adjustments, log)
        logger.info("adjustments %s updated by %s: %s", log.adjustment_id, log.admin_name, "; ".join(changes))
        return log

    def payslip_range(self, employee_id: str, start_month: str, end_month: str) -> list[MonthlyPayslip]:
        """One payslip per month from start_month to end_month inclusive."""
        employee = self._get_employee(employee_id)
        start = parse_month(start_month)
        end = parse_month(end_month)
        if start > end:
            return []

        settings = self._settings.get()
        payslips: list[MonthlyPayslip] = []
        for month_start in iter_months(start, end):
            month = format_month(month_start)
            first, last = month_bounds(month_start)
            records = self._attendance.list_for_range(start_date=first, end_date=last, employee_id=employee_id)
            adjustments = self._adjustments_for(employee_id, month)
            by_date = {r.work_date: r for r in records if r.employee_id == employee_id}

            days = []
            for offset in range((last - first).days + 1):
                day = first + timedelta(days=offset)
                days.append(PayslipDay(day=day, day_name=day.strftime("%A"), record=by_date.get(day)))

            payslips.append(
                MonthlyPayslip(
                    month=month,
                    payroll=compute_monthly_payroll(employee, month, records, adjustments, settings),
                    daily_rate=round2(daily_rate_for(employee, month_start)),
                    days=tuple(days),
                    attached_image=adjustments.attached_image,
                )
            )
        return payslips
