from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_time_12h


@dataclass(frozen=True)
class PayrollAdjustments:
    """Manual, month-scoped allowances (transport, other) and deductions (housing, advance)."""

    employee_id: str
    month: str
    transport: Decimal = Decimal("0")
    other: Decimal = Decimal("0")
    housing: Decimal = Decimal("0")
    advance: Decimal = Decimal("0")
    attached_image: Optional[str] = None

    @property
    def adjustment_id(self) -> str:
        return f"{self.employee_id}-{self.month}"

    @classmethod
    def empty(cls, employee_id: str, month: str) -> "PayrollAdjustments":
        return cls(employee_id=employee_id, month=month)

    def to_dict(self) -> dict:
        return {
            "id": self.adjustment_id,
            "employee_id": self.employee_id,
            "month": self.month,
            "transport": str(self.transport),
            "other": str(self.other),
            "housing": str(self.housing),
            "advance": str(self.advance),
            "has_attached_image": bool(self.attached_image),
        }


@dataclass(frozen=True)
class PayrollHistoryLog:
    """Audit entry written whenever a month's adjustments change."""

    log_id: str
    adjustment_id: str
    timestamp: datetime
    admin_name: str
    changes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.log_id,
            "adjustment_id": self.adjustment_id,
            "timestamp": self.timestamp.isoformat(),
            "admin_name": self.admin_name,
            "changes": list(self.changes),
        }


@dataclass(frozen=True)
class PayrollRecord:
    """Computed payroll for one (employee, month); always re-derivable from its inputs."""

    employee_id: str
    month: str
    total_days_worked: Decimal
    total_ot_hours: Decimal
    total_lunch_hours: int
    mc_days: int
    off_days: int
    basic_pay_total: Decimal
    holiday_pay_total: Decimal
    total_holiday_days: Decimal
    ot_pay_total: Decimal
    lunch_allowance_total: Decimal
    transport_allowance: Decimal
    other_allowances: Decimal
    housing_deduction: Decimal
    advance_deduction: Decimal
    deductions: Decimal
    net_salary: Decimal

    def to_dict(self) -> dict:
        out: dict = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            out[name] = str(value) if isinstance(value, Decimal) else value
        return out


@dataclass(frozen=True)
class PayslipDay:
    day: date
    day_name: str
    record: Optional[AttendanceRecord] = None


@dataclass(frozen=True)
class MonthlyPayslip:
    month: str
    payroll: PayrollRecord
    daily_rate: Decimal
    days: tuple[PayslipDay, ...] = field(default=())
    attached_image: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "payroll": self.payroll.to_dict(),
            "daily_rate": str(self.daily_rate),
            "days": [
                {
                    "date": d.day.isoformat(),
                    "day_name": d.day_name,
                    "record": d.record.to_dict() if d.record else None,
                    "start_time_12h": format_time_12h(d.record.start_time) if d.record else "",
                    "end_time_12h": format_time_12h(d.record.end_time) if d.record else "",
                }
                for d in self.days
            ],
            "has_attached_image": bool(self.attached_image),
        }
