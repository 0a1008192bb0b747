from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar date.

    status and work_day are derived by the day status resolver from
    start_time / end_time / remarks and are never edited directly.
    """

    employee_id: str
    work_date: date
    start_time: str = ""
    end_time: str = ""
    ot_hours: Decimal = Decimal("0")
    lunch_hours: int = 0
    work_day: Decimal = Decimal("0")
    remarks: str = ""
    status: AttendanceStatus = AttendanceStatus.ABSENT
    site_location: str = ""
    calculated_daily_pay: Decimal = Decimal("0")

    @property
    def record_id(self) -> str:
        return f"{self.work_date.isoformat()}-{self.employee_id}"

    @classmethod
    def blank(cls, employee_id: str, work_date: date) -> "AttendanceRecord":
        """Default record for a day touched for the first time."""
        return cls(employee_id=employee_id, work_date=work_date)

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "ot_hours": str(self.ot_hours),
            "lunch_hours": self.lunch_hours,
            "work_day": str(self.work_day),
            "remarks": self.remarks,
            "status": self.status.value,
            "site_location": self.site_location,
            "calculated_daily_pay": str(self.calculated_daily_pay),
        }
