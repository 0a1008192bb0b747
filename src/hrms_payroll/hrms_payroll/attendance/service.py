from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.calendar import is_sunday
from ..payroll.daily_pay import compute_daily_pay
from ..settings.model import AppSettings, Holiday
from ..settings.repository import SettingsRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .resolver import apply_edit, ensure_consistent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailySheet:
    work_date: date
    employees: list[Employee]
    records: list[AttendanceRecord]
    holiday: Optional[Holiday] = None
    is_sunday: bool = False

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "is_sunday": self.is_sunday,
            "holiday": {"date": self.holiday.holiday_date.isoformat(), "name": self.holiday.name} if self.holiday else None,
            "employees": [
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "salary_type": e.salary_type.value,
                    "basic_salary": str(e.basic_salary),
                }
                for e in self.employees
            ],
            "records": [r.to_dict() for r in self.records],
        }


class AttendanceService:
    """Attendance sheet operations.

    Every write goes through the day status resolver and refreshes the
    record's daily pay, so stored status / work_day / ot_hours are current
    before payroll reads them.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        settings: SettingsRepository,
    ):
        self._attendance = attendance
        self._employees = employees
        self._settings = settings

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _with_daily_pay(self, record: AttendanceRecord, employee: Employee, settings: AppSettings) -> AttendanceRecord:
        pay = compute_daily_pay(employee, record.ot_hours, record.work_day, record.work_date, settings)
        return replace(record, calculated_daily_pay=pay)

    def get_daily(self, work_date: date) -> DailySheet:
        """Active employees and their records for a day, creating blank records on first view."""
        employees = list(self._employees.list_active())
        records = list(self._attendance.list_for_date(work_date))

        existing = {r.employee_id for r in records}
        missing = [AttendanceRecord.blank(e.employee_id, work_date) for e in employees if e.employee_id not in existing]
        if missing:
            self._attendance.save_many(missing)
            records.extend(missing)
            logger.info("created %d blank attendance records for %s", len(missing), work_date)

        return DailySheet(
            work_date=work_date,
            employees=employees,
            records=records,
            holiday=self._settings.get().holiday_on(work_date),
            is_sunday=is_sunday(work_date),
        )

    def update_field(self, employee_id: str, work_date: date, field: str, value: Any) -> AttendanceRecord:
        employee = self._get_employee(employee_id)
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if record is None:
            record = AttendanceRecord.blank(employee_id, work_date)

        updated = apply_edit(record, field, value, employee=employee)
        updated = self._with_daily_pay(updated, employee, self._settings.get())
        self._attendance.save(updated)
        logger.debug("attendance %s: %s=%r -> %s", updated.record_id, field, value, updated.status.value)
        return updated

    def save_record(self, record: AttendanceRecord) -> AttendanceRecord:
        """Persist an externally built record after checking its status invariant."""
        ensure_consistent(record)
        employee = self._get_employee(record.employee_id)
        saved = self._with_daily_pay(record, employee, self._settings.get())
        self._attendance.save(saved)
        return saved

    def save_records(self, records: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
        for r in records:
            ensure_consistent(r)
        return [self.save_record(r) for r in records]

    def preview_daily_pay(self, employee_id: str, work_date: date, *, ot_hours: Any, work_day: Any) -> Decimal:
        employee = self._get_employee(employee_id)
        return compute_daily_pay(employee, ot_hours, work_day, work_date, self._settings.get())
