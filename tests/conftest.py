from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.hrms_payroll.hrms_payroll.attendance.model import AttendanceRecord
from src.hrms_payroll.hrms_payroll.container import build_services
from src.hrms_payroll.hrms_payroll.core.enums import EmployeeStatus, SalaryType
from src.hrms_payroll.hrms_payroll.employees.model import Employee
from src.hrms_payroll.hrms_payroll.payroll.model import PayrollAdjustments, PayrollHistoryLog
from src.hrms_payroll.hrms_payroll.settings.model import AppSettings, Holiday


@dataclass
class InMemoryEmployees:
    employees: dict[str, Employee]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def list_active(self):
        return [e for e in self.employees.values() if e.is_active]


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[tuple[str, date], AttendanceRecord] = {}
        self.save_calls = 0

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self.records.get((employee_id, work_date))

    def list_for_date(self, work_date: date):
        return [r for r in self.records.values() if r.work_date == work_date]

    def list_for_range(self, *, start_date: date, end_date: date, employee_id: Optional[str] = None):
        items = [
            r
            for r in self.records.values()
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]
        items.sort(key=lambda r: (r.work_date, r.employee_id))
        return items

    def save(self, record: AttendanceRecord) -> None:
        self.save_calls += 1
        self.records[(record.employee_id, record.work_date)] = record

    def save_many(self, records) -> None:
        for r in records:
            self.save(r)


class InMemoryAdjustments:
    def __init__(self):
        self.adjustments: dict[tuple[str, str], PayrollAdjustments] = {}
        self.history: list[PayrollHistoryLog] = []
        self.save_calls: list[tuple[PayrollAdjustments, Optional[PayrollHistoryLog]]] = []

    def get(self, employee_id: str, month: str) -> Optional[PayrollAdjustments]:
        return self.adjustments.get((employee_id, month))

    def list_for_month(self, month: str):
        return [a for a in self.adjustments.values() if a.month == month]

    def save(self, adjustments: PayrollAdjustments, log: Optional[PayrollHistoryLog] = None) -> None:
        self.save_calls.append((adjustments, log))
        self.adjustments[(adjustments.employee_id, adjustments.month)] = adjustments
        if log is not None:
            self.history.append(log)

    def history_for(self, adjustment_id: str):
        items = [h for h in self.history if h.adjustment_id == adjustment_id]
        items.sort(key=lambda h: h.timestamp, reverse=True)
        return items


@dataclass
class InMemorySettings:
    settings: AppSettings = field(default_factory=AppSettings)

    def get(self) -> AppSettings:
        return self.settings

    def save_multiplier(self, multiplier: Decimal) -> None:
        self.settings = replace(self.settings, holiday_pay_multiplier=multiplier)

    def add_holiday(self, holiday: Holiday) -> None:
        others = [h for h in self.settings.public_holidays if h.holiday_date != holiday.holiday_date]
        holidays = sorted([*others, holiday], key=lambda h: h.holiday_date)
        self.settings = replace(self.settings, public_holidays=tuple(holidays))

    def delete_holiday(self, holiday_date: date) -> bool:
        before = len(self.settings.public_holidays)
        holidays = tuple(h for h in self.settings.public_holidays if h.holiday_date != holiday_date)
        self.settings = replace(self.settings, public_holidays=holidays)
        return len(holidays) < before


@pytest.fixture
def daily_employee() -> Employee:
    return Employee(employee_id="E001", name="Tan Wei Ming", salary_type=SalaryType.DAILY, basic_salary=Decimal("100"))


@pytest.fixture
def monthly_employee() -> Employee:
    return Employee(employee_id="E002", name="Rahul Kumar", salary_type=SalaryType.MONTHLY, basic_salary=Decimal("2600"))


@pytest.fixture
def cancelled_employee() -> Employee:
    return Employee(
        employee_id="E003",
        name="Former Worker",
        salary_type=SalaryType.DAILY,
        basic_salary=Decimal("90"),
        status=EmployeeStatus.CANCELLED,
    )


@pytest.fixture
def employees_repo(daily_employee, monthly_employee, cancelled_employee) -> InMemoryEmployees:
    return InMemoryEmployees({e.employee_id: e for e in (daily_employee, monthly_employee, cancelled_employee)})


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def adjustments_repo() -> InMemoryAdjustments:
    return InMemoryAdjustments()


@pytest.fixture
def settings_repo() -> InMemorySettings:
    # 2025-06-05 is a Thursday.
    return InMemorySettings(AppSettings(public_holidays=(Holiday(date(2025, 6, 5), "Company Day"),)))


@pytest.fixture
def container(employees_repo, attendance_repo, adjustments_repo, settings_repo):
    return build_services(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        adjustments_repo=adjustments_repo,
        settings_repo=settings_repo,
    )


@pytest.fixture
def client(container, monkeypatch):
    from src.hrms_payroll.hrms_payroll.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
