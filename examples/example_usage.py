"""Example: compute a month's payroll with the engine alone (no Flask, no database)."""

from datetime import date
from decimal import Decimal

from src.hrms_payroll.hrms_payroll.attendance.model import AttendanceRecord
from src.hrms_payroll.hrms_payroll.attendance.resolver import apply_edit
from src.hrms_payroll.hrms_payroll.core.enums import SalaryType
from src.hrms_payroll.hrms_payroll.employees.model import Employee
from src.hrms_payroll.hrms_payroll.payroll.aggregator import compute_monthly_payroll
from src.hrms_payroll.hrms_payroll.payroll.model import PayrollAdjustments
from src.hrms_payroll.hrms_payroll.settings.model import AppSettings, Holiday


def main():
    employee = Employee(employee_id="E001", name="Tan Wei Ming", salary_type=SalaryType.DAILY, basic_salary=Decimal("100"))
    settings = AppSettings(public_holidays=(Holiday(date(2025, 5, 1), "Labour Day"),))

    records = []
    for day, start, end in [(date(2025, 5, 1), "08:00", "17:00"), (date(2025, 5, 2), "08:00", "18:30")]:
        record = AttendanceRecord.blank(employee.employee_id, day)
        record = apply_edit(record, "start_time", start, employee=employee)
        record = apply_edit(record, "end_time", end, employee=employee)
        records.append(record)

    adjustments = PayrollAdjustments(employee_id="E001", month="2025-05", transport=Decimal("30"))
    payroll = compute_monthly_payroll(employee, "2025-05", records, adjustments, settings)
    print(payroll.to_dict())


if __name__ == "__main__":
    main()
