from decimal import Decimal

import pytest

from src.hrms_payroll.hrms_payroll.core.enums import SalaryType
from src.hrms_payroll.hrms_payroll.core.exceptions import ValidationError
from src.hrms_payroll.hrms_payroll.employees.model import Employee
from src.hrms_payroll.hrms_payroll.payroll.overtime import compute_overtime_pay, derive_overtime_hours


@pytest.mark.parametrize(
    "salary_type,end_time,expected",
    [
        (SalaryType.DAILY, "17:00", Decimal("0")),
        (SalaryType.DAILY, "17:30", Decimal("0.5")),
        (SalaryType.DAILY, "18:20", Decimal("1.33")),
        (SalaryType.MONTHLY, "19:00", Decimal("0")),
        (SalaryType.MONTHLY, "20:15", Decimal("1.25")),
        (SalaryType.MONTHLY, "18:30", Decimal("0")),
    ],
)
def test_overtime_hours_against_salary_model_threshold(salary_type, end_time, expected):
    assert derive_overtime_hours(salary_type, end_time) == expected


def test_overtime_hours_accepts_salary_type_value():
    assert derive_overtime_hours("Daily", "19:00") == Decimal("2")


@pytest.mark.parametrize("end_time", ["", None, "   "])
def test_overtime_hours_zero_without_checkout(end_time):
    assert derive_overtime_hours(SalaryType.DAILY, end_time) == 0


def test_after_midnight_checkout_is_not_overtime():
    assert derive_overtime_hours(SalaryType.DAILY, "00:30") == 0


def test_malformed_checkout_raises():
    with pytest.raises(ValidationError):
        derive_overtime_hours(SalaryType.DAILY, "25:99")


def test_daily_overtime_pay_uses_eight_hour_day():
    employee = Employee(employee_id="E1", name="A", salary_type=SalaryType.DAILY, basic_salary=Decimal("100"))
    # 100 / 8 * 1.5 * 2
    assert compute_overtime_pay(employee, Decimal("2")) == Decimal("37.50")


def test_monthly_overtime_pay_uses_fixed_26_day_month():
    employee = Employee(employee_id="E2", name="B", salary_type=SalaryType.MONTHLY, basic_salary=Decimal("2080"))
    # 2080 / (26 * 8) = 10 per hour
    assert compute_overtime_pay(employee, Decimal("1.25")) == Decimal("18.75")


def test_overtime_pay_rounds_half_up_to_cents():
    employee = Employee(employee_id="E1", name="A", salary_type=SalaryType.DAILY, basic_salary=Decimal("101"))
    # 101 / 8 * 1.5 = 18.9375
    assert compute_overtime_pay(employee, 1) == Decimal("18.94")


@pytest.mark.parametrize("hours", [0, Decimal("-1"), None])
def test_no_overtime_pay_without_positive_hours(hours):
    employee = Employee(employee_id="E1", name="A", salary_type=SalaryType.DAILY, basic_salary=Decimal("100"))
    assert compute_overtime_pay(employee, hours) == 0
