from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_month, parse_month
from ..common.money import round2, to_decimal
from ..core.constants import LUNCH_ALLOWANCE_PER_HOUR, REMARK_MC, REMARK_OFF
from ..employees.model import Employee
from ..settings.model import AppSettings
from .calendar import is_premium_day
from .daily_pay import daily_rate_for
from .model import PayrollAdjustments, PayrollRecord
from .overtime import compute_overtime_pay


def records_for_month(
    employee: Employee, month: str, records: Iterable[AttendanceRecord]
) -> list[AttendanceRecord]:
    """The employee's records falling inside `month` ("YYYY-MM")."""
    return [
        r
        for r in records or ()
        if r.employee_id == employee.employee_id and format_month(r.work_date) == month
    ]


def compute_monthly_payroll(
    employee: Employee,
    month: str,
    records: Iterable[AttendanceRecord],
    adjustments: Optional[PayrollAdjustments] = None,
    settings: Optional[AppSettings] = None,
) -> PayrollRecord:
    """Fold a month of attendance plus adjustments into a PayrollRecord.

    Missing optional inputs are replaced by neutral defaults: no adjustments
    means all zero, no settings means a 1.5x holiday rate and no public
    holidays. Premium classification is per record and keyed on the date only;
    a record with work_day 0 never earns holiday pay.

    Overtime pay is computed once on the month's summed hours rather than per
    day. Day amounts are summed unrounded and each total is rounded once, so a
    full month of work pays exactly the monthly salary.
    """
    month = format_month(parse_month(month))
    settings = settings or AppSettings()
    adjustments = adjustments or PayrollAdjustments.empty(employee.employee_id, month)

    daily_rate = daily_rate_for(employee, parse_month(month))
    multiplier = settings.effective_multiplier

    total_days_worked = Decimal("0")
    total_ot_hours = Decimal("0")
    total_lunch_hours = 0
    mc_days = 0
    off_days = 0
    basic_pay_total = Decimal("0")
    holiday_pay_total = Decimal("0")
    total_holiday_days = Decimal("0")

    for r in records_for_month(employee, month, records):
        work_day = to_decimal(r.work_day)
        total_days_worked += work_day
        total_ot_hours += to_decimal(r.ot_hours)
        total_lunch_hours += int(to_decimal(r.lunch_hours))
        if r.remarks == REMARK_MC:
            mc_days += 1
        elif r.remarks == REMARK_OFF:
            off_days += 1

        if work_day > 0 and is_premium_day(r.work_date, settings):
            holiday_pay_total += daily_rate * work_day * multiplier
            total_holiday_days += work_day
        else:
            basic_pay_total += daily_rate * work_day

    ot_pay_total = compute_overtime_pay(employee, total_ot_hours)
    lunch_allowance_total = round2(total_lunch_hours * LUNCH_ALLOWANCE_PER_HOUR)

    transport = round2(adjustments.transport)
    other = round2(adjustments.other)
    housing = round2(adjustments.housing)
    advance = round2(adjustments.advance)

    basic_pay_total = round2(basic_pay_total)
    holiday_pay_total = round2(holiday_pay_total)
    net_salary = round2(
        basic_pay_total
        + holiday_pay_total
        + ot_pay_total
        + lunch_allowance_total
        + transport
        + other
        - housing
        - advance
    )

    return PayrollRecord(
        employee_id=employee.employee_id,
        month=month,
        total_days_worked=total_days_worked,
        total_ot_hours=total_ot_hours,
        total_lunch_hours=total_lunch_hours,
        mc_days=mc_days,
        off_days=off_days,
        basic_pay_total=basic_pay_total,
        holiday_pay_total=holiday_pay_total,
        total_holiday_days=total_holiday_days,
        ot_pay_total=ot_pay_total,
        lunch_allowance_total=lunch_allowance_total,
        transport_allowance=transport,
        other_allowances=other,
        housing_deduction=housing,
        advance_deduction=advance,
        deductions=round2(housing + advance),
        net_salary=net_salary,
    )
