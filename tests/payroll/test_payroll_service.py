from datetime import date, datetime
from decimal import Decimal
from itertools import count

import pytest

from src.hrms_payroll.hrms_payroll.attendance.model import AttendanceRecord
from src.hrms_payroll.hrms_payroll.core.enums import AttendanceStatus
from src.hrms_payroll.hrms_payroll.core.exceptions import NotFoundError, ValidationError
from src.hrms_payroll.hrms_payroll.payroll.model import PayrollAdjustments
from src.hrms_payroll.hrms_payroll.payroll.service import PayrollService, describe_adjustment_changes


def worked(employee_id, day, ot="0"):
    return AttendanceRecord(
        employee_id=employee_id,
        work_date=day,
        start_time="08:00",
        end_time="17:00",
        ot_hours=Decimal(ot),
        work_day=Decimal("1"),
        status=AttendanceStatus.PRESENT,
    )


@pytest.fixture
def service(employees_repo, attendance_repo, adjustments_repo, settings_repo):
    ids = count(1)
    return PayrollService(
        employees_repo,
        attendance_repo,
        adjustments_repo,
        settings_repo,
        clock=lambda: datetime(2025, 7, 1, 9, 0),
        id_factory=lambda: f"log-{next(ids)}",
    )


def test_monthly_report_covers_active_employees_only(service, attendance_repo):
    attendance_repo.save(worked("E001", date(2025, 6, 2)))
    attendance_repo.save(worked("E003", date(2025, 6, 2)))

    report = service.monthly_report("2025-06")

    assert [r.employee_id for r in report.records] == ["E001", "E002"]
    by_id = {r.employee_id: r for r in report.records}
    assert by_id["E001"].basic_pay_total == Decimal("100.00")
    assert by_id["E002"].net_salary == 0


def test_monthly_report_uses_stored_adjustments(service, attendance_repo, adjustments_repo):
    attendance_repo.save(worked("E001", date(2025, 6, 2)))
    adjustments_repo.save(
        PayrollAdjustments(employee_id="E001", month="2025-06", transport=Decimal("25"), advance=Decimal("10"))
    )

    report = service.monthly_report("2025-06")
    e001 = next(r for r in report.records if r.employee_id == "E001")

    assert e001.net_salary == Decimal("115.00")
    assert report.to_dict()["records"][0]["name"] == "Tan Wei Ming"


def test_public_holiday_from_settings_is_premium(service, attendance_repo):
    attendance_repo.save(worked("E001", date(2025, 6, 5)))

    payroll = service.payroll_for("E001", "2025-06")

    assert payroll.holiday_pay_total == Decimal("150.00")
    assert payroll.basic_pay_total == 0


def test_payroll_for_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.payroll_for("NOPE", "2025-06")


def test_changing_settings_changes_recomputed_payroll(service, attendance_repo, settings_repo):
    attendance_repo.save(worked("E001", date(2025, 6, 1)))
    assert service.payroll_for("E001", "2025-06").holiday_pay_total == Decimal("150.00")

    settings_repo.save_multiplier(Decimal("2"))

    assert service.payroll_for("E001", "2025-06").holiday_pay_total == Decimal("200.00")


def test_save_adjustments_logs_changes(service, adjustments_repo):
    log = service.save_adjustments(
        PayrollAdjustments(employee_id="E001", month="2025-06", transport=Decimal("50")),
        admin_name="Alice",
    )

    assert log.log_id == "log-1"
    assert log.adjustment_id == "E001-2025-06"
    assert log.admin_name == "Alice"
    assert log.timestamp == datetime(2025, 7, 1, 9, 0)
    assert log.changes == ("Transport: $0.00 → $50.00",)
    assert adjustments_repo.get("E001", "2025-06").transport == Decimal("50")


def test_history_is_written_with_the_adjustments(service, adjustments_repo):
    log = service.save_adjustments(
        PayrollAdjustments(employee_id="E001", month="2025-06", transport=Decimal("50")),
        admin_name="Alice",
    )

    assert len(adjustments_repo.save_calls) == 1
    saved, saved_log = adjustments_repo.save_calls[0]
    assert saved.transport == Decimal("50")
    assert saved_log == log


def test_save_without_changes_writes_no_history(service, adjustments_repo):
    adjustments = PayrollAdjustments(employee_id="E001", month="2025-06", housing=Decimal("40"))
    service.save_adjustments(adjustments, admin_name="Alice")

    assert service.save_adjustments(adjustments, admin_name="Alice") is None
    assert len(adjustments_repo.history) == 1
    assert adjustments_repo.save_calls[-1] == (adjustments, None)


def test_blank_admin_name_is_recorded_as_unknown(service):
    log = service.save_adjustments(
        PayrollAdjustments(employee_id="E001", month="2025-06", other=Decimal("5")),
        admin_name="  ",
    )
    assert log.admin_name == "Unknown Admin"


def test_negative_adjustment_is_rejected(service, adjustments_repo):
    with pytest.raises(ValidationError):
        service.save_adjustments(
            PayrollAdjustments(employee_id="E001", month="2025-06", advance=Decimal("-1")),
            admin_name="Alice",
        )
    assert adjustments_repo.adjustments == {}


def test_adjustment_details_lists_history_newest_first(service):
    first = PayrollAdjustments(employee_id="E002", month="2025-06", transport=Decimal("10"))
    second = PayrollAdjustments(employee_id="E002", month="2025-06", transport=Decimal("20"))
    service.save_adjustments(first, admin_name="A", now=datetime(2025, 6, 30, 8, 0))
    service.save_adjustments(second, admin_name="B", now=datetime(2025, 6, 30, 9, 0))

    details = service.adjustment_details("E002", "2025-06")

    assert details.adjustments.transport == Decimal("20")
    assert [h.admin_name for h in details.history] == ["B", "A"]
    assert details.history[0].changes == ("Transport: $10.00 → $20.00",)


def test_adjustment_details_default_to_empty(service):
    details = service.adjustment_details("E001", "2025-06")

    assert details.adjustments == PayrollAdjustments.empty("E001", "2025-06")
    assert details.history == []


def test_describe_image_changes():
    base = PayrollAdjustments.empty("E001", "2025-06")
    with_image = PayrollAdjustments(employee_id="E001", month="2025-06", attached_image="scan-1")
    other_image = PayrollAdjustments(employee_id="E001", month="2025-06", attached_image="scan-2")

    assert describe_adjustment_changes(base, with_image) == ["Added Time Card Image"]
    assert describe_adjustment_changes(with_image, base) == ["Removed Time Card Image"]
    assert describe_adjustment_changes(with_image, other_image) == ["Updated Time Card Image"]
    assert describe_adjustment_changes(base, base) == []


def test_payslip_range_has_one_payslip_per_month(service, attendance_repo):
    attendance_repo.save(worked("E002", date(2025, 6, 2)))

    payslips = service.payslip_range("E002", "2025-05", "2025-06")

    assert [p.month for p in payslips] == ["2025-05", "2025-06"]
    assert len(payslips[0].days) == 31
    assert len(payslips[1].days) == 30
    june = payslips[1]
    assert june.daily_rate == Decimal("104.00")
    assert june.payroll.basic_pay_total == Decimal("104.00")
    assert june.days[0].day_name == "Sunday"
    assert june.days[1].record is not None
    assert june.days[2].record is None


def test_payslip_range_start_after_end_is_empty(service):
    assert service.payslip_range("E001", "2025-07", "2025-06") == []
