from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import parse_hhmm
from ..common.money import to_decimal
from ..core.constants import MAX_TEXT_LENGTH, REMARK_MC, REMARK_OFF
from ..core.enums import AttendanceStatus, SalaryType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..payroll.overtime import derive_overtime_hours
from .model import AttendanceRecord

EDITABLE_FIELDS = ("start_time", "end_time", "remarks", "ot_hours", "lunch_hours", "site_location")


@dataclass(frozen=True)
class DayStatus:
    work_day: Decimal
    status: AttendanceStatus
    ot_hours: Decimal


def resolve_day_status(
    record: AttendanceRecord,
    remarks: Optional[str] = None,
    *,
    salary_type: Optional[SalaryType] = None,
) -> DayStatus:
    """Derive work_day / status (and optionally ot_hours) for one day.

    Priority: MC is a paid day whatever the times say, OFF is an unpaid leave
    day, anything else is Present only when both punches exist and differ.

    `remarks` overrides the record's own remarks when given. Passing
    `salary_type` refreshes ot_hours from the end time (used when the end
    time changed); MC/OFF days keep their ot_hours.
    """
    remarks = record.remarks if remarks is None else remarks
    ot_hours = to_decimal(record.ot_hours)

    if remarks == REMARK_MC:
        return DayStatus(work_day=Decimal("1"), status=AttendanceStatus.MC, ot_hours=ot_hours)
    if remarks == REMARK_OFF:
        return DayStatus(work_day=Decimal("0"), status=AttendanceStatus.LEAVE, ot_hours=ot_hours)

    if salary_type is not None:
        ot_hours = derive_overtime_hours(salary_type, record.end_time)

    start = (record.start_time or "").strip()
    end = (record.end_time or "").strip()
    if start and end and start != end:
        return DayStatus(work_day=Decimal("1"), status=AttendanceStatus.PRESENT, ot_hours=ot_hours)
    return DayStatus(work_day=Decimal("0"), status=AttendanceStatus.ABSENT, ot_hours=ot_hours)


def apply_status(record: AttendanceRecord, decision: DayStatus) -> AttendanceRecord:
    return replace(record, work_day=decision.work_day, status=decision.status, ot_hours=decision.ot_hours)


def _text(value: Any, field: str) -> str:
    text = "" if value is None else str(value).strip()
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"{field} must be at most {MAX_TEXT_LENGTH} characters")
    return text


def apply_edit(record: AttendanceRecord, field: str, value: Any, *, employee: Employee) -> AttendanceRecord:
    """Apply one attendance-sheet edit and keep status / work_day in sync.

    Time and remark edits re-run the resolver; an end-time edit also refreshes
    ot_hours. Numeric fields accept form input: unparseable values become 0.
    """
    if field not in EDITABLE_FIELDS:
        raise ValidationError(f"Field {field!r} cannot be edited")

    if field in ("start_time", "end_time"):
        text = _text(value, field)
        parse_hhmm(text)
        updated = replace(record, **{field: text})
        salary_type = employee.salary_type if field == "end_time" else None
        return apply_status(updated, resolve_day_status(updated, salary_type=salary_type))

    if field == "remarks":
        updated = replace(record, remarks=_text(value, field))
        return apply_status(updated, resolve_day_status(updated))

    if field == "ot_hours":
        return replace(record, ot_hours=to_decimal(value))

    if field == "lunch_hours":
        return replace(record, lunch_hours=int(to_decimal(value)))

    return replace(record, site_location=_text(value, field))


def is_consistent(record: AttendanceRecord) -> bool:
    decision = resolve_day_status(record)
    return decision.status == record.status and decision.work_day == to_decimal(record.work_day)


def ensure_consistent(record: AttendanceRecord) -> AttendanceRecord:
    """Reject over-long text and records whose status / work_day disagree with their times and remarks."""
    _text(record.remarks, "remarks")
    _text(record.site_location, "site_location")
    if not is_consistent(record):
        expected = resolve_day_status(record)
        raise ValidationError(
            f"Attendance {record.record_id} is inconsistent: "
            f"expected {expected.status.value}/{expected.work_day}, "
            f"got {record.status.value}/{record.work_day}"
        )
    return record
