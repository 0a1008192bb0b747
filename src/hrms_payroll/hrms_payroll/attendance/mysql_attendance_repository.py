from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    employee_id, work_date, start_time, end_time, ot_hours, lunch_hours,
    work_day, remarks, status, site_location, calculated_daily_pay
"""

_UPSERT = f"""
    INSERT INTO attendance({_COLUMNS})
    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE
        start_time=VALUES(start_time), end_time=VALUES(end_time),
        ot_hours=VALUES(ot_hours), lunch_hours=VALUES(lunch_hours),
        work_day=VALUES(work_day), remarks=VALUES(remarks), status=VALUES(status),
        site_location=VALUES(site_location), calculated_daily_pay=VALUES(calculated_daily_pay)
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=str(r["employee_id"]),
        work_date=as_date(r["work_date"]),
        start_time=r.get("start_time") or "",
        end_time=r.get("end_time") or "",
        ot_hours=as_decimal(r.get("ot_hours")),
        lunch_hours=int(r.get("lunch_hours") or 0),
        work_day=as_decimal(r.get("work_day")),
        remarks=r.get("remarks") or "",
        status=AttendanceStatus(r.get("status") or AttendanceStatus.ABSENT.value),
        site_location=r.get("site_location") or "",
        calculated_daily_pay=as_decimal(r.get("calculated_daily_pay")),
    )


def _record_params(record: AttendanceRecord) -> tuple:
    return (
        record.employee_id,
        record.work_date,
        record.start_time,
        record.end_time,
        record.ot_hours,
        int(record.lunch_hours),
        record.work_day,
        record.remarks,
        record.status.value,
        record.site_location,
        record.calculated_daily_pay,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE work_date=%s ORDER BY employee_id ASC",
                (work_date,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_for_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE {where} ORDER BY work_date ASC, employee_id ASC",
                tuple(params),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def save(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT, _record_params(record))

    def save_many(self, records: Sequence[AttendanceRecord]) -> None:
        if not records:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_UPSERT, [_record_params(r) for r in records])
