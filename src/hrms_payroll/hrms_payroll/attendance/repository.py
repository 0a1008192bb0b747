from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records with start_date <= work_date <= end_date."""

        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> None:
        """Insert or replace the record for (employee_id, work_date)."""

        raise NotImplementedError

    def save_many(self, records: Sequence[AttendanceRecord]) -> None:
        raise NotImplementedError
