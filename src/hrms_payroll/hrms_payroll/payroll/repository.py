from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollAdjustments, PayrollHistoryLog


class AdjustmentRepository(Protocol):
    def get(self, employee_id: str, month: str) -> Optional[PayrollAdjustments]:
        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[PayrollAdjustments]:
        raise NotImplementedError

    def save(self, adjustments: PayrollAdjustments, log: Optional[PayrollHistoryLog] = None) -> None:
        """Upsert the adjustments and, when given, their audit entry in one transaction."""

        raise NotImplementedError

    def history_for(self, adjustment_id: str) -> Sequence[PayrollHistoryLog]:
        """Audit entries, newest first."""

        raise NotImplementedError
