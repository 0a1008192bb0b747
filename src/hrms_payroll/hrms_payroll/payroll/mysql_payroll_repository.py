from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import PayrollAdjustments, PayrollHistoryLog
from .repository import AdjustmentRepository


def _row_to_adjustments(r: dict) -> PayrollAdjustments:
    return PayrollAdjustments(
        employee_id=str(r["employee_id"]),
        month=r["month"],
        transport=as_decimal(r.get("transport")),
        other=as_decimal(r.get("other")),
        housing=as_decimal(r.get("housing")),
        advance=as_decimal(r.get("advance")),
        attached_image=r.get("attached_image"),
    )


class MySQLAdjustmentRepository(AdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str, month: str) -> Optional[PayrollAdjustments]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, month, transport, other, housing, advance, attached_image
                FROM payroll_adjustments
                WHERE employee_id=%s AND month=%s
                """,
                (employee_id, month),
            )
            r = fetchone(cur)
            return _row_to_adjustments(r) if r else None

    def list_for_month(self, month: str) -> Sequence[PayrollAdjustments]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, month, transport, other, housing, advance, attached_image
                FROM payroll_adjustments
                WHERE month=%s
                """,
                (month,),
            )
            return [_row_to_adjustments(r) for r in fetchall(cur)]

    def save(self, adjustments: PayrollAdjustments, log: Optional[PayrollHistoryLog] = None) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_adjustments(employee_id, month, transport, other, housing, advance, attached_image)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    transport=VALUES(transport), other=VALUES(other),
                    housing=VALUES(housing), advance=VALUES(advance),
                    attached_image=VALUES(attached_image)
                """,
                (
                    adjustments.employee_id,
                    adjustments.month,
                    adjustments.transport,
                    adjustments.other,
                    adjustments.housing,
                    adjustments.advance,
                    adjustments.attached_image,
                ),
            )
            if log is None:
                return
            cur.execute(
                """
                INSERT INTO payroll_history_logs(log_id, adjustment_id, logged_at, admin_name, changes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (log.log_id, log.adjustment_id, log.timestamp, log.admin_name, json.dumps(list(log.changes))),
            )

    def history_for(self, adjustment_id: str) -> Sequence[PayrollHistoryLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, adjustment_id, logged_at, admin_name, changes
                FROM payroll_history_logs
                WHERE adjustment_id=%s
                ORDER BY logged_at DESC
                """,
                (adjustment_id,),
            )
            return [
                PayrollHistoryLog(
                    log_id=r["log_id"],
                    adjustment_id=r["adjustment_id"],
                    timestamp=r["logged_at"],
                    admin_name=r["admin_name"],
                    changes=tuple(json.loads(r.get("changes") or "[]")),
                )
                for r in fetchall(cur)
            ]
