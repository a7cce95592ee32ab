from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import SuspensionStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Suspension
from .repository import SuspensionRepository

_COLUMNS = "suspension_id, employee_id, reason, status, suspension_start, suspension_end, salary_deduction_percentage"


def _to_suspension(r: dict) -> Suspension:
    return Suspension(
        suspension_id=int(r["suspension_id"]),
        employee_id=int(r["employee_id"]),
        reason=r["reason"],
        status=SuspensionStatus(r["status"]),
        suspension_start=r.get("suspension_start"),
        suspension_end=r["suspension_end"],
        salary_deduction_percentage=to_decimal(r.get("salary_deduction_percentage")),
    )


class MySQLSuspensionRepository(SuspensionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, suspension_id: int) -> Optional[Suspension]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM suspensions WHERE suspension_id=%s", (int(suspension_id),))
            r = fetchone(cur)
            return _to_suspension(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        reason: str,
        suspension_end: datetime,
        salary_deduction_percentage: Decimal,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO suspensions (employee_id, reason, status, suspension_end, salary_deduction_percentage)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (int(employee_id), reason, SuspensionStatus.PENDING.value, suspension_end, salary_deduction_percentage),
            )
            return int(cur.lastrowid)

    def activate(self, *, suspension_id: int, started_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE suspensions
                SET status=%s, suspension_start=%s
                WHERE suspension_id=%s
                """,
                (SuspensionStatus.ACTIVE.value, started_at, int(suspension_id)),
            )
            return cur.rowcount > 0

    def set_status(self, *, suspension_id: int, status: SuspensionStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE suspensions SET status=%s WHERE suspension_id=%s",
                (status.value, int(suspension_id)),
            )
            return cur.rowcount > 0

    def list_expired(self, *, now: datetime) -> Sequence[Suspension]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM suspensions
                WHERE status=%s AND suspension_end < %s
                ORDER BY suspension_end ASC
                """,
                (SuspensionStatus.ACTIVE.value, now),
            )
            return [_to_suspension(r) for r in fetchall(cur)]

    def complete_many(self, suspension_ids: Sequence[int]) -> int:
        ids = [int(i) for i in suspension_ids]
        if not ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE suspensions SET status=%s WHERE suspension_id IN ({in_clause(ids)})",
                (SuspensionStatus.COMPLETED.value, *ids),
            )
            return int(cur.rowcount)
