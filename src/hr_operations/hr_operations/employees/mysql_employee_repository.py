from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, email, is_active, is_suspended, suspension_end_date"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        full_name=row["full_name"],
        email=row["email"],
        is_active=bool(row.get("is_active", True)),
        is_suspended=bool(row.get("is_suspended", False)),
        suspension_end_date=row.get("suspension_end_date"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_roster(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE is_active=1 ORDER BY employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def mark_suspended(self, employee_id: int, *, until: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET is_suspended=1, suspension_end_date=%s
                WHERE employee_id=%s
                """,
                (until, int(employee_id)),
            )
            return cur.rowcount > 0

    def clear_suspensions(self, employee_ids: Sequence[int]) -> int:
        ids = [int(i) for i in employee_ids]
        if not ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE employees
                SET is_suspended=0, suspension_end_date=NULL
                WHERE employee_id IN ({in_clause(ids)})
                """,
                tuple(ids),
            )
            return int(cur.rowcount)
