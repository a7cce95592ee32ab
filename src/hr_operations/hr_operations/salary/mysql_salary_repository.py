from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SalaryState
from .repository import SalaryRepository

_COLUMNS = "employee_id, base_salary, daily_rate, total_deductions, current_salary"


def _to_state(r: dict) -> SalaryState:
    return SalaryState(
        employee_id=int(r["employee_id"]),
        base_salary=to_decimal(r["base_salary"]),
        total_deductions=to_decimal(r.get("total_deductions")),
        current_salary=to_decimal(r.get("current_salary")),
        daily_rate=to_decimal(r.get("daily_rate")),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee(self, employee_id: int) -> Optional[SalaryState]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_info WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_state(r) if r else None

    def list_all(self) -> Sequence[SalaryState]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_info ORDER BY employee_id ASC")
            return [_to_state(r) for r in fetchall(cur)]

    def save_totals(self, state: SalaryState) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary_info
                SET total_deductions=%s, current_salary=%s
                WHERE employee_id=%s
                """,
                (state.total_deductions, state.current_salary, state.employee_id),
            )
            return cur.rowcount > 0

    def upsert_base(self, *, employee_id: int, base_salary: Decimal, daily_rate: Decimal) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_info (employee_id, base_salary, daily_rate, total_deductions, current_salary)
                VALUES (%s, %s, %s, 0, %s)
                ON DUPLICATE KEY UPDATE
                    base_salary=VALUES(base_salary),
                    daily_rate=VALUES(daily_rate),
                    total_deductions=0,
                    current_salary=VALUES(current_salary)
                """,
                (int(employee_id), base_salary, daily_rate, base_salary),
            )
