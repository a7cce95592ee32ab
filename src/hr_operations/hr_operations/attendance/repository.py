from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_status(self, status: AttendanceStatus) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        deduction_amount: Decimal = Decimal("0.00"),
        check_in_time: Optional[datetime] = None,
    ) -> int:
        raise NotImplementedError

    def update_deduction(self, *, attendance_id: int, deduction_amount: Decimal) -> bool:
        raise NotImplementedError
