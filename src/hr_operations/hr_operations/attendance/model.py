from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per (employee, work_date)."""

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    deduction_amount: Decimal = Decimal("0.00")
    check_in_time: Optional[datetime] = None

    @property
    def is_absent(self) -> bool:
        return self.status == AttendanceStatus.ABSENT
