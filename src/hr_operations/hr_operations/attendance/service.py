from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_LATE_GRACE_MINUTES
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Employee-facing attendance use cases (check-in, history)."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        work_start: time,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    ):
        self._attendance = attendance
        self._employees = employees
        self._work_start = work_start
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._grace_minutes = int(grace_minutes)

    def check_in(self, employee_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        if not employee.is_active:
            raise ValidationError("Employee is not active")
        if employee.is_suspended:
            raise ValidationError("Suspended employees cannot check in")

        if self._attendance.get_for_employee_and_date(employee_id, today):
            raise ValidationError("Attendance already recorded for today")

        strategy = self._factory.for_checkin(now=now, work_start=self._work_start, grace_minutes=self._grace_minutes)
        decision = strategy.decide_checkin(now=now, work_start=self._work_start, grace_minutes=self._grace_minutes)

        attendance_id = self._attendance.create(
            employee_id=employee_id,
            work_date=today,
            status=decision.status,
            check_in_time=now,
        )
        logger.info("Employee %s checked in as %s", employee_id, decision.status.value)

        return AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            work_date=today,
            status=decision.status,
            check_in_time=now,
        )

    def history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[dict]:
        rows = self._attendance.get_recent_for_employee(employee_id, limit)
        return [self._to_dict(r) for r in rows]

    @staticmethod
    def _to_dict(r: AttendanceRecord) -> dict:
        return {
            "attendance_id": r.attendance_id,
            "date": r.work_date.strftime("%Y-%m-%d"),
            "status": r.status.value,
            "check_in": r.check_in_time.strftime("%H:%M:%S") if r.check_in_time else "-",
            "deduction_amount": str(r.deduction_amount),
        }
