from __future__ import annotations

from dataclasses import replace
from datetime import datetime, time

import pytest

from src.hr_operations.hr_operations.attendance.service import AttendanceService
from src.hr_operations.hr_operations.core.enums import AttendanceStatus
from src.hr_operations.hr_operations.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def service(attendance, employees):
    return AttendanceService(attendance, employees, work_start=time(9, 0), grace_minutes=15)


def test_check_in_within_grace_is_present(service, attendance):
    record = service.check_in(1, now=datetime(2026, 10, 19, 9, 15))

    assert record.status == AttendanceStatus.PRESENT
    assert attendance.get_for_employee_and_date(1, record.work_date).check_in_time == datetime(2026, 10, 19, 9, 15)


def test_check_in_after_grace_is_late(service):
    record = service.check_in(1, now=datetime(2026, 10, 19, 9, 16))

    assert record.status == AttendanceStatus.LATE


def test_second_check_in_same_day_is_rejected(service):
    service.check_in(1, now=datetime(2026, 10, 19, 8, 50))

    with pytest.raises(ValidationError):
        service.check_in(1, now=datetime(2026, 10, 19, 12, 0))


def test_suspended_or_unknown_employee_cannot_check_in(service, employees):
    employees.by_id[2] = replace(employees.by_id[2], is_suspended=True)

    with pytest.raises(ValidationError):
        service.check_in(2, now=datetime(2026, 10, 19, 9, 0))
    with pytest.raises(NotFoundError):
        service.check_in(77, now=datetime(2026, 10, 19, 9, 0))


def test_history_is_newest_first(service):
    service.check_in(1, now=datetime(2026, 10, 19, 9, 0))
    service.check_in(1, now=datetime(2026, 10, 20, 10, 0))

    rows = service.history(1, limit=5)

    assert [r["date"] for r in rows] == ["2026-10-20", "2026-10-19"]
    assert rows[0]["status"] == "late"
    assert rows[1]["check_in"] == "09:00:00"
