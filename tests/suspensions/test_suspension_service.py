from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from mysql.connector import Error as MySQLError

from src.hr_operations.hr_operations.core.enums import SuspensionStatus
from src.hr_operations.hr_operations.core.exceptions import NotFoundError, ValidationError
from src.hr_operations.hr_operations.suspensions.service import SuspensionService

NOW = datetime(2026, 10, 19, 9, 0)


@pytest.fixture
def service(suspensions, employees, salaries):
    return SuspensionService(suspensions, employees, salaries)


def _active(service, employee_id, *, ends, pct=0):
    suspension = service.request(
        employee_id=employee_id,
        reason="Repeated absence",
        suspension_end=ends,
        salary_deduction_percentage=pct,
        now=NOW - timedelta(days=7),
    )
    return service.approve(suspension.suspension_id, now=NOW - timedelta(days=7))


def test_expired_suspensions_are_completed_and_employees_cleared(service, suspensions, employees):
    done = _active(service, 1, ends=NOW - timedelta(hours=1))
    running = _active(service, 2, ends=NOW + timedelta(days=2))

    result = service.expire_due(now=NOW)

    assert result.to_dict() == {"success": True, "count": 1, "message": "Processed 1 expired suspensions"}
    assert suspensions.get_by_id(done.suspension_id).status == SuspensionStatus.COMPLETED
    assert suspensions.get_by_id(running.suspension_id).status == SuspensionStatus.ACTIVE
    assert employees.get_by_id(1).is_suspended is False
    assert employees.get_by_id(1).suspension_end_date is None
    assert employees.get_by_id(2).is_suspended is True


def test_nothing_to_expire(service):
    result = service.expire_due(now=NOW)

    assert (result.success, result.count) == (True, 0)


def test_pending_suspensions_never_expire(service, suspensions):
    pending = service.request(
        employee_id=3, reason="Pending review", suspension_end=NOW - timedelta(minutes=1), now=NOW - timedelta(days=1)
    )

    assert service.expire_due(now=NOW).count == 0
    assert suspensions.get_by_id(pending.suspension_id).status == SuspensionStatus.PENDING


def test_approval_applies_penalty_on_current_salary(service, salaries):
    salaries.add(1, "100000", total="20000")

    suspension = _active(service, 1, ends=NOW + timedelta(days=3), pct="10")

    assert suspension.status == SuspensionStatus.ACTIVE
    assert suspension.suspension_start == NOW - timedelta(days=7)
    state = salaries.get_for_employee(1)
    assert state.total_deductions == Decimal("28000.00")
    assert state.current_salary == Decimal("72000.00")


def test_reject_and_double_processing(service, suspensions):
    suspension = service.request(employee_id=1, reason="Late", suspension_end=NOW + timedelta(days=1), now=NOW)

    rejected = service.reject(suspension.suspension_id)
    assert rejected.status == SuspensionStatus.REJECTED

    with pytest.raises(ValidationError):
        service.approve(suspension.suspension_id, now=NOW)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"reason": "  "},
        {"suspension_end": NOW - timedelta(days=1)},
        {"salary_deduction_percentage": "120"},
    ],
)
def test_request_validation(service, kwargs):
    params = {"employee_id": 1, "reason": "Misconduct", "suspension_end": NOW + timedelta(days=1), "now": NOW}
    params.update(kwargs)

    with pytest.raises(ValidationError):
        service.request(**params)


def test_request_for_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.request(employee_id=42, reason="x", suspension_end=NOW + timedelta(days=1), now=NOW)


def test_failed_penalty_write_leaves_suspension_pending_for_retry(service, suspensions, salaries, employees):
    suspension = service.request(
        employee_id=1, reason="Misconduct", suspension_end=NOW + timedelta(days=3),
        salary_deduction_percentage="10", now=NOW,
    )
    salaries.fail_saves_for.add(1)

    with pytest.raises(MySQLError):
        service.approve(suspension.suspension_id, now=NOW)

    assert suspensions.get_by_id(suspension.suspension_id).status == SuspensionStatus.PENDING
    assert employees.get_by_id(1).is_suspended is False
    assert salaries.get_for_employee(1).total_deductions == 0

    salaries.fail_saves_for.clear()
    approved = service.approve(suspension.suspension_id, now=NOW)

    assert approved.status == SuspensionStatus.ACTIVE
    assert employees.get_by_id(1).is_suspended is True
    assert salaries.get_for_employee(1).total_deductions == Decimal("10000.00")
