from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.money import round2
from ..common.validators import require_non_empty, require_percentage
from ..core.enums import SuspensionStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..salary.calculator.base import DeductionCalculator
from ..salary.calculator.percentage_calculator import PercentageOfBaseCalculator
from ..salary.repository import SalaryRepository
from .model import ExpiryResult, Suspension
from .repository import SuspensionRepository

logger = logging.getLogger(__name__)


class SuspensionService:
    """Suspension workflow: request -> approve/reject -> expire."""

    def __init__(
        self,
        suspensions: SuspensionRepository,
        employees: EmployeeRepository,
        salaries: SalaryRepository,
        *,
        calculator: Optional[DeductionCalculator] = None,
    ):
        self._suspensions = suspensions
        self._employees = employees
        self._salaries = salaries
        self._calculator = calculator or PercentageOfBaseCalculator()

    def request(
        self,
        *,
        employee_id: int,
        reason: str,
        suspension_end: datetime,
        salary_deduction_percentage=0,
        now: Optional[datetime] = None,
    ) -> Suspension:
        now = now or now_local()
        reason = require_non_empty(reason, "Reason")
        pct = require_percentage(salary_deduction_percentage, "Salary deduction percentage")
        if suspension_end <= now:
            raise ValidationError("Suspension end must be in the future")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        suspension_id = self._suspensions.create(
            employee_id=employee_id,
            reason=reason,
            suspension_end=suspension_end,
            salary_deduction_percentage=pct,
        )
        logger.info("Suspension %s requested for employee %s until %s", suspension_id, employee_id, suspension_end)
        return self._get_or_fail(suspension_id)

    def approve(self, suspension_id: int, *, now: Optional[datetime] = None) -> Suspension:
        now = now or now_local()
        suspension = self._get_pending(suspension_id)

        # Status flips last: a failed write leaves the suspension pending and retryable.
        if suspension.salary_deduction_percentage > 0:
            self._apply_penalty(suspension)
        self._employees.mark_suspended(suspension.employee_id, until=suspension.suspension_end)
        self._suspensions.activate(suspension_id=suspension_id, started_at=now)

        logger.info("Suspension %s approved for employee %s", suspension_id, suspension.employee_id)
        return self._get_or_fail(suspension_id)

    def reject(self, suspension_id: int) -> Suspension:
        self._get_pending(suspension_id)
        self._suspensions.set_status(suspension_id=suspension_id, status=SuspensionStatus.REJECTED)
        logger.info("Suspension %s rejected", suspension_id)
        return self._get_or_fail(suspension_id)

    def expire_due(self, *, now: Optional[datetime] = None) -> ExpiryResult:
        now = now or now_local()
        expired = self._suspensions.list_expired(now=now)
        logger.info("Found %d expired suspensions", len(expired))

        if expired:
            self._suspensions.complete_many([s.suspension_id for s in expired])
            self._employees.clear_suspensions(sorted({s.employee_id for s in expired}))
            logger.info("Completed %d suspensions", len(expired))

        return ExpiryResult(
            success=True,
            count=len(expired),
            message=f"Processed {len(expired)} expired suspensions",
        )

    def _apply_penalty(self, suspension: Suspension) -> None:
        state = self._salaries.get_for_employee(suspension.employee_id)
        if not state:
            logger.warning(
                "Suspension %s carries a %s%% penalty but employee %s has no salary record",
                suspension.suspension_id, suspension.salary_deduction_percentage, suspension.employee_id,
            )
            return

        # Penalty is a share of what is left this month, not of the base salary.
        penalty = round2(state.current_salary * suspension.salary_deduction_percentage / Decimal("100"))
        self._salaries.save_totals(self._calculator.apply_deduction(state, penalty))
        logger.info("Applied suspension penalty of %s to employee %s", penalty, suspension.employee_id)

    def _get_pending(self, suspension_id: int) -> Suspension:
        suspension = self._get_or_fail(suspension_id)
        if suspension.status != SuspensionStatus.PENDING:
            raise ValidationError("Suspension has already been processed")
        return suspension

    def _get_or_fail(self, suspension_id: int) -> Suspension:
        suspension = self._suspensions.get_by_id(suspension_id)
        if not suspension:
            raise NotFoundError("Suspension not found")
        return suspension
