from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from mysql.connector import Error as MySQLError

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import SETTING_ATTENDANCE_LAST_RUN, SETTING_MONTHLY_RESET_LAST_RUN
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, NotFoundError
from ..employees.repository import EmployeeRepository
from ..salary.calculator.base import DeductionCalculator
from ..salary.calculator.percentage_calculator import PercentageOfBaseCalculator
from ..salary.repository import SalaryRepository
from ..settings.model import SettlementConfig
from ..settings.service import SettingsService
from .model import RecalculationResult, ResetResult, SettlementResult

logger = logging.getLogger(__name__)

# Errors that skip a single employee/record instead of aborting the whole run.
PER_RECORD_ERRORS = (DomainError, MySQLError)


def skip_reason(now: datetime, config: SettlementConfig) -> Optional[str]:
    """Why the daily job must not run at `now`, or None when it may."""

    if not config.is_working_day(now.date()):
        return f"{now.date():%Y-%m-%d} is not a working day"
    if not config.is_after_cutoff(now):
        return f"before cutoff hour {config.cutoff_hour:02d}:00"
    return None


class AttendanceSettlementJob:
    """Daily job: mark employees without attendance as absent and deduct salary.

    Runs once per working day after the cutoff hour so same-day check-ins land
    first. Employees whose record is present or late are counted as processed
    and left alone. An employee whose records cannot be read or written is
    logged and skipped; the run still reports success.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        salaries: SalaryRepository,
        settings: SettingsService,
        *,
        calculator: Optional[DeductionCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._salaries = salaries
        self._settings = settings
        self._calculator = calculator or PercentageOfBaseCalculator()

    def run(self, *, now: Optional[datetime] = None, config: Optional[SettlementConfig] = None) -> SettlementResult:
        now = now or now_local()
        config = config or self._settings.load_settlement_config()

        reason = skip_reason(now, config)
        if reason:
            logger.info("Attendance settlement skipped: %s", reason)
            return SettlementResult(success=True, processed=0, absent=0, message=f"Skipped: {reason}")

        today = now.date()
        employees = self._employees.list_roster()
        logger.info(
            "Processing attendance for %s: %d employees, deduction %s%%",
            today, len(employees), config.deduction_percentage,
        )

        processed = 0
        absent = 0
        for employee in employees:
            try:
                marked_absent = self._settle_employee(employee.employee_id, today, config)
            except PER_RECORD_ERRORS:
                logger.exception("Skipping employee %s during attendance settlement", employee.employee_id)
                continue

            processed += 1
            if marked_absent:
                absent += 1

        self._settings.record_run(
            SETTING_ATTENDANCE_LAST_RUN, now, description="Last time the daily attendance settlement ran",
        )

        logger.info("Attendance settlement complete. Processed: %d, Absent: %d", processed, absent)
        return SettlementResult(
            success=True,
            processed=processed,
            absent=absent,
            message=f"Successfully processed {processed} employees, {absent} marked absent with deductions",
        )

    def _settle_employee(self, employee_id: int, today: date, config: SettlementConfig) -> bool:
        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if record and not record.is_absent:
            return False

        state = self._salaries.get_for_employee(employee_id)
        if not state:
            raise NotFoundError(f"No salary record for employee {employee_id}")

        deduction = self._calculator.absence_deduction(state.base_salary, config.deduction_percentage)

        if record and record.deduction_amount > 0:
            # Same-day re-run: the old amount stays in the running total.
            logger.warning(
                "Employee %s already has a %s deduction for %s; applying %s again on top of total %s",
                employee_id, record.deduction_amount, today, deduction, state.total_deductions,
            )

        # Record first, then charge: a failed insert must leave the salary untouched.
        if record is None:
            self._attendance.create(
                employee_id=employee_id,
                work_date=today,
                status=AttendanceStatus.ABSENT,
                deduction_amount=deduction,
            )
        else:
            self._attendance.update_deduction(attendance_id=record.attendance_id, deduction_amount=deduction)

        updated = self._calculator.apply_deduction(state, deduction)
        if not self._salaries.save_totals(updated):
            raise NotFoundError(f"Salary record for employee {employee_id} disappeared")

        logger.info("Applied deduction of %s for absent employee %s", deduction, employee_id)
        return True


class DeductionRecalculator:
    """Rebuild every deduction from the absence history.

    Used after the deduction percentage changes: totals start from zero and each
    absent record is re-priced with the current percentage. Running it twice in
    a row yields the same totals.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        salaries: SalaryRepository,
        settings: SettingsService,
        *,
        calculator: Optional[DeductionCalculator] = None,
    ):
        self._attendance = attendance
        self._salaries = salaries
        self._settings = settings
        self._calculator = calculator or PercentageOfBaseCalculator()

    def run(self, *, config: Optional[SettlementConfig] = None) -> RecalculationResult:
        config = config or self._settings.load_settlement_config()
        pct = config.deduction_percentage
        logger.info("Recalculating all historical deductions at %s%%", pct)

        states = {s.employee_id: s for s in self._salaries.list_all()}
        records = self._attendance.list_by_status(AttendanceStatus.ABSENT)
        logger.info("Found %d absent records across %d salary records", len(records), len(states))

        totals = {employee_id: Decimal("0") for employee_id in states}
        attendance_updated = 0
        for record in records:
            state = states.get(record.employee_id)
            if state is None:
                logger.error(
                    "Skipping attendance %s: no salary record for employee %s",
                    record.attendance_id, record.employee_id,
                )
                continue

            deduction = self._calculator.absence_deduction(state.base_salary, pct)
            try:
                self._attendance.update_deduction(attendance_id=record.attendance_id, deduction_amount=deduction)
            except PER_RECORD_ERRORS:
                logger.exception("Error updating attendance %s", record.attendance_id)
                continue

            totals[record.employee_id] += deduction
            attendance_updated += 1

        salaries_updated = 0
        for employee_id, state in states.items():
            updated = self._calculator.with_total(state, totals[employee_id])
            try:
                saved = self._salaries.save_totals(updated)
            except PER_RECORD_ERRORS:
                logger.exception("Error updating salary for employee %s", employee_id)
                continue
            if saved:
                salaries_updated += 1
                logger.debug(
                    "Employee %s: total deductions %s, current salary %s",
                    employee_id, updated.total_deductions, updated.current_salary,
                )

        logger.info(
            "Recalculation complete. Updated %d attendance records and %d salary records",
            attendance_updated, salaries_updated,
        )
        return RecalculationResult(
            success=True,
            attendance_updated=attendance_updated,
            salaries_updated=salaries_updated,
            message=f"Successfully recalculated {attendance_updated} deductions across {salaries_updated} employees",
        )


class MonthlySalaryReset:
    """Zero every employee's deductions and restore current salary to base."""

    def __init__(
        self,
        salaries: SalaryRepository,
        settings: SettingsService,
        *,
        calculator: Optional[DeductionCalculator] = None,
    ):
        self._salaries = salaries
        self._settings = settings
        self._calculator = calculator or PercentageOfBaseCalculator()

    def run(self, *, now: Optional[datetime] = None) -> ResetResult:
        now = now or now_local()
        states = self._salaries.list_all()
        logger.info("Starting monthly salary reset for %s: %d salary records", f"{now:%Y-%m}", len(states))

        reset = 0
        for state in states:
            try:
                self._salaries.save_totals(self._calculator.reset(state))
            except PER_RECORD_ERRORS:
                logger.exception("Error resetting salary for employee %s", state.employee_id)
                continue
            reset += 1

        self._settings.record_run(
            SETTING_MONTHLY_RESET_LAST_RUN, now, description="Last time the monthly salary reset ran",
        )

        logger.info("Monthly salary reset complete. Reset %d out of %d records", reset, len(states))
        return ResetResult(
            success=True,
            reset=reset,
            total=len(states),
            message=f"Successfully reset {reset} employee salaries for the new month",
        )
