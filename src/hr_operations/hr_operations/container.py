from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import parse_hhmm
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_WORK_START
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .salary.calculator.percentage_calculator import PercentageOfBaseCalculator
from .salary.mysql_salary_repository import MySQLSalaryRepository
from .salary.repository import SalaryRepository
from .salary.service import SalaryService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .settlement.service import AttendanceSettlementJob, DeductionRecalculator, MonthlySalaryReset
from .suspensions.mysql_suspension_repository import MySQLSuspensionRepository
from .suspensions.repository import SuspensionRepository
from .suspensions.service import SuspensionService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    salaries_repo: SalaryRepository
    settings_repo: SettingsRepository
    suspensions_repo: SuspensionRepository

    settings_service: SettingsService
    attendance_service: AttendanceService
    salary_service: SalaryService
    suspension_service: SuspensionService
    settlement_job: AttendanceSettlementJob
    deduction_recalculator: DeductionRecalculator
    monthly_reset: MonthlySalaryReset


def wire(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    salaries_repo: SalaryRepository,
    settings_repo: SettingsRepository,
    suspensions_repo: SuspensionRepository,
    settlement_defaults: Optional[Mapping[str, str]] = None,
    work_start: str = DEFAULT_WORK_START,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""

    calculator = PercentageOfBaseCalculator()
    settings_service = SettingsService(settings_repo, defaults=settlement_defaults)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        salaries_repo=salaries_repo,
        settings_repo=settings_repo,
        suspensions_repo=suspensions_repo,
        settings_service=settings_service,
        attendance_service=AttendanceService(
            attendance_repo,
            employees_repo,
            work_start=parse_hhmm(work_start),
            grace_minutes=grace_minutes,
        ),
        salary_service=SalaryService(salaries_repo, employees_repo, settings_service, calculator=calculator),
        suspension_service=SuspensionService(suspensions_repo, employees_repo, salaries_repo, calculator=calculator),
        settlement_job=AttendanceSettlementJob(
            employees_repo, attendance_repo, salaries_repo, settings_service, calculator=calculator
        ),
        deduction_recalculator=DeductionRecalculator(
            attendance_repo, salaries_repo, settings_service, calculator=calculator
        ),
        monthly_reset=MonthlySalaryReset(salaries_repo, settings_service, calculator=calculator),
    )


def build_container(
    *,
    db_config: dict,
    settlement_defaults: Optional[Mapping[str, str]] = None,
    work_start: str = DEFAULT_WORK_START,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        suspensions_repo=MySQLSuspensionRepository(conn),
        settlement_defaults=settlement_defaults,
        work_start=work_start,
        grace_minutes=grace_minutes,
    )
