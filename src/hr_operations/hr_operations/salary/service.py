from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_amount
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..settings.service import SettingsService
from .calculator.base import DeductionCalculator
from .calculator.percentage_calculator import PercentageOfBaseCalculator
from .model import SalaryState
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class SalaryService:
    """Manual salary administration (set base salary, clear deductions)."""

    def __init__(
        self,
        salaries: SalaryRepository,
        employees: EmployeeRepository,
        settings: SettingsService,
        *,
        calculator: Optional[DeductionCalculator] = None,
    ):
        self._salaries = salaries
        self._employees = employees
        self._settings = settings
        self._calculator = calculator or PercentageOfBaseCalculator()

    def get(self, employee_id: int) -> SalaryState:
        state = self._salaries.get_for_employee(employee_id)
        if not state:
            raise NotFoundError("No salary record for this employee")
        return state

    def set_base_salary(self, employee_id: int, base_salary) -> SalaryState:
        amount = require_amount(base_salary, "Base salary")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        working_days = self._settings.load_settlement_config().working_days_per_month
        daily_rate = PercentageOfBaseCalculator.daily_rate(amount, working_days)

        self._salaries.upsert_base(employee_id=employee_id, base_salary=amount, daily_rate=daily_rate)
        logger.info("Base salary for employee %s set to %s (daily rate %s)", employee_id, amount, daily_rate)
        return self.get(employee_id)

    def clear_deductions(self, employee_id: int) -> SalaryState:
        state = self._calculator.reset(self.get(employee_id))
        self._salaries.save_totals(state)
        logger.info("Deductions cleared for employee %s", employee_id)
        return state

    @staticmethod
    def to_dict(state: SalaryState) -> dict:
        return {
            "employee_id": state.employee_id,
            "base_salary": str(state.base_salary),
            "daily_rate": str(state.daily_rate),
            "total_deductions": str(state.total_deductions),
            "current_salary": str(state.current_salary),
        }
