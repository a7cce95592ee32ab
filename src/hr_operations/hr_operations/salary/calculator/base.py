from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from decimal import Decimal

from ...common.money import round2
from ..model import SalaryState


class DeductionCalculator(ABC):
    """Calculator interface (Strategy Pattern for absence deductions)."""

    @abstractmethod
    def absence_deduction(self, base_salary: Decimal, percentage: Decimal) -> Decimal:
        raise NotImplementedError

    def current_salary(self, base_salary: Decimal, total_deductions: Decimal) -> Decimal:
        return max(Decimal("0.00"), round2(base_salary - total_deductions))

    def with_total(self, state: SalaryState, total_deductions: Decimal) -> SalaryState:
        total = round2(total_deductions)
        return replace(
            state,
            total_deductions=total,
            current_salary=self.current_salary(state.base_salary, total),
        )

    def apply_deduction(self, state: SalaryState, amount: Decimal) -> SalaryState:
        return self.with_total(state, state.total_deductions + amount)

    def reset(self, state: SalaryState) -> SalaryState:
        return self.with_total(state, Decimal("0"))
