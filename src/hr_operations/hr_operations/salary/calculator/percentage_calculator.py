from __future__ import annotations

from decimal import Decimal

from ...common.money import round2
from .base import DeductionCalculator


class PercentageOfBaseCalculator(DeductionCalculator):
    """Standard rule: each absence withholds `percentage` % of the base salary."""

    def absence_deduction(self, base_salary: Decimal, percentage: Decimal) -> Decimal:
        return round2(base_salary * percentage / Decimal("100"))

    @staticmethod
    def daily_rate(base_salary: Decimal, working_days: int) -> Decimal:
        # Display-only figure; the deduction above does not use it.
        return round2(base_salary / Decimal(int(working_days)))
