from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SalaryState:
    """Per-employee salary totals.

    `current_salary` is derived (base minus deductions, floored at zero); use a
    `DeductionCalculator` to produce new states instead of building them by hand.
    """

    employee_id: int
    base_salary: Decimal
    total_deductions: Decimal
    current_salary: Decimal
    daily_rate: Decimal = Decimal("0.00")
