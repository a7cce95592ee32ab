from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import SalaryState


class SalaryRepository(Protocol):
    def get_for_employee(self, employee_id: int) -> Optional[SalaryState]:
        raise NotImplementedError

    def list_all(self) -> Sequence[SalaryState]:
        raise NotImplementedError

    def save_totals(self, state: SalaryState) -> bool:
        """Persist `total_deductions` and `current_salary` for one employee."""

        raise NotImplementedError

    def upsert_base(self, *, employee_id: int, base_salary: Decimal, daily_rate: Decimal) -> None:
        """Create or replace the base salary; deductions start over at zero."""

        raise NotImplementedError
