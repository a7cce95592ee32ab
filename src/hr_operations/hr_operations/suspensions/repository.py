from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import SuspensionStatus
from .model import Suspension


class SuspensionRepository(Protocol):
    def get_by_id(self, suspension_id: int) -> Optional[Suspension]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        reason: str,
        suspension_end: datetime,
        salary_deduction_percentage: Decimal,
    ) -> int:
        raise NotImplementedError

    def activate(self, *, suspension_id: int, started_at: datetime) -> bool:
        raise NotImplementedError

    def set_status(self, *, suspension_id: int, status: SuspensionStatus) -> bool:
        raise NotImplementedError

    def list_expired(self, *, now: datetime) -> Sequence[Suspension]:
        """Active suspensions whose end time is strictly before `now`."""

        raise NotImplementedError

    def complete_many(self, suspension_ids: Sequence[int]) -> int:
        raise NotImplementedError
