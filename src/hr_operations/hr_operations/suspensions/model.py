from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import SuspensionStatus


@dataclass(frozen=True)
class Suspension:
    suspension_id: int
    employee_id: int
    reason: str
    status: SuspensionStatus
    suspension_end: datetime
    suspension_start: Optional[datetime] = None
    salary_deduction_percentage: Decimal = Decimal("0")

    def to_dict(self) -> dict:
        return {
            "suspension_id": self.suspension_id,
            "employee_id": self.employee_id,
            "reason": self.reason,
            "status": self.status.value,
            "suspension_start": self.suspension_start.isoformat() if self.suspension_start else None,
            "suspension_end": self.suspension_end.isoformat(),
            "salary_deduction_percentage": str(self.salary_deduction_percentage),
        }


@dataclass(frozen=True)
class ExpiryResult:
    success: bool
    count: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)
