from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import FrozenSet


@dataclass(frozen=True)
class SettlementConfig:
    """Explicit configuration handed to the settlement job.

    non_working_days holds `date.weekday()` numbers (Monday=0 ... Sunday=6).
    """

    deduction_percentage: Decimal
    working_days_per_month: int
    cutoff_hour: int
    non_working_days: FrozenSet[int]

    def is_working_day(self, day: date) -> bool:
        return day.weekday() not in self.non_working_days

    def is_after_cutoff(self, now: datetime) -> bool:
        return now.hour >= self.cutoff_hour

    def to_dict(self) -> dict:
        return {
            "deduction_percentage": str(self.deduction_percentage),
            "working_days_per_month": self.working_days_per_month,
            "cutoff_hour": self.cutoff_hour,
            "non_working_days": sorted(self.non_working_days),
        }
