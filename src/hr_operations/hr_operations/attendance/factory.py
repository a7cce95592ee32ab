from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta

from .strategies.base import CheckInStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the check-in strategy based on the work start time."""

    def for_checkin(self, *, now: datetime, work_start: time, grace_minutes: int) -> CheckInStrategy:
        start = datetime.combine(now.date(), work_start)
        if now <= start + timedelta(minutes=grace_minutes):
            return PresentStrategy()
        return LateStrategy()
