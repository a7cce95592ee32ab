from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the roster.

    Note: Onboarding owns this record; payroll jobs only read it. Suspension
    workflows are the only writers of `is_suspended`.
    """

    employee_id: int
    full_name: str
    email: str
    is_active: bool = True
    is_suspended: bool = False
    suspension_end_date: Optional[datetime] = None
