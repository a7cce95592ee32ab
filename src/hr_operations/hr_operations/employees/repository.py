from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee roster.

    Services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_roster(self) -> Sequence[Employee]:
        """Active employees, ordered by id."""

        raise NotImplementedError

    def mark_suspended(self, employee_id: int, *, until: datetime) -> bool:
        raise NotImplementedError

    def clear_suspensions(self, employee_ids: Sequence[int]) -> int:
        raise NotImplementedError
