from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest
from mysql.connector import Error as MySQLError

from src.hr_operations.hr_operations.attendance.model import AttendanceRecord
from src.hr_operations.hr_operations.core.enums import AttendanceStatus, SuspensionStatus
from src.hr_operations.hr_operations.employees.model import Employee
from src.hr_operations.hr_operations.salary.model import SalaryState
from src.hr_operations.hr_operations.suspensions.model import Suspension


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self.by_id = {e.employee_id: e for e in employees}
        self.fail_listing = False

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def list_roster(self):
        if self.fail_listing:
            raise MySQLError("connection refused")
        return [e for _, e in sorted(self.by_id.items()) if e.is_active]

    def mark_suspended(self, employee_id: int, *, until: datetime) -> bool:
        e = self.by_id.get(employee_id)
        if not e:
            return False
        self.by_id[employee_id] = replace(e, is_suspended=True, suspension_end_date=until)
        return True

    def clear_suspensions(self, employee_ids) -> int:
        count = 0
        for employee_id in employee_ids:
            e = self.by_id.get(employee_id)
            if e:
                self.by_id[employee_id] = replace(e, is_suspended=False, suspension_end_date=None)
                count += 1
        return count


class InMemoryAttendance:
    def __init__(self):
        self.by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self.fail_reads_for: set[int] = set()
        self.fail_creates_for: set[int] = set()

    def add(self, employee_id: int, work_date: date, status: AttendanceStatus, deduction=Decimal("0.00")):
        self.create(employee_id=employee_id, work_date=work_date, status=status, deduction_amount=Decimal(deduction))
        return self.by_key[(employee_id, work_date)]

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        if employee_id in self.fail_reads_for:
            raise MySQLError("lost connection")
        return self.by_key.get((employee_id, work_date))

    def get_recent_for_employee(self, employee_id: int, limit: int):
        items = [r for r in self.by_key.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items[:limit]

    def list_by_status(self, status: AttendanceStatus):
        items = [r for r in self.by_key.values() if r.status == status]
        items.sort(key=lambda r: (r.work_date, r.attendance_id))
        return items

    def create(self, *, employee_id, work_date, status, deduction_amount=Decimal("0.00"), check_in_time=None) -> int:
        if employee_id in self.fail_creates_for or (employee_id, work_date) in self.by_key:
            raise MySQLError("Duplicate entry for key 'uq_attendance_employee_date'")
        self._id += 1
        self.by_key[(employee_id, work_date)] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            deduction_amount=deduction_amount,
            check_in_time=check_in_time,
        )
        return self._id

    def update_deduction(self, *, attendance_id: int, deduction_amount: Decimal) -> bool:
        for key, r in self.by_key.items():
            if r.attendance_id == attendance_id:
                self.by_key[key] = replace(r, deduction_amount=deduction_amount)
                return True
        return False


class InMemorySalaries:
    def __init__(self):
        self.by_employee: dict[int, SalaryState] = {}
        self.fail_saves_for: set[int] = set()

    def add(self, employee_id: int, base, total="0"):
        base = Decimal(str(base))
        total = Decimal(str(total))
        self.by_employee[employee_id] = SalaryState(
            employee_id=employee_id,
            base_salary=base,
            total_deductions=total,
            current_salary=max(Decimal("0"), base - total),
        )

    def get_for_employee(self, employee_id: int) -> Optional[SalaryState]:
        return self.by_employee.get(employee_id)

    def list_all(self):
        return [s for _, s in sorted(self.by_employee.items())]

    def save_totals(self, state: SalaryState) -> bool:
        if state.employee_id in self.fail_saves_for:
            raise MySQLError("Lock wait timeout exceeded")
        current = self.by_employee.get(state.employee_id)
        if not current:
            return False
        self.by_employee[state.employee_id] = replace(
            current, total_deductions=state.total_deductions, current_salary=state.current_salary
        )
        return True

    def upsert_base(self, *, employee_id: int, base_salary: Decimal, daily_rate: Decimal) -> None:
        self.by_employee[employee_id] = SalaryState(
            employee_id=employee_id,
            base_salary=base_salary,
            total_deductions=Decimal("0"),
            current_salary=base_salary,
            daily_rate=daily_rate,
        )


class InMemorySettings:
    def __init__(self, **values: str):
        self.values: dict[str, str] = dict(values)

    def get_many(self, keys):
        return {k: self.values[k] for k in keys if k in self.values}

    def get(self, key: str):
        return self.values.get(key)

    def upsert(self, key: str, value: str, *, description=None) -> None:
        self.values[key] = str(value)


class InMemorySuspensions:
    def __init__(self):
        self.by_id: dict[int, Suspension] = {}
        self._id = 0

    def get_by_id(self, suspension_id: int):
        return self.by_id.get(suspension_id)

    def create(self, *, employee_id, reason, suspension_end, salary_deduction_percentage) -> int:
        self._id += 1
        self.by_id[self._id] = Suspension(
            suspension_id=self._id,
            employee_id=employee_id,
            reason=reason,
            status=SuspensionStatus.PENDING,
            suspension_end=suspension_end,
            salary_deduction_percentage=Decimal(salary_deduction_percentage),
        )
        return self._id

    def activate(self, *, suspension_id: int, started_at: datetime) -> bool:
        s = self.by_id[suspension_id]
        self.by_id[suspension_id] = replace(s, status=SuspensionStatus.ACTIVE, suspension_start=started_at)
        return True

    def set_status(self, *, suspension_id: int, status: SuspensionStatus) -> bool:
        self.by_id[suspension_id] = replace(self.by_id[suspension_id], status=status)
        return True

    def list_expired(self, *, now: datetime):
        return [
            s for s in self.by_id.values()
            if s.status == SuspensionStatus.ACTIVE and s.suspension_end < now
        ]

    def complete_many(self, suspension_ids) -> int:
        for suspension_id in suspension_ids:
            self.set_status(suspension_id=suspension_id, status=SuspensionStatus.COMPLETED)
        return len(suspension_ids)


def make_employee(employee_id: int, **kwargs) -> Employee:
    return Employee(
        employee_id=employee_id,
        full_name=kwargs.pop("full_name", f"Employee {employee_id}"),
        email=kwargs.pop("email", f"employee{employee_id}@example.com"),
        **kwargs,
    )


@pytest.fixture
def employees():
    return InMemoryEmployees(make_employee(1), make_employee(2), make_employee(3))


@pytest.fixture
def attendance():
    return InMemoryAttendance()


@pytest.fixture
def salaries():
    repo = InMemorySalaries()
    repo.add(1, "100000")
    repo.add(2, "150000")
    repo.add(3, "80000")
    return repo


@pytest.fixture
def settings_repo():
    return InMemorySettings()


@pytest.fixture
def suspensions():
    return InMemorySuspensions()
