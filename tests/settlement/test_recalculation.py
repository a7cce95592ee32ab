from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.hr_operations.hr_operations.core.enums import AttendanceStatus
from src.hr_operations.hr_operations.settings.service import SettingsService
from src.hr_operations.hr_operations.settlement.service import DeductionRecalculator


def _recalculator(attendance, salaries, settings_repo):
    return DeductionRecalculator(attendance, salaries, SettingsService(settings_repo))


def _totals(salaries):
    return {s.employee_id: (s.total_deductions, s.current_salary) for s in salaries.list_all()}


def test_percentage_change_reprices_every_absence(attendance, salaries, settings_repo):
    attendance.add(1, date(2026, 10, 5), AttendanceStatus.ABSENT, "100000.00")
    attendance.add(1, date(2026, 10, 6), AttendanceStatus.ABSENT, "100000.00")
    attendance.add(2, date(2026, 10, 6), AttendanceStatus.ABSENT, "150000.00")
    attendance.add(3, date(2026, 10, 6), AttendanceStatus.PRESENT)
    salaries.add(1, "100000", total="200000")
    salaries.add(2, "150000", total="150000")
    settings_repo.upsert("absence_deduction_percentage", "30")

    result = _recalculator(attendance, salaries, settings_repo).run()

    assert result.to_dict() == {
        "success": True,
        "attendance_updated": 3,
        "salaries_updated": 3,
        "message": "Successfully recalculated 3 deductions across 3 employees",
    }
    assert _totals(salaries) == {
        1: (Decimal("60000.00"), Decimal("40000.00")),
        2: (Decimal("45000.00"), Decimal("105000.00")),
        3: (Decimal("0.00"), Decimal("80000.00")),
    }
    assert attendance.get_for_employee_and_date(1, date(2026, 10, 5)).deduction_amount == Decimal("30000.00")
    assert attendance.get_for_employee_and_date(3, date(2026, 10, 6)).deduction_amount == Decimal("0.00")


def test_recalculation_is_idempotent(attendance, salaries, settings_repo):
    attendance.add(1, date(2026, 10, 5), AttendanceStatus.ABSENT, "1.00")
    attendance.add(2, date(2026, 10, 5), AttendanceStatus.ABSENT, "1.00")
    attendance.add(2, date(2026, 10, 7), AttendanceStatus.ABSENT, "1.00")
    settings_repo.upsert("absence_deduction_percentage", "12.5")
    recalculator = _recalculator(attendance, salaries, settings_repo)

    recalculator.run()
    first = _totals(salaries)
    recalculator.run()

    assert _totals(salaries) == first
    assert first[2] == (Decimal("37500.00"), Decimal("112500.00"))


def test_manual_extra_deductions_are_dropped(attendance, salaries, settings_repo):
    salaries.add(3, "80000", total="12345")

    _recalculator(attendance, salaries, settings_repo).run()

    assert _totals(salaries)[3] == (Decimal("0.00"), Decimal("80000.00"))


def test_absence_without_salary_record_is_skipped(attendance, salaries, settings_repo, caplog):
    attendance.add(9, date(2026, 10, 5), AttendanceStatus.ABSENT, "500.00")
    attendance.add(1, date(2026, 10, 5), AttendanceStatus.ABSENT, "500.00")

    result = _recalculator(attendance, salaries, settings_repo).run()

    assert result.attendance_updated == 1
    assert attendance.get_for_employee_and_date(9, date(2026, 10, 5)).deduction_amount == Decimal("500.00")
    assert "no salary record for employee 9" in caplog.text


def test_failed_salary_write_is_skipped(attendance, salaries, settings_repo):
    attendance.add(1, date(2026, 10, 5), AttendanceStatus.ABSENT)
    salaries.fail_saves_for.add(2)

    result = _recalculator(attendance, salaries, settings_repo).run()

    assert result.salaries_updated == 2
    assert salaries.get_for_employee(1).current_salary == Decimal("0.00")
