from decimal import Decimal

import pytest

from src.hr_operations.hr_operations.salary.calculator.percentage_calculator import PercentageOfBaseCalculator
from src.hr_operations.hr_operations.salary.model import SalaryState


@pytest.mark.parametrize(
    "base, pct, expected",
    [
        ("100000", "100", "100000.00"),
        ("100000", "30", "30000.00"),
        ("100000", "0", "0.00"),
        ("33333.33", "33.33", "11110.00"),
        ("10.05", "50", "5.03"),
    ],
)
def test_absence_deduction_is_rounded_percentage_of_base(base, pct, expected):
    calc = PercentageOfBaseCalculator()
    assert calc.absence_deduction(Decimal(base), Decimal(pct)) == Decimal(expected)


def test_current_salary_is_floored_at_zero():
    calc = PercentageOfBaseCalculator()
    state = SalaryState(
        employee_id=1,
        base_salary=Decimal("100000"),
        total_deductions=Decimal("90000"),
        current_salary=Decimal("10000"),
    )

    updated = calc.apply_deduction(state, Decimal("30000"))

    assert updated.total_deductions == Decimal("120000.00")
    assert updated.current_salary == Decimal("0.00")
    assert calc.reset(updated).current_salary == Decimal("100000.00")


def test_daily_rate_divides_by_working_days():
    assert PercentageOfBaseCalculator.daily_rate(Decimal("100000"), 22) == Decimal("4545.45")
