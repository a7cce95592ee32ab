"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_DEDUCTION_PERCENTAGE = Decimal("100")
DEFAULT_WORKING_DAYS_PER_MONTH = 22
DEFAULT_CUTOFF_HOUR = 23
DEFAULT_NON_WORKING_DAYS = (5, 6)
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_LATE_GRACE_MINUTES = 15
DEFAULT_WORK_START = "09:00"

SETTING_DEDUCTION_PERCENTAGE = "absence_deduction_percentage"
SETTING_WORKING_DAYS = "working_days_per_month"
SETTING_CUTOFF_HOUR = "attendance_cutoff_hour"
SETTING_NON_WORKING_DAYS = "non_working_days"
SETTING_ATTENDANCE_LAST_RUN = "daily_attendance_last_run"
SETTING_MONTHLY_RESET_LAST_RUN = "monthly_reset_last_run"
