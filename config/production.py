import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_operations"),
}

# Empty token rejects every API call until one is configured.
API_TOKEN = os.getenv("API_TOKEN", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SETTLEMENT_DEFAULTS = {
    "absence_deduction_percentage": os.getenv("ABSENCE_DEDUCTION_PERCENTAGE", "100"),
    "working_days_per_month": os.getenv("WORKING_DAYS_PER_MONTH", "22"),
    "attendance_cutoff_hour": os.getenv("ATTENDANCE_CUTOFF_HOUR", "23"),
    "non_working_days": os.getenv("NON_WORKING_DAYS", "5,6"),
}

WORK_START = os.getenv("WORK_START", "09:00")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "15"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
