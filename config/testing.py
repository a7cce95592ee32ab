import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_operations_test"),
}

API_TOKEN = "test-token"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SETTLEMENT_DEFAULTS = {
    "absence_deduction_percentage": "100",
    "working_days_per_month": "22",
    "attendance_cutoff_hour": "23",
    "non_working_days": "5,6",
}

WORK_START = "09:00"
LATE_GRACE_MINUTES = 15

AUTO_INIT_DB = False
AUTO_SEED_DB = False
