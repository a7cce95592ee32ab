import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_operations"),
}

# Shared secret expected in the X-Api-Token header (scheduler, admin UI back end)
API_TOKEN = os.getenv("API_TOKEN", "dev-api-token")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Fallbacks used when a system_settings row is missing
SETTLEMENT_DEFAULTS = {
    "absence_deduction_percentage": os.getenv("ABSENCE_DEDUCTION_PERCENTAGE", "100"),
    "working_days_per_month": os.getenv("WORKING_DAYS_PER_MONTH", "22"),
    "attendance_cutoff_hour": os.getenv("ATTENDANCE_CUTOFF_HOUR", "23"),
    "non_working_days": os.getenv("NON_WORKING_DAYS", "5,6"),
}

WORK_START = os.getenv("WORK_START", "09:00")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "15"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
