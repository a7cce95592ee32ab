"""Run a payroll job without going through HTTP (for cron).

Example crontab (daily settlement at 23:59, monthly reset on the 1st):

    59 23 * * *  cd /srv/hr-operations && python scripts/run_job.py process-daily-attendance
    5 0 1 * *    cd /srv/hr-operations && python scripts/run_job.py reset-monthly-salary
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.hr_operations.hr_operations.main import configure_logging, container_from_settings, load_settings

JOBS = {
    "process-daily-attendance": lambda c: c.settlement_job.run(),
    "recalculate-deductions": lambda c: c.deduction_recalculator.run(),
    "reset-monthly-salary": lambda c: c.monthly_reset.run(),
    "check-suspension-expiry": lambda c: c.suspension_service.expire_due(),
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run an HR payroll job once")
    parser.add_argument("job", choices=sorted(JOBS), help="Job to run")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings)

    try:
        result = JOBS[args.job](container_from_settings(settings))
    except Exception as e:
        logging.getLogger("run_job").exception("Job %s failed", args.job)
        print(json.dumps({"success": False, "error": str(e)}))
        return 1

    print(json.dumps(result.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
