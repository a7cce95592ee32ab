from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import require_int_range, require_percentage
from ..core import constants as c
from ..core.exceptions import ConfigurationError, ValidationError
from .model import SettlementConfig
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

SETTLEMENT_KEYS = (
    c.SETTING_DEDUCTION_PERCENTAGE,
    c.SETTING_WORKING_DAYS,
    c.SETTING_CUTOFF_HOUR,
    c.SETTING_NON_WORKING_DAYS,
)

LAST_RUN_KEYS = (c.SETTING_ATTENDANCE_LAST_RUN, c.SETTING_MONTHLY_RESET_LAST_RUN)

BUILTIN_DEFAULTS = {
    c.SETTING_DEDUCTION_PERCENTAGE: str(c.DEFAULT_DEDUCTION_PERCENTAGE),
    c.SETTING_WORKING_DAYS: str(c.DEFAULT_WORKING_DAYS_PER_MONTH),
    c.SETTING_CUTOFF_HOUR: str(c.DEFAULT_CUTOFF_HOUR),
    c.SETTING_NON_WORKING_DAYS: ",".join(str(d) for d in c.DEFAULT_NON_WORKING_DAYS),
}


def parse_weekdays(value: str) -> frozenset[int]:
    days = set()
    for part in (value or "").split(","):
        part = part.strip()
        if not part:
            continue
        day = int(part)
        if day < 0 or day > 6:
            raise ValueError(f"weekday out of range: {day}")
        days.add(day)
    return frozenset(days)


def format_weekdays(days: Iterable[int]) -> str:
    return ",".join(str(d) for d in sorted(set(days)))


class SettingsService:
    """Reads and writes the settings that drive payroll jobs.

    Missing rows fall back to `defaults` (from the active config module), then to
    the built-in defaults. Malformed rows raise ConfigurationError: a job must
    not guess a deduction percentage.
    """

    def __init__(self, settings: SettingsRepository, *, defaults: Optional[Mapping[str, str]] = None):
        self._settings = settings
        self._defaults = {**BUILTIN_DEFAULTS, **{k: str(v) for k, v in (defaults or {}).items()}}

    def load_settlement_config(self) -> SettlementConfig:
        stored = self._settings.get_many(SETTLEMENT_KEYS)
        raw = {key: stored.get(key, self._defaults[key]) for key in SETTLEMENT_KEYS}

        try:
            pct = Decimal(raw[c.SETTING_DEDUCTION_PERCENTAGE])
            working_days = int(raw[c.SETTING_WORKING_DAYS])
            cutoff_hour = int(raw[c.SETTING_CUTOFF_HOUR])
            non_working = parse_weekdays(raw[c.SETTING_NON_WORKING_DAYS])
        except (InvalidOperation, ValueError) as e:
            raise ConfigurationError(f"Malformed settlement settings: {e}") from e

        if not pct.is_finite() or pct < 0 or pct > 100:
            raise ConfigurationError(f"{c.SETTING_DEDUCTION_PERCENTAGE} out of range: {pct}")
        if working_days <= 0:
            raise ConfigurationError(f"{c.SETTING_WORKING_DAYS} must be positive")
        if cutoff_hour < 0 or cutoff_hour > 23:
            raise ConfigurationError(f"{c.SETTING_CUTOFF_HOUR} out of range: {cutoff_hour}")

        return SettlementConfig(
            deduction_percentage=pct,
            working_days_per_month=working_days,
            cutoff_hour=cutoff_hour,
            non_working_days=non_working,
        )

    def update_settlement_settings(
        self,
        *,
        deduction_percentage=None,
        working_days_per_month=None,
        cutoff_hour=None,
        non_working_days=None,
    ) -> SettlementConfig:
        """Validate everything first, then write; a bad field writes nothing."""

        updates: dict[str, str] = {}
        if deduction_percentage is not None:
            pct = require_percentage(deduction_percentage, "Deduction percentage")
            updates[c.SETTING_DEDUCTION_PERCENTAGE] = str(pct)
        if working_days_per_month is not None:
            days = require_int_range(working_days_per_month, "Working days per month", 1, 31)
            updates[c.SETTING_WORKING_DAYS] = str(days)
        if cutoff_hour is not None:
            hour = require_int_range(cutoff_hour, "Cutoff hour", 0, 23)
            updates[c.SETTING_CUTOFF_HOUR] = str(hour)
        if non_working_days is not None:
            if isinstance(non_working_days, str):
                non_working_days = [d for d in non_working_days.split(",") if d.strip()]
            elif not isinstance(non_working_days, (list, tuple, set, frozenset)):
                raise ValidationError("Non-working days must be a list or a comma-separated string")
            weekdays = [require_int_range(d, "Non-working day", 0, 6) for d in non_working_days]
            updates[c.SETTING_NON_WORKING_DAYS] = format_weekdays(weekdays)

        if not updates:
            raise ValidationError("Nothing to update")

        for key, value in updates.items():
            self._settings.upsert(key, value)
        logger.info("Settlement settings updated: %s", updates)

        return self.load_settlement_config()

    def record_run(self, key: str, when: datetime, *, description: str) -> None:
        self._settings.upsert(key, when.isoformat(timespec="seconds"), description=description)

    def last_run(self, key: str) -> Optional[datetime]:
        value = self._settings.get(key)
        if not value:
            return None
        try:
            return parse_iso_datetime(value)
        except ValueError:
            logger.warning("Ignoring malformed timestamp in setting %s: %r", key, value)
            return None

    def last_runs(self) -> dict[str, Optional[str]]:
        runs = {}
        for key in LAST_RUN_KEYS:
            when = self.last_run(key)
            runs[key] = when.isoformat() if when else None
        return runs
