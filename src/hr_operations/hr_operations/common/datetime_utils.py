from __future__ import annotations

from datetime import datetime, time


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO timestamp into naive local time.

    Values carrying a UTC offset are converted to local time first, so they
    compare cleanly against now_local().
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_hhmm(value: str) -> time:
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()
