from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.hr_operations.hr_operations.common.datetime_utils import parse_hhmm, parse_iso_datetime


def test_naive_timestamp_is_kept_as_is():
    assert parse_iso_datetime(" 2026-10-19T23:59:00 ") == datetime(2026, 10, 19, 23, 59)


def test_offset_timestamp_becomes_naive_local_time():
    parsed = parse_iso_datetime("2099-01-01T00:00:00+01:00")

    expected = datetime(2099, 1, 1, tzinfo=timezone(timedelta(hours=1))).astimezone().replace(tzinfo=None)
    assert parsed.tzinfo is None
    assert parsed == expected
    assert parsed > datetime(2098, 12, 30)


def test_garbage_raises_value_error():
    with pytest.raises(ValueError):
        parse_iso_datetime("next tuesday")
    with pytest.raises(ValueError):
        parse_hhmm("9am")
