"""Tests for the controlid time source helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from intacct_functions.base.clock import Clock, FixedClock, SystemClock, format_timestamp


def test_system_clock_is_utc_aware():
    now = SystemClock().now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)


def test_fixed_clock_treats_naive_datetimes_as_utc():
    clock = FixedClock(datetime(2024, 1, 2, 3, 4, 5))
    assert clock.now() == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_clocks_satisfy_protocol():
    assert isinstance(SystemClock(), Clock)
    assert isinstance(FixedClock(datetime(2024, 1, 1)), Clock)


def test_format_timestamp_converts_to_utc():
    moment = datetime(2024, 1, 1, 23, 30, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert format_timestamp(moment, "%Y-%m-%dT%H:%M:%SZ") == "2024-01-02T04:30:00Z"
