"""Clock — verifies the system and fixed time sources."""

from datetime import date, datetime, timezone

from dating_api.core.clock import FixedClock, SystemClock


def test_system_clock_is_utc_aware():
    now = SystemClock().now()
    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


def test_fixed_clock_returns_instant():
    instant = datetime(2024, 2, 29, 23, 30, tzinfo=timezone.utc)
    clock = FixedClock(instant)
    assert clock.now() == instant
    assert clock.today() == date(2024, 2, 29)
