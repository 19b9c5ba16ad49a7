"""Unit tests for issuance clocks."""

from datetime import datetime, timedelta, timezone, UTC

from auth.clock import Clock, FixedClock, SystemClock


def test_system_clock_is_aware_utc():
    """Test: System clock returns timezone-aware UTC now."""
    now = SystemClock().now()

    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert abs(datetime.now(UTC) - now) < timedelta(seconds=5)


def test_fixed_clock_from_epoch_seconds():
    """Test: Epoch seconds are read as UTC."""
    clock = FixedClock(1655383113)

    assert clock.now() == datetime(2022, 6, 16, 12, 38, 33, tzinfo=UTC)
    assert clock.now() == clock.now()


def test_fixed_clock_naive_datetime_is_utc():
    """Test: Naive datetimes are taken as UTC."""
    clock = FixedClock(datetime(2022, 6, 16, 12, 38, 33))

    assert clock.now().timestamp() == 1655383113


def test_fixed_clock_keeps_timezone():
    """Test: Aware datetimes keep their instant."""
    plus_two = timezone(timedelta(hours=2))
    clock = FixedClock(datetime(2022, 6, 16, 14, 38, 33, tzinfo=plus_two))

    assert clock.now().timestamp() == 1655383113


def test_clocks_satisfy_protocol():
    """Test: Both clocks can be used where a Clock is expected."""
    clocks: list[Clock] = [SystemClock(), FixedClock(0)]

    assert all(isinstance(clock.now(), datetime) for clock in clocks)
