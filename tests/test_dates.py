"""Tests for the calendar helpers behind the timestamp types."""

from datetime import datetime, timedelta, timezone
from fractions import Fraction
from zoneinfo import ZoneInfo

import pytest

from unixtime import EPOCH, RangeError
from unixtime.dates import (
    epoch_seconds,
    epoch_seconds_exact,
    from_epoch_seconds,
    local_midnight,
    resolve_zone,
    shift_calendar,
    to_utc,
    utc_now,
)
from unixtime.util import round_half_away, trunc_div


def test_resolve_zone():
    assert resolve_zone(None) is None
    assert resolve_zone("UTC") == ZoneInfo("UTC")
    assert resolve_zone(timezone.utc) is timezone.utc


def test_to_utc():
    naive = datetime(2025, 1, 1, 12)
    assert to_utc(naive) == datetime(2025, 1, 1, 12, tzinfo=timezone.utc)
    pacific = datetime(2025, 1, 1, 4, tzinfo=ZoneInfo("US/Pacific"))
    assert to_utc(pacific).hour == 12
    assert to_utc(pacific).tzinfo is timezone.utc


def test_epoch_seconds_truncates_toward_zero():
    assert epoch_seconds(EPOCH + timedelta(seconds=1.75)) == 1
    assert epoch_seconds(EPOCH - timedelta(seconds=1.75)) == -1
    assert epoch_seconds_exact(EPOCH - timedelta(seconds=1.75)) == Fraction(-7, 4)


def test_from_epoch_seconds():
    assert from_epoch_seconds(0) == EPOCH
    assert from_epoch_seconds(86400) == datetime(1970, 1, 2, tzinfo=timezone.utc)
    with pytest.raises(RangeError):
        from_epoch_seconds(2**63)


def test_utc_now_is_aware():
    assert utc_now().tzinfo is timezone.utc


def test_local_midnight_in_named_zone():
    midnight = local_midnight("Europe/Berlin")
    assert (midnight.hour, midnight.minute, midnight.second) == (0, 0, 0)
    assert midnight.tzinfo == ZoneInfo("Europe/Berlin")
    elapsed = datetime.now(ZoneInfo("Europe/Berlin")) - midnight
    assert timedelta(0) <= elapsed < timedelta(days=1, hours=1)


def test_shift_calendar_clamps_month_end():
    jan_31 = datetime(2023, 1, 31, tzinfo=timezone.utc)
    assert shift_calendar(jan_31, months=1) == datetime(2023, 2, 28, tzinfo=timezone.utc)
    assert shift_calendar(jan_31, years=1, months=1) == datetime(
        2024, 2, 29, tzinfo=timezone.utc
    )
    with pytest.raises(RangeError):
        shift_calendar(datetime(9999, 12, 1), months=1)


def test_trunc_div():
    assert trunc_div(7, 2) == 3
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3


def test_round_half_away():
    assert round_half_away(Fraction(7, 2)) == 4
    assert round_half_away(Fraction(-7, 2)) == -4
    assert round_half_away(Fraction(5, 2)) == 3
    assert round_half_away(Fraction(9, 4)) == 2
    assert round_half_away(Fraction(-9, 4)) == -2
    assert round_half_away(3) == 3
