"""Calendar collaborator: wall clock, UTC normalization and month arithmetic.

Timestamps never do calendar math themselves. Everything that needs a
calendar (the current time, local midnight, month lengths, leap years) goes
through the helpers here, which lean on ``datetime``, ``zoneinfo`` and
python-dateutil's ``relativedelta``.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from fractions import Fraction
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from unixtime.errors import RangeError
from unixtime.util import EPOCH, trunc_div

_MICROSECOND = timedelta(microseconds=1)


def resolve_zone(tz: str | tzinfo | None) -> tzinfo | None:
    """Map an IANA name to a ZoneInfo; None means the host's local zone."""
    if tz is None or isinstance(tz, tzinfo):
        return tz
    return ZoneInfo(tz)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_midnight(tz: str | tzinfo | None = None) -> datetime:
    """Midnight starting the current day in ``tz`` (local zone by default)."""
    zone = resolve_zone(tz)
    if zone is None:
        # A naive local datetime resolves its own UTC offset in astimezone()
        return datetime.combine(date.today(), time.min).astimezone()
    return datetime.combine(datetime.now(zone).date(), time.min, tzinfo=zone)


def to_utc(dt: datetime) -> datetime:
    """Normalize to an aware UTC datetime; naive input is taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _elapsed_micros(dt: datetime) -> int:
    return (to_utc(dt) - EPOCH) // _MICROSECOND


def epoch_seconds(dt: datetime) -> int:
    """Whole seconds from the epoch to ``dt``, truncated toward zero."""
    return trunc_div(_elapsed_micros(dt), 1_000_000)


def epoch_seconds_exact(dt: datetime) -> Fraction:
    """Seconds from the epoch to ``dt`` including the sub-second part."""
    return Fraction(_elapsed_micros(dt), 1_000_000)


def from_epoch_seconds(seconds: int) -> datetime:
    """Aware UTC datetime for a seconds count.

    Raises:
        RangeError: If the instant is beyond what ``datetime`` can represent
    """
    try:
        return EPOCH + timedelta(seconds=seconds)
    except OverflowError as exc:
        raise RangeError(
            f"{seconds} seconds since the epoch is beyond the datetime range "
            f"({datetime.min.year}..{datetime.max.year})"
        ) from exc


def shift_calendar(dt: datetime, *, months: int = 0, years: int = 0) -> datetime:
    """Calendar-aware month/year offset (month ends clamp, leap days handled).

    Raises:
        RangeError: If the result leaves the datetime range
    """
    try:
        return dt + relativedelta(months=months, years=years)
    except (OverflowError, ValueError) as exc:
        raise RangeError(
            f"Shifting {dt.isoformat()} by {years} years and {months} months "
            f"leaves the datetime range"
        ) from exc
