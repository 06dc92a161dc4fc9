"""Utility constants and helpers for unixtime.

Time unit constants represent durations in seconds. Minutes, hours and days
are fixed lengths: no leap seconds and no DST adjustment.
"""

from datetime import datetime, timezone
from fractions import Fraction

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

ONE_MINUTE = MINUTE
ONE_HOUR = HOUR
ONE_DAY = DAY

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def round_half_away(value: Fraction | int) -> int:
    """Round an exact rational to the nearest integer, ties away from zero."""
    value = Fraction(value)
    magnitude = abs(value)
    whole = magnitude.numerator // magnitude.denominator
    if magnitude - whole >= Fraction(1, 2):
        whole += 1
    return whole if value >= 0 else -whole

