"""Exception hierarchy for unixtime.

All library errors inherit from UnixTimeError. Each one also derives from the
built-in exception callers would otherwise expect, so ``except ValueError``
keeps working.
"""


class UnixTimeError(Exception):
    """Base exception for all unixtime errors."""


class RangeError(UnixTimeError, ValueError):
    """A seconds count falls outside ``[0, max]`` for the target width.

    Examples:
        - Constructing any variant from a negative integer
        - Constructing Unsigned32 from 2**32
        - A signed result that wrapped to a negative value
    """


class FormatError(UnixTimeError, ValueError):
    """A string is not the canonical decimal form of an in-range value.

    Examples:
        - Leading zeros ("007")
        - Signs or whitespace ("+1", " 1")
        - One past the variant's max ("4294967296" for Unsigned32)
    """


class ConversionUnsupported(UnixTimeError, TypeError):
    """No mapping is defined from a timestamp to the requested type."""


__all__ = [
    "UnixTimeError",
    "RangeError",
    "FormatError",
    "ConversionUnsupported",
]
