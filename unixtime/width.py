"""Fixed-width integer contract shared by every timestamp variant.

Python integers are unbounded, so the native wraparound of 32/64-bit machine
integers is modelled explicitly here. ``Width.wrap`` reduces any integer to the
width (truncating high-order bits, never saturating) and the ``to_*`` helpers
are the named replacements for implicit numeric casts.
"""

import operator
from dataclasses import dataclass
from typing import Any

from unixtime.errors import RangeError


@dataclass(frozen=True)
class Width:
    bits: int
    signed: bool

    @property
    def name(self) -> str:
        return f"{'' if self.signed else 'u'}int{self.bits}"

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def wrap(self, value: int) -> int:
        """Truncate ``value`` to this width using two's-complement semantics."""
        value &= self.mask
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value

    def check(self, value: int, name: str = "value") -> int:
        if not self.contains(value):
            raise RangeError(
                f"{name} {value} does not fit {self.name} "
                f"(valid range {self.min}..{self.max})"
            )
        return value


INT32 = Width(32, signed=True)
UINT32 = Width(32, signed=False)
INT64 = Width(64, signed=True)
UINT64 = Width(64, signed=False)


def as_integer(value: Any) -> int:
    """Return the integer behind ``value`` (timestamps support __index__)."""
    return operator.index(value)


def to_i32(value: Any) -> int:
    return INT32.wrap(as_integer(value))


def to_u32(value: Any) -> int:
    return UINT32.wrap(as_integer(value))


def to_i64(value: Any) -> int:
    return INT64.wrap(as_integer(value))


def to_u64(value: Any) -> int:
    return UINT64.wrap(as_integer(value))


def _try_exact(width: Width, value: Any) -> int | None:
    number = as_integer(value)
    return number if width.contains(number) else None


def try_to_i32(value: Any) -> int | None:
    """Like ``to_i32`` but returns None when truncation would change the value."""
    return _try_exact(INT32, value)


def try_to_u32(value: Any) -> int | None:
    return _try_exact(UINT32, value)


def try_to_i64(value: Any) -> int | None:
    return _try_exact(INT64, value)


def try_to_u64(value: Any) -> int | None:
    return _try_exact(UINT64, value)
