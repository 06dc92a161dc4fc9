"""Generic fixed-width Unix timestamp.

``UnixTimeBase`` carries the whole contract once: construction with range
validation, arithmetic with wraparound to the variant's width, a single total
order across all variants and plain numbers, and conversions. The concrete
variants in ``unixtime.variants`` only pick a ``Width``.

Narrowing rule used by every operation that produces a timestamp: compute the
exact result with unbounded integers, truncate it to the variant's width
(two's complement for signed widths), then validate it. Unsigned variants thus
behave like modular machine integers, while a signed result that wraps to a
negative count raises ``RangeError``.
"""

import logging
import math
import operator as op
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from decimal import Decimal
from fractions import Fraction
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Callable, ClassVar, TypeVar

from typing_extensions import Self, override

from unixtime import dates, parsing, width
from unixtime.errors import ConversionUnsupported, RangeError
from unixtime.util import DAY, HOUR, MINUTE, round_half_away, trunc_div
from unixtime.width import Width

if TYPE_CHECKING:
    from unixtime.variants import Signed32, Signed64, Unsigned32, Unsigned64

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="UnixTimeBase")

_MICROSECOND = timedelta(microseconds=1)


def _exact(value: Any) -> int | Fraction | None:
    """Exact seconds behind a plain numeric operand, or None if unsupported.

    Timestamps are deliberately not plain operands even though they
    support ``__index__``.
    """
    if isinstance(value, UnixTimeBase):
        return None
    if isinstance(value, timedelta):
        return Fraction(value // _MICROSECOND, 1_000_000)
    if isinstance(value, Integral):
        return op.index(value)
    if isinstance(value, Real):
        if not math.isfinite(value):
            raise RangeError(f"Cannot use non-finite value {value!r} as seconds")
        return Fraction(value)
    return None


def _require(value: Any, operation: str) -> int | Fraction:
    exact = _exact(value)
    if exact is None:
        raise TypeError(
            f"{operation}() does not accept {type(value).__name__!r}: {value!r}\n"
            f"Hint: pass an int, a float or a datetime.timedelta"
        )
    return exact


@dataclass(frozen=True, eq=False)
class UnixTimeBase:
    """Seconds since 1970-01-01T00:00:00 UTC stored in a fixed-width integer."""

    seconds: int = 0

    WIDTH: ClassVar[Width]
    MIN_VALUE: ClassVar["UnixTimeBase"]
    MAX_VALUE: ClassVar["UnixTimeBase"]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "WIDTH" in cls.__dict__:
            cls.MIN_VALUE = cls(0)
            cls.MAX_VALUE = cls(cls.WIDTH.max)

    def __post_init__(self) -> None:
        if getattr(type(self), "WIDTH", None) is None:
            raise TypeError(
                f"{type(self).__name__} has no WIDTH.\n"
                f"Use one of Signed32, Unsigned32, Signed64, Unsigned64"
            )
        seconds = op.index(self.seconds)
        if not 0 <= seconds <= self.WIDTH.max:
            raise RangeError(
                f"{type(self).__name__} seconds must be within "
                f"0..{self.WIDTH.max}, got {seconds}.\n"
                f"Hint: negative Unix time (before 1970) is not representable"
            )
        object.__setattr__(self, "seconds", seconds)

    @classmethod
    def _narrow(cls, value: int) -> Self:
        wrapped = cls.WIDTH.wrap(value)
        if wrapped != value:
            logger.debug(
                "%s truncated %d to %d (%s)", cls.__name__, value, wrapped, cls.WIDTH.name
            )
        return cls(wrapped)

    # Construction

    @classmethod
    def from_int(cls, seconds: int) -> Self:
        return cls(seconds)

    @classmethod
    def try_from_int(cls, seconds: int) -> Self | None:
        try:
            return cls(seconds)
        except RangeError:
            return None

    @classmethod
    def _from_fixed(cls, source: Width, value: int) -> Self:
        return cls(source.check(op.index(value), "seconds"))

    @classmethod
    def _try_from_fixed(cls, source: Width, value: int) -> Self | None:
        try:
            return cls._from_fixed(source, value)
        except RangeError:
            return None

    @classmethod
    def from_i32(cls, value: int) -> Self:
        """Build from a value that must fit a signed 32-bit integer."""
        return cls._from_fixed(width.INT32, value)

    @classmethod
    def from_u32(cls, value: int) -> Self:
        return cls._from_fixed(width.UINT32, value)

    @classmethod
    def from_i64(cls, value: int) -> Self:
        return cls._from_fixed(width.INT64, value)

    @classmethod
    def from_u64(cls, value: int) -> Self:
        return cls._from_fixed(width.UINT64, value)

    @classmethod
    def try_from_i32(cls, value: int) -> Self | None:
        return cls._try_from_fixed(width.INT32, value)

    @classmethod
    def try_from_u32(cls, value: int) -> Self | None:
        return cls._try_from_fixed(width.UINT32, value)

    @classmethod
    def try_from_i64(cls, value: int) -> Self | None:
        return cls._try_from_fixed(width.INT64, value)

    @classmethod
    def try_from_u64(cls, value: int) -> Self | None:
        return cls._try_from_fixed(width.UINT64, value)

    @classmethod
    def from_float(cls, seconds: float) -> Self:
        """Build from a real number of seconds, truncating toward zero."""
        if not math.isfinite(seconds):
            raise RangeError(f"Cannot build a timestamp from {seconds!r}")
        return cls(math.trunc(seconds))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        """Whole seconds since the epoch for ``dt``, normalized to UTC.

        Aware datetimes are converted to UTC first; naive ones are taken as UTC.
        Sub-second parts are truncated toward zero.
        """
        return cls(dates.epoch_seconds(dt))

    @classmethod
    def from_datetime_utc(cls, dt: datetime) -> Self:
        """Like ``from_datetime`` but reads the wall clock as UTC, ignoring tzinfo."""
        return cls(dates.epoch_seconds(dt.replace(tzinfo=None)))

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the canonical decimal form.

        Raises:
            FormatError: On leading zeros, signs, whitespace, separators,
                non-string input or a value above the variant's max
        """
        return cls(parsing.parse_seconds(text, cls.WIDTH))

    @classmethod
    def from_string(cls, text: str) -> Self:
        return cls.parse(text)

    @classmethod
    def try_parse(cls, text: str | None) -> Self | None:
        seconds = parsing.try_parse_seconds(text, cls.WIDTH)
        return None if seconds is None else cls(seconds)

    @classmethod
    def now(cls) -> Self:
        """Current UTC time truncated to whole seconds."""
        return cls.from_datetime(dates.utc_now())

    @classmethod
    def today(cls, tz: str | tzinfo | None = None) -> Self:
        """Midnight of the current day in ``tz`` (host local zone by default)."""
        return cls.from_datetime(dates.local_midnight(tz))

    # Arithmetic

    def _shift(self, delta: int | Fraction) -> Self:
        return self._narrow(math.trunc(self.seconds + delta))

    def add_seconds(self, seconds: int | float) -> Self:
        return self._shift(_require(seconds, "add_seconds"))

    def add_minutes(self, minutes: int | float) -> Self:
        return self._shift(_require(minutes, "add_minutes") * MINUTE)

    def add_hours(self, hours: int | float) -> Self:
        return self._shift(_require(hours, "add_hours") * HOUR)

    def add_days(self, days: int | float) -> Self:
        return self._shift(_require(days, "add_days") * DAY)

    def add_months(self, months: int) -> Self:
        """Calendar-aware: month ends are clamped (Jan 31 + 1 month = Feb 28/29)."""
        shifted = dates.shift_calendar(self.as_datetime_utc(), months=months)
        return self.from_datetime(shifted)

    def add_years(self, years: int) -> Self:
        shifted = dates.shift_calendar(self.as_datetime_utc(), years=years)
        return self.from_datetime(shifted)

    def multiply(self, factor: int | float) -> Self:
        exact = _require(factor, "multiply")
        if isinstance(exact, int):
            return self._narrow(self.seconds * exact)
        return self._narrow(round_half_away(self.seconds * exact))

    def divide(self, divisor: int | float) -> Self:
        """Divide the seconds count, rounding half away from zero (7 / 2 == 4)."""
        quotient = Fraction(self.seconds) / _require(divisor, "divide")
        return self._narrow(round_half_away(quotient))

    def modulus(self, divisor: int | float) -> int | float:
        """Remainder of the seconds count, with the sign of the seconds count."""
        exact = _require(divisor, "modulus")
        if isinstance(exact, int):
            return self.seconds - trunc_div(self.seconds, exact) * exact
        return float(self.seconds - math.trunc(self.seconds / exact) * exact)

    def __add__(self, other: Any) -> Self:
        delta = _exact(other)
        if delta is None:
            return NotImplemented
        return self._shift(delta)

    def __radd__(self, other: Any) -> Self:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, UnixTimeBase):
            return self.elapsed_since(other)
        delta = _exact(other)
        if delta is None:
            return NotImplemented
        return self._shift(-delta)

    def __mul__(self, other: Any) -> Self:
        if _exact(other) is None or isinstance(other, timedelta):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Self:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Self:
        if _exact(other) is None or isinstance(other, timedelta):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: Any) -> int | float:
        if _exact(other) is None or isinstance(other, timedelta):
            return NotImplemented
        return self.modulus(other)

    def elapsed_since(self, other: "UnixTimeBase") -> timedelta:
        """Signed duration from ``other`` to this timestamp, any variants."""
        try:
            return timedelta(seconds=self.seconds - other.seconds)
        except OverflowError as exc:
            raise RangeError(
                f"Difference between {self.seconds} and {other.seconds} seconds "
                f"exceeds the timedelta range"
            ) from exc

    # Comparison

    def _comparable(self, other: Any) -> int | float | Fraction | None:
        if isinstance(other, UnixTimeBase):
            return other.seconds
        if isinstance(other, datetime):
            return dates.epoch_seconds_exact(other)
        if isinstance(other, Integral):
            return op.index(other)
        if isinstance(other, Real):
            return float(other)
        return None

    def _order(self, other: Any, compare: Callable[[Any, Any], bool]) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return compare(self.seconds, value)

    def __lt__(self, other: Any) -> bool:
        return self._order(other, op.lt)

    def __le__(self, other: Any) -> bool:
        return self._order(other, op.le)

    def __gt__(self, other: Any) -> bool:
        return self._order(other, op.gt)

    def __ge__(self, other: Any) -> bool:
        return self._order(other, op.ge)

    @override
    def __eq__(self, other: object) -> bool:
        # datetimes order against timestamps but never compare equal; their
        # hashes could not agree with hash(seconds)
        if isinstance(other, datetime):
            return NotImplemented
        return self._order(other, op.eq)

    @override
    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    @override
    def __hash__(self) -> int:
        return hash(self.seconds)

    def compare_to(self, other: Any) -> int:
        """Three-way comparison that never raises.

        Returns -1, 0 or 1. ``None`` sorts this value first (-1); an operand of
        an unknown type sorts this value after it (1).
        """
        if other is None:
            return -1
        value = self._comparable(other)
        if value is None or value != value:
            return 1
        return (self.seconds > value) - (self.seconds < value)

    # Conversion

    def __int__(self) -> int:
        return self.seconds

    def __index__(self) -> int:
        return self.seconds

    def __float__(self) -> float:
        return float(self.seconds)

    def to_float(self) -> float:
        return float(self.seconds)

    def to_decimal(self) -> Decimal:
        return Decimal(self.seconds)

    def to_i32(self) -> int:
        return width.to_i32(self.seconds)

    def to_u32(self) -> int:
        return width.to_u32(self.seconds)

    def to_i64(self) -> int:
        return width.to_i64(self.seconds)

    def to_u64(self) -> int:
        return width.to_u64(self.seconds)

    def convert(self, target: type[T]) -> T:
        """Re-encode as another variant, truncating high-order bits when narrowing."""
        if not (isinstance(target, type) and issubclass(target, UnixTimeBase)):
            raise ConversionUnsupported(
                f"Cannot convert {type(self).__name__} to {target!r}; "
                f"convert() expects a timestamp variant class"
            )
        return target._narrow(self.seconds)

    def to_signed32(self) -> "Signed32":
        from unixtime.variants import Signed32

        return self.convert(Signed32)

    def to_unsigned32(self) -> "Unsigned32":
        from unixtime.variants import Unsigned32

        return self.convert(Unsigned32)

    def to_signed64(self) -> "Signed64":
        from unixtime.variants import Signed64

        return self.convert(Signed64)

    def to_unsigned64(self) -> "Unsigned64":
        from unixtime.variants import Unsigned64

        return self.convert(Unsigned64)

    def as_datetime_utc(self) -> datetime:
        """Aware UTC datetime for this instant."""
        return dates.from_epoch_seconds(self.seconds)

    def as_datetime(self, tz: str | tzinfo | None = None) -> datetime:
        """Aware datetime in ``tz`` (host local zone by default)."""
        return self.as_datetime_utc().astimezone(dates.resolve_zone(tz))

    def to_type(self, target: type) -> Any:
        """Convert to ``target``: int, float, str, Decimal, datetime or a variant.

        Raises:
            ConversionUnsupported: For any other target, including bool
        """
        if target is bool:
            raise ConversionUnsupported(
                f"{type(self).__name__} has no boolean interpretation"
            )
        if target is int:
            return self.seconds
        if target is float:
            return self.to_float()
        if target is str:
            return str(self)
        if target is Decimal:
            return self.to_decimal()
        if target is datetime:
            return self.as_datetime()
        if isinstance(target, type) and issubclass(target, UnixTimeBase):
            return self.convert(target)
        raise ConversionUnsupported(
            f"Cannot convert {type(self).__name__} to {target!r}.\n"
            f"Supported targets: int, float, str, Decimal, datetime, "
            f"Signed32, Unsigned32, Signed64, Unsigned64"
        )

    # Formatting

    @override
    def __str__(self) -> str:
        """Canonical form: unsigned decimal, no leading zeros."""
        return str(self.seconds)

    def format(self, fmt: str = "", tz: str | tzinfo | None = None) -> str:
        """Render with strftime() in ``tz`` when ``fmt`` holds a % directive.

        Any other format is applied to the seconds count (``f"{ts:,}"``), and an
        empty one gives the canonical form.
        """
        if "%" not in fmt:
            return format(self.seconds, fmt)
        return self.as_datetime(tz).strftime(fmt)

    @override
    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)
