from .core import UnixTimeBase
from .errors import ConversionUnsupported, FormatError, RangeError, UnixTimeError
from .util import DAY, EPOCH, HOUR, MINUTE, ONE_DAY, ONE_HOUR, ONE_MINUTE, SECOND, WEEK
from .variants import VARIANTS, Signed32, Signed64, Unsigned32, Unsigned64
from .width import (
    INT32,
    INT64,
    UINT32,
    UINT64,
    Width,
    to_i32,
    to_i64,
    to_u32,
    to_u64,
    try_to_i32,
    try_to_i64,
    try_to_u32,
    try_to_u64,
)

__all__ = [
    "UnixTimeBase",
    "Signed32",
    "Unsigned32",
    "Signed64",
    "Unsigned64",
    "VARIANTS",
    "UnixTimeError",
    "RangeError",
    "FormatError",
    "ConversionUnsupported",
    "Width",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    "to_i32",
    "to_u32",
    "to_i64",
    "to_u64",
    "try_to_i32",
    "try_to_u32",
    "try_to_i64",
    "try_to_u64",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "ONE_MINUTE",
    "ONE_HOUR",
    "ONE_DAY",
    "EPOCH",
]
