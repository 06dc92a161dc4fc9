"""The four timestamp encodings.

| Variant     | Width | Signed | Valid range                     |
|-------------|-------|--------|---------------------------------|
| Signed32    | 32    | yes    | 0 .. 2,147,483,647              |
| Unsigned32  | 32    | no     | 0 .. 4,294,967,295              |
| Signed64    | 64    | yes    | 0 .. 9,223,372,036,854,775,807  |
| Unsigned64  | 64    | no     | 0 .. 18,446,744,073,709,551,615 |

Signed variants still reject negative counts; the sign only decides how
arithmetic wraps at the width boundary.
"""

from typing import ClassVar

from unixtime.core import UnixTimeBase
from unixtime.width import INT32, INT64, UINT32, UINT64, Width


class Signed32(UnixTimeBase):
    """Classic ``time_t``; runs out on 2038-01-19T03:14:07Z."""

    WIDTH: ClassVar[Width] = INT32


class Unsigned32(UnixTimeBase):
    WIDTH: ClassVar[Width] = UINT32


class Signed64(UnixTimeBase):
    WIDTH: ClassVar[Width] = INT64


class Unsigned64(UnixTimeBase):
    WIDTH: ClassVar[Width] = UINT64


VARIANTS: tuple[type[UnixTimeBase], ...] = (Signed32, Unsigned32, Signed64, Unsigned64)
