"""Canonical decimal string matching for timestamp seconds counts.

A canonical string is the unsigned base-10 rendering of an integer: ASCII
digits only, no sign, no whitespace, no separators, and no leading zeros
except the literal "0". A string matches a width when it is canonical and its
value does not exceed that width's max.
"""

import logging
import re
from typing import Any

from unixtime.errors import FormatError
from unixtime.width import Width

logger = logging.getLogger(__name__)

# [0-9] rather than \d, which also accepts non-ASCII digits
_CANONICAL = re.compile(r"0|[1-9][0-9]*")


def matches(text: Any, width: Width) -> bool:
    """Return True iff ``text`` is the canonical form of a value in ``[0, width.max]``."""
    if not isinstance(text, str):
        return False
    limit = str(width.max)
    if len(text) > len(limit) or _CANONICAL.fullmatch(text) is None:
        return False
    # Same digit count compares lexicographically like the numbers themselves
    return len(text) < len(limit) or text <= limit


def parse_seconds(text: Any, width: Width) -> int:
    """Parse a canonical decimal string into a seconds count for ``width``.

    Raises:
        FormatError: If ``text`` is not a string, not canonical, or out of range
    """
    if not matches(text, width):
        raise FormatError(
            f"Invalid timestamp string for {width.name}: {text!r}\n"
            f"Expected an unsigned decimal integer between 0 and {width.max} "
            f"with no sign, whitespace or leading zeros.\n"
            f"Examples: '0', '1704067200'"
        )
    return int(text)


def try_parse_seconds(text: Any, width: Width) -> int | None:
    """Non-raising ``parse_seconds``; None, blank and invalid input give None."""
    if text is None or (isinstance(text, str) and not text.strip()):
        return None
    if not matches(text, width):
        logger.debug("Rejected %r as a %s timestamp string", text, width.name)
        return None
    return int(text)
