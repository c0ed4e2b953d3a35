"""Clock string rendering and parsing."""

from __future__ import annotations

import logging
import re

from pycountdown._constants import CLOCK_FORMAT, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from pycountdown._errors import ERR_MSG_INVALID_CLOCK, TimeParseError

logger = logging.getLogger(__name__)

CLOCK_RE = re.compile(r"^([0-9]+):([0-5][0-9]):([0-5][0-9])$")


def saturate(total_seconds: int) -> int:
    """Clamp a signed second count at zero."""
    return max(total_seconds, 0)


def split_clock(total_seconds: int) -> tuple[int, int, int]:
    """Split a second count into ``(hours, minutes, seconds)`` clock fields.

    Negative input saturates to ``(0, 0, 0)``.
    """
    total = saturate(total_seconds)
    return (
        total // SECONDS_PER_HOUR,
        total // SECONDS_PER_MINUTE % 60,
        total % SECONDS_PER_MINUTE,
    )


def format_clock(total_seconds: int) -> str:
    """Render a second count as ``HH:MM:SS``.

    >>> format_clock(3661)
    '01:01:01'
    >>> format_clock(360000)
    '100:00:00'
    """
    hours, minutes, seconds = split_clock(total_seconds)
    return CLOCK_FORMAT.format(hours=hours, minutes=minutes, seconds=seconds)


def parse_clock(text: str) -> int:
    """Parse ``H+:MM:SS`` back into a second count."""
    m = CLOCK_RE.match(text.strip())
    if m is None:
        logger.debug("rejected clock string %r", text)
        raise TimeParseError(
            ERR_MSG_INVALID_CLOCK,
            f"clock string {text!r} does not match H+:MM:SS",
        )
    hours, minutes, seconds = (int(g) for g in m.groups())
    return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
