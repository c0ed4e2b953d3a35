"""pycountdown - Count down to or up from adjustable timestamps."""

from __future__ import annotations

import logging

__version__ = "0.1.0"

from pycountdown._errors import (
    CounterError,
    InvalidDirectionError,
    MissingReferenceError,
    TimeOverflowError,
    TimeParseError,
)
from pycountdown._format import format_clock, parse_clock
from pycountdown.counter import Counter, Direction
from pycountdown.times import Clock, Duration, TimeStamp

__all__ = [
    "format_clock",
    "parse_clock",
    "Clock",
    "Counter",
    "Direction",
    "Duration",
    "TimeStamp",
    "CounterError",
    "InvalidDirectionError",
    "MissingReferenceError",
    "TimeOverflowError",
    "TimeParseError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
