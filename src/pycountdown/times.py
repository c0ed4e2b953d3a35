"""Timestamp and duration types used by :class:`~pycountdown.counter.Counter`.

Both types are immutable wrappers around :mod:`datetime` values. String
parsing goes through ``celpy``'s CEL types, so timestamps must be RFC 3339
(``"2021-09-01T18:00:00Z"``) and durations accept CEL duration strings
(``"1h30m"``, ``"-10s"``).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from celpy import celtypes

from pycountdown._constants import (
    MICROSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)
from pycountdown._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_INVALID_TIMESTAMP,
    ERR_MSG_TIME_OVERFLOW,
    TimeOverflowError,
    TimeParseError,
)

logger = logging.getLogger(__name__)

RFC3339_RE = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{1,9})?"
    r"(Z|[+-][0-9]{2}:[0-9]{2})$"
)


def _overflow(detail: str, e: OverflowError) -> TimeOverflowError:
    return TimeOverflowError(ERR_MSG_TIME_OVERFLOW, detail, wrapped=e)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    # Strip datetime subclasses (celpy returns its own) down to a plain datetime.
    return datetime(
        dt.year, dt.month, dt.day,
        dt.hour, dt.minute, dt.second, dt.microsecond,
        tzinfo=timezone.utc,
    )


@dataclass(frozen=True, order=True)
class Duration:
    """A signed span of time."""

    delta: timedelta = timedelta(0)

    @classmethod
    def seconds(cls, seconds: int) -> Duration:
        try:
            return cls(timedelta(seconds=seconds))
        except OverflowError as e:
            raise TimeOverflowError(
                ERR_MSG_TIME_OVERFLOW,
                f"duration of {seconds} seconds is out of range",
                wrapped=e,
            ) from e

    @classmethod
    def minutes(cls, minutes: int) -> Duration:
        return cls.seconds(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def hours(cls, hours: int) -> Duration:
        return cls.seconds(hours * SECONDS_PER_HOUR)

    @classmethod
    def days(cls, days: int) -> Duration:
        return cls.seconds(days * SECONDS_PER_DAY)

    @classmethod
    def weeks(cls, weeks: int) -> Duration:
        return cls.seconds(weeks * SECONDS_PER_WEEK)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse a CEL duration string such as ``"1h30m"`` or ``"-10s"``.

        Raises:
            TimeParseError: If ``text`` is not a valid duration.
        """
        try:
            parsed = celtypes.DurationType(text)
        except (ValueError, KeyError, TypeError) as e:
            logger.debug("rejected duration string %r: %s", text, e)
            raise TimeParseError(
                ERR_MSG_INVALID_DURATION,
                f"invalid duration string: {text!r}",
                wrapped=e,
            ) from e
        return cls(timedelta(days=parsed.days, seconds=parsed.seconds,
                             microseconds=parsed.microseconds))

    def num_seconds(self) -> int:
        """Whole seconds in this span, truncated toward zero."""
        d = self.delta
        micros = (d.days * SECONDS_PER_DAY + d.seconds) * MICROSECONDS_PER_SECOND + d.microseconds
        whole = abs(micros) // MICROSECONDS_PER_SECOND
        return whole if micros >= 0 else -whole

    def __neg__(self) -> Duration:
        try:
            return Duration(-self.delta)
        except OverflowError as e:
            raise _overflow(f"-({self}) is out of range", e) from e

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        try:
            return Duration(self.delta + other.delta)
        except OverflowError as e:
            raise _overflow(f"{self} + {other} is out of range", e) from e

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        try:
            return Duration(self.delta - other.delta)
        except OverflowError as e:
            raise _overflow(f"{self} - {other} is out of range", e) from e

    def __str__(self) -> str:
        return f"{self.num_seconds()}s"


Offset = int | Duration | timedelta
"""A signed shift: whole seconds, a Duration or a timedelta."""


def as_duration(offset: Offset) -> Duration:
    if isinstance(offset, Duration):
        return offset
    if isinstance(offset, timedelta):
        return Duration(offset)
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"expected seconds as int, Duration or timedelta, got {type(offset).__name__}")
    return Duration.seconds(offset)


@dataclass(frozen=True, order=True)
class TimeStamp:
    """An instant in UTC."""

    time: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", _as_utc(self.time))

    @classmethod
    def now(cls) -> TimeStamp:
        return cls(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, dt: datetime) -> TimeStamp:
        """Wrap ``dt``; naive datetimes are taken to be UTC."""
        return cls(dt)

    @classmethod
    def parse(cls, text: str) -> TimeStamp:
        """Parse an RFC 3339 timestamp.

        Raises:
            TimeParseError: If ``text`` is not a valid timestamp.
        """
        if not RFC3339_RE.match(text):
            logger.debug("rejected non-RFC 3339 timestamp string %r", text)
            raise TimeParseError(
                ERR_MSG_INVALID_TIMESTAMP,
                f"timestamp string {text!r} is not RFC 3339",
            )
        try:
            parsed = celtypes.TimestampType(text)
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug("rejected timestamp string %r: %s", text, e)
            raise TimeParseError(
                ERR_MSG_INVALID_TIMESTAMP,
                f"invalid timestamp string: {text!r}",
                wrapped=e,
            ) from e
        return cls(parsed)

    def checked_add(self, offset: Offset) -> TimeStamp:
        """Shift by ``offset``.

        Raises:
            TimeOverflowError: If the result is outside the datetime range.
        """
        duration = as_duration(offset)
        try:
            return TimeStamp(self.time + duration.delta)
        except OverflowError as e:
            raise TimeOverflowError(
                ERR_MSG_TIME_OVERFLOW,
                f"{self} + {duration} is out of range",
                wrapped=e,
            ) from e

    def __add__(self, other: object) -> TimeStamp:
        if not isinstance(other, (int, Duration, timedelta)):
            return NotImplemented
        return self.checked_add(other)

    def __sub__(self, other: object) -> Duration | TimeStamp:
        if isinstance(other, TimeStamp):
            return Duration(self.time - other.time)
        if not isinstance(other, (int, Duration, timedelta)):
            return NotImplemented
        return self.checked_add(-as_duration(other))

    def __str__(self) -> str:
        return self.time.isoformat()


Clock = Callable[[], TimeStamp]
"""Zero-argument time source; the default is :meth:`TimeStamp.now`."""
