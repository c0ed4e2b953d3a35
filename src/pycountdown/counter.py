"""The Counter type: a timer between two adjustable timestamps."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

from pycountdown._constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from pycountdown._errors import (
    ERR_MSG_INVALID_DIRECTION,
    ERR_MSG_MISSING_END,
    ERR_MSG_MISSING_START,
    InvalidDirectionError,
    MissingReferenceError,
)
from pycountdown._format import format_clock, parse_clock, saturate, split_clock
from pycountdown.times import Clock, Duration, Offset, TimeStamp

logger = logging.getLogger(__name__)


class Direction(enum.StrEnum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, name: str) -> Direction:
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            raise InvalidDirectionError(
                ERR_MSG_INVALID_DIRECTION,
                f"unknown direction: {name!r}. Available: {', '.join(m.value for m in cls)}",
                wrapped=e,
            ) from e

    def flipped(self) -> Direction:
        return Direction.UP if self is Direction.DOWN else Direction.DOWN


@dataclass
class Counter:
    """Counts down to ``end`` or up from ``start``.

    The present is sampled whenever the counter is read, so the displayed
    value follows real time. Readers take an optional ``now`` (or ``clock``
    for :meth:`to_string`) to pin the present.

    A missing reference point reads as zero. The displayed span never goes
    below ``00:00:00``.
    """

    start: TimeStamp | None = None
    end: TimeStamp | None = None
    direction: Direction = Direction.DOWN

    def __post_init__(self) -> None:
        if not isinstance(self.direction, Direction):
            self.direction = Direction.parse(self.direction)

    # --- Construction ---

    @classmethod
    def down(cls, start: TimeStamp | None = None, end: TimeStamp | None = None) -> Counter:
        return cls(start=start, end=end, direction=Direction.DOWN)

    @classmethod
    def up(cls, start: TimeStamp | None = None, end: TimeStamp | None = None) -> Counter:
        return cls(start=start, end=end, direction=Direction.UP)

    @classmethod
    def from_clock(
        cls,
        text: str,
        *,
        direction: Direction = Direction.DOWN,
        now: TimeStamp | None = None,
    ) -> Counter:
        """Build a counter that shows ``text`` (``HH:MM:SS``) at ``now``.

        Raises:
            TimeParseError: If ``text`` is not a clock string.
        """
        span = parse_clock(text)
        if now is None:
            now = TimeStamp.now()
        if direction is Direction.DOWN:
            return cls.down(now, now + span)
        return cls.up(now - span, now)

    # --- Mutation ---

    def flip(self) -> None:
        self.direction = self.direction.flipped()

    def flipped(self) -> Counter:
        return replace(self, direction=self.direction.flipped())

    def try_move_start(self, delta: Offset) -> None:
        """Shift ``start`` by ``delta`` (seconds or a Duration).

        Raises:
            MissingReferenceError: If ``start`` is not set.
            TimeOverflowError: If the shifted time is out of range.
        """
        if self.start is None:
            raise MissingReferenceError(
                ERR_MSG_MISSING_START,
                f"cannot move start by {delta}: start is not set",
            )
        self.start = self.start.checked_add(delta)
        logger.debug("moved start by %s to %s", delta, self.start)

    def try_move_end(self, delta: Offset) -> None:
        """Shift ``end`` by ``delta`` (seconds or a Duration).

        Raises:
            MissingReferenceError: If ``end`` is not set.
            TimeOverflowError: If the shifted time is out of range.
        """
        if self.end is None:
            raise MissingReferenceError(
                ERR_MSG_MISSING_END,
                f"cannot move end by {delta}: end is not set",
            )
        self.end = self.end.checked_add(delta)
        logger.debug("moved end by %s to %s", delta, self.end)

    # --- Reading ---

    def duration(self, now: TimeStamp | None = None) -> Duration:
        """Signed span to ``end`` (DOWN) or from ``start`` (UP)."""
        if now is None:
            now = TimeStamp.now()
        if self.direction is Direction.DOWN:
            if self.end is None:
                return Duration()
            return self.end - now
        if self.start is None:
            return Duration()
        return now - self.start

    def total_seconds(self, now: TimeStamp | None = None) -> int:
        return saturate(self.duration(now).num_seconds())

    def hours(self, now: TimeStamp | None = None) -> int:
        return self.total_seconds(now) // SECONDS_PER_HOUR

    def minutes(self, now: TimeStamp | None = None) -> int:
        return self.total_seconds(now) // SECONDS_PER_MINUTE

    def seconds(self, now: TimeStamp | None = None) -> int:
        return self.total_seconds(now)

    def counter(self, now: TimeStamp | None = None) -> tuple[int, int, int]:
        """Clock fields ``(hours, minutes, seconds)`` of the displayed span."""
        return split_clock(self.total_seconds(now))

    def to_string(self, clock: Clock | None = None) -> str:
        now = clock() if clock is not None else TimeStamp.now()
        return format_clock(self.total_seconds(now))

    def __str__(self) -> str:
        return self.to_string()
