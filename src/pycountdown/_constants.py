"""Unit and display constants."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY

MICROSECONDS_PER_SECOND = 1_000_000

CLOCK_FORMAT = "{hours:02d}:{minutes:02d}:{seconds:02d}"
"""Hours grow past two digits; minutes and seconds are always two."""
