"""Clock formatting tests."""

import pytest

from pycountdown import TimeParseError, format_clock, parse_clock
from pycountdown._format import split_clock


class TestFormatClock:
    @pytest.mark.parametrize(
        "total,expected",
        [
            (0, "00:00:00"),
            (10, "00:00:10"),
            (600, "00:10:00"),
            (3661, "01:01:01"),
            (36000, "10:00:00"),
            (864000, "240:00:00"),
            (360000, "100:00:00"),
        ],
    )
    def test_format(self, total, expected):
        assert format_clock(total) == expected

    def test_negative_saturates(self):
        assert format_clock(-5) == "00:00:00"


class TestSplitClock:
    def test_fields(self):
        assert split_clock(3725) == (1, 2, 5)

    def test_negative(self):
        assert split_clock(-3725) == (0, 0, 0)


class TestParseClock:
    def test_basic(self):
        assert parse_clock("01:01:01") == 3661

    def test_wide_hours(self):
        assert parse_clock("100:00:00") == 360000

    def test_inverse_of_format(self):
        for n in (0, 59, 3599, 86399, 360001):
            assert parse_clock(format_clock(n)) == n

    @pytest.mark.parametrize(
        "text",
        ["", "1:2:3", "00:60:00", "00:00:60", "-01:00:00", "ab:cd:ef", "\u0661\u0660:00:00"],
    )
    def test_invalid(self, text):
        with pytest.raises(TimeParseError):
            parse_clock(text)
