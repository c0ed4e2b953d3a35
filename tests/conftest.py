"""Shared test fixtures."""

import pytest

from pycountdown.times import TimeStamp

EPOCH = TimeStamp.parse("2021-09-01T18:00:00Z")


@pytest.fixture
def now():
    return EPOCH


@pytest.fixture
def clock():
    return lambda: EPOCH
