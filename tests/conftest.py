"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from pyfiletime import FileTime
from pyfiletime._constants import INT64_MAX, INT64_MIN

RAW_2013 = bytes([0xCE, 0xEB, 0x7D, 0x1A, 0x61, 0x59, 0xCE, 0x01])
TICKS_2013 = 130139712831482830
DATETIME_2013 = datetime(2013, 5, 25, 16, 1, 23, 148283, tzinfo=timezone.utc)

RAW_2009 = bytes([0xE8, 0x5B, 0xFB, 0xA2, 0x7B, 0x0D, 0xCA, 0x01])
TICKS_2009 = 128930364000001000
DATETIME_2009 = datetime(2009, 7, 25, 23, 0, 0, 100, tzinfo=timezone.utc)

SAMPLE_TICKS = [
    0,
    1,
    -1,
    9_999_999,
    10_000_000,
    -10_000_000,
    -10_000_001,
    TICKS_2009,
    TICKS_2013,
    INT64_MIN,
    INT64_MAX,
]


@pytest.fixture
def ft_2013():
    return FileTime.from_ticks(TICKS_2013)


@pytest.fixture
def ft_epoch():
    return FileTime.from_ticks(0)
