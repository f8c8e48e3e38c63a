"""Numeric constants for FILETIME conversion."""

from datetime import datetime, timezone

HUNDREDS_OF_NANOSECONDS = 10_000_000
"""Ticks per second (one tick is 100 nanoseconds)."""

TICKS_PER_MICROSECOND = 10

NANOSECONDS_PER_TICK = 100

EPOCH_AS_FILETIME = 116444736000000000
"""1970-01-01T00:00:00Z expressed as a FILETIME tick count."""

FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)

FILETIME_SIZE = 8
"""Size of the on-disk FILETIME layout in bytes."""

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT32_MAX = 2**32 - 1

NANOSECONDS_PER_SECOND = 1_000_000_000
