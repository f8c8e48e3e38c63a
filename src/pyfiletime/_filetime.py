"""The FileTime value type.

A FILETIME counts 100-nanosecond intervals since 1601-01-01T00:00:00Z and is
stored on disk as an 8-byte little-endian integer. ``FileTime`` keeps the tick
count as its only field; seconds, nanoseconds, bytes and calendar values are
computed from it on demand.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from fractions import Fraction
from typing import BinaryIO

from pyfiletime._constants import (
    EPOCH_AS_FILETIME,
    FILETIME_EPOCH,
    FILETIME_SIZE,
    HUNDREDS_OF_NANOSECONDS,
    NANOSECONDS_PER_TICK,
    TICKS_PER_MICROSECOND,
    UINT32_MAX,
)
from pyfiletime._errors import (
    ERR_MSG_DATETIME_OUT_OF_RANGE,
    ERR_MSG_SHORT_READ,
    LengthError,
    OutOfRangeError,
)
from pyfiletime._utils import (
    validate_dword,
    validate_integer,
    validate_length,
    validate_nanoseconds,
    validate_ticks,
)

_SECONDS_PER_DAY = 86400


@dataclass(frozen=True, order=True)
class FileTime:
    """Immutable FILETIME value.

    ``ticks`` is a signed 64-bit count of 100ns intervals since the FILETIME
    epoch. Negative values denote instants before 1601.
    """

    ticks: int

    def __post_init__(self) -> None:
        validate_ticks(self.ticks)

    # --- Constructors ---

    @classmethod
    def now(cls) -> FileTime:
        """Return the current wall-clock time."""
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_ticks(cls, ticks: int) -> FileTime:
        """Wrap a raw tick count.

        Args:
            ticks: 100ns intervals since 1601-01-01T00:00:00Z.

        Raises:
            TypeError: If ticks is not an int.
            OutOfRangeError: If ticks does not fit in a signed 64-bit integer.
        """
        return cls(ticks)

    from_i64 = from_ticks

    @classmethod
    def from_parts(cls, seconds: int, nanoseconds: int) -> FileTime:
        """Build a FileTime from epoch-relative seconds and nanoseconds.

        Nanoseconds below 100ns resolution are floored away.

        Raises:
            ValueError: If nanoseconds is outside [0, 1_000_000_000).
        """
        validate_integer(seconds, "seconds")
        validate_nanoseconds(nanoseconds)
        return cls(seconds * HUNDREDS_OF_NANOSECONDS + nanoseconds // NANOSECONDS_PER_TICK)

    @classmethod
    def from_bytes(
        cls, data: bytes | bytearray | memoryview, *, signed: bool = True
    ) -> FileTime:
        """Decode the 8-byte little-endian FILETIME layout.

        Args:
            data: Exactly 8 bytes.
            signed: Read the layout as a signed integer. With ``signed=False``
                values above the signed 64-bit maximum are rejected.

        Raises:
            LengthError: If data is not exactly 8 bytes long.
            OutOfRangeError: If an unsigned value exceeds the signed maximum.
        """
        validate_length(data)
        return cls(int.from_bytes(data, byteorder="little", signed=signed))

    @classmethod
    def from_buffer(cls, buff: BinaryIO, *, signed: bool = True) -> FileTime:
        """Read one FILETIME from a binary stream."""
        data = buff.read(FILETIME_SIZE)
        if len(data) != FILETIME_SIZE:
            raise LengthError(
                ERR_MSG_SHORT_READ,
                f"read {len(data)} of {FILETIME_SIZE} bytes",
            )
        return cls.from_bytes(data, signed=signed)

    @classmethod
    def from_dwords(cls, low: int, high: int) -> FileTime:
        """Build a FileTime from its dwLowDateTime/dwHighDateTime halves."""
        validate_dword(low, "low")
        validate_dword(high, "high")
        return cls.from_bytes(
            low.to_bytes(4, byteorder="little") + high.to_bytes(4, byteorder="little")
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> FileTime:
        """Convert a calendar instant.

        Aware datetimes are converted to UTC first; naive datetimes are taken
        to already be UTC.

        Args:
            dt: The instant to convert. Instants before 1601 give negative ticks.

        Raises:
            TypeError: If dt is not a datetime.
        """
        if not isinstance(dt, datetime):
            raise TypeError(f"dt must be a datetime, not {type(dt).__name__}")
        if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - FILETIME_EPOCH
        seconds = delta.days * _SECONDS_PER_DAY + delta.seconds
        return cls(
            seconds * HUNDREDS_OF_NANOSECONDS
            + delta.microseconds * TICKS_PER_MICROSECOND
        )

    @classmethod
    def from_unix(cls, seconds: int | float, nanoseconds: int = 0) -> FileTime:
        """Convert seconds (plus nanoseconds) since 1970-01-01T00:00:00Z.

        Integer seconds and nanoseconds convert exactly; ``to_unix_parts``
        gives the matching inverse. A float is converted from its exact
        binary value and rounded to the nearest tick, but a double only
        carries about 16 significant digits, so present-day float
        timestamps are precise to about a microsecond, not to one tick.

        Raises:
            TypeError: If seconds is neither an int nor a float.
            ValueError: If seconds is not finite or nanoseconds is outside
                [0, 1_000_000_000).
        """
        validate_nanoseconds(nanoseconds)
        if isinstance(seconds, float):
            if not math.isfinite(seconds):
                raise ValueError(f"seconds must be finite, got {seconds}")
            whole = round(Fraction(seconds) * HUNDREDS_OF_NANOSECONDS)
        else:
            validate_integer(seconds, "seconds")
            whole = seconds * HUNDREDS_OF_NANOSECONDS
        return cls(EPOCH_AS_FILETIME + whole + nanoseconds // NANOSECONDS_PER_TICK)

    @staticmethod
    def epoch() -> datetime:
        """Return the FILETIME epoch, 1601-01-01T00:00:00Z."""
        return FILETIME_EPOCH

    # --- Derived views ---

    @property
    def seconds(self) -> int:
        """Whole seconds since the FILETIME epoch, rounded toward negative infinity."""
        return self.ticks // HUNDREDS_OF_NANOSECONDS

    @property
    def nanoseconds(self) -> int:
        """Sub-second remainder in nanoseconds, always non-negative."""
        return self.ticks % HUNDREDS_OF_NANOSECONDS * NANOSECONDS_PER_TICK

    @property
    def low_date_time(self) -> int:
        return self.ticks & UINT32_MAX

    @property
    def high_date_time(self) -> int:
        return (self.ticks >> 32) & UINT32_MAX

    def filetime(self) -> int:
        return self.ticks

    def to_bytes(self) -> bytes:
        """Encode as the 8-byte little-endian FILETIME layout."""
        return self.ticks.to_bytes(FILETIME_SIZE, byteorder="little", signed=True)

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime.

        The 100ns digit below datetime's microsecond resolution is floored.

        Raises:
            OutOfRangeError: If the instant is outside datetime's year range.
        """
        offset = timedelta(
            seconds=self.seconds,
            microseconds=self.ticks % HUNDREDS_OF_NANOSECONDS // TICKS_PER_MICROSECOND,
        )
        try:
            return FILETIME_EPOCH + offset
        except OverflowError as e:
            raise OutOfRangeError(
                ERR_MSG_DATETIME_OUT_OF_RANGE,
                f"tick count {self.ticks} is {offset.days} days from the FILETIME epoch",
                wrapped=e,
            ) from e

    def to_unix(self) -> float:
        """Seconds since 1970-01-01T00:00:00Z as a float.

        Lossy for present-day values below about a microsecond; use
        ``to_unix_parts`` for an exact result.
        """
        return (self.ticks - EPOCH_AS_FILETIME) / HUNDREDS_OF_NANOSECONDS

    def to_unix_parts(self) -> tuple[int, int]:
        """Exact (seconds, nanoseconds) since 1970-01-01T00:00:00Z.

        Seconds are floored, so nanoseconds is always non-negative.
        """
        seconds, rest = divmod(self.ticks - EPOCH_AS_FILETIME, HUNDREDS_OF_NANOSECONDS)
        return seconds, rest * NANOSECONDS_PER_TICK

    # --- Python protocols ---

    def __int__(self) -> int:
        return self.ticks

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        try:
            dt = self.to_datetime().isoformat()
        except OutOfRangeError:
            dt = "out-of-range"
        return f"DateTime={dt} secs={self.seconds} nsecs={self.nanoseconds}"


def filetime_to_datetime(ticks: int) -> datetime:
    """Convert a raw FILETIME tick count to an aware UTC datetime."""
    return FileTime(ticks).to_datetime()


def datetime_to_filetime(dt: datetime) -> int:
    """Convert a datetime to a raw FILETIME tick count."""
    return FileTime.from_datetime(dt).ticks
