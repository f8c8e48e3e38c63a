"""Validation helpers for FILETIME inputs."""

from __future__ import annotations

from pyfiletime._constants import (
    FILETIME_SIZE,
    INT64_MAX,
    INT64_MIN,
    NANOSECONDS_PER_SECOND,
    UINT32_MAX,
)
from pyfiletime._errors import (
    ERR_MSG_INVALID_LENGTH,
    ERR_MSG_TICKS_OUT_OF_RANGE,
    LengthError,
    OutOfRangeError,
)


def validate_integer(value: object, name: str) -> None:
    """Reject non-integers, including bool."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")


def validate_ticks(ticks: object) -> None:
    """Validate that a tick count is a signed 64-bit integer."""
    validate_integer(ticks, "ticks")
    if not INT64_MIN <= ticks <= INT64_MAX:  # type: ignore[operator]
        raise OutOfRangeError(
            ERR_MSG_TICKS_OUT_OF_RANGE,
            f"tick count {ticks} is outside [{INT64_MIN}, {INT64_MAX}]",
        )


def validate_length(data: bytes | bytearray | memoryview) -> None:
    """Validate that a buffer holds exactly one FILETIME."""
    if len(data) != FILETIME_SIZE:
        raise LengthError(
            ERR_MSG_INVALID_LENGTH,
            f"got {len(data)} bytes, expected {FILETIME_SIZE}",
        )


def validate_dword(value: object, name: str) -> None:
    """Validate an unsigned 32-bit half of a FILETIME."""
    validate_integer(value, name)
    if not 0 <= value <= UINT32_MAX:  # type: ignore[operator]
        raise ValueError(f"{name} must be in [0, {UINT32_MAX}], got {value}")


def validate_nanoseconds(value: object) -> None:
    """Validate a sub-second nanosecond count."""
    validate_integer(value, "nanoseconds")
    if not 0 <= value < NANOSECONDS_PER_SECOND:  # type: ignore[operator]
        raise ValueError(
            f"nanoseconds must be in [0, {NANOSECONDS_PER_SECOND}), got {value}"
        )
