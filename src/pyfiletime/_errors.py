"""Exception hierarchy for FILETIME conversion."""


class FileTimeError(Exception):
    """Base exception for FILETIME conversion errors.

    ``str(err)`` is a fixed description of what failed (wrong buffer length,
    tick count outside the calendar range). The offending values, such as the
    byte count read or the tick count, are kept apart in ``internal()`` so a
    caller parsing untrusted files decides whether to record them.
    ``wrapped`` holds the standard library error that triggered the failure,
    if any.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class LengthError(FileTimeError):
    """Raised when a byte buffer is not exactly 8 bytes long."""


class OutOfRangeError(FileTimeError):
    """Raised when a value does not fit the target representation."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_LENGTH = "FILETIME requires exactly 8 bytes"
ERR_MSG_SHORT_READ = "unexpected end of buffer while reading FILETIME"
ERR_MSG_TICKS_OUT_OF_RANGE = "tick count does not fit in a signed 64-bit integer"
ERR_MSG_DATETIME_OUT_OF_RANGE = "FILETIME is outside the representable datetime range"
