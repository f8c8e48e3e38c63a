"""pyfiletime - Convert FILETIME timestamps to and from bytes and datetimes."""

from __future__ import annotations

try:
    from pyfiletime._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyfiletime._constants import EPOCH_AS_FILETIME, FILETIME_EPOCH, HUNDREDS_OF_NANOSECONDS
from pyfiletime._errors import FileTimeError, LengthError, OutOfRangeError
from pyfiletime._filetime import FileTime, datetime_to_filetime, filetime_to_datetime

__all__ = [
    "FileTime",
    "datetime_to_filetime",
    "filetime_to_datetime",
    "EPOCH_AS_FILETIME",
    "FILETIME_EPOCH",
    "HUNDREDS_OF_NANOSECONDS",
    "FileTimeError",
    "LengthError",
    "OutOfRangeError",
]
