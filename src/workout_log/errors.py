"""
Error taxonomy shared by the validator, the store and the facade.

Every failure raised by this package is a ``WorkoutLogError`` whose ``kind``
tells the caller which of four conditions occurred:

- ``FORMAT``: a date or entry string does not match the required syntax
- ``RANGE``: a well-formed date names a month or day that does not exist
- ``NOT_FOUND``: the referenced date is not registered in the store
- ``STORAGE``: reading or writing the backing file failed
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of error conditions."""

    FORMAT = "FORMAT"
    RANGE = "RANGE"
    NOT_FOUND = "NOT_FOUND"
    STORAGE = "STORAGE"


class WorkoutLogError(Exception):
    """Base class for all workout log errors."""

    kind: ErrorKind


class FormatError(WorkoutLogError, ValueError):
    kind = ErrorKind.FORMAT


class RangeError(WorkoutLogError, ValueError):
    kind = ErrorKind.RANGE


class NotFoundError(WorkoutLogError, LookupError):
    """Raised when a date key is not registered."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, date: str | None, message: str | None = None):
        self.date = date
        super().__init__(message or f"Workout on {date} does not exist")


class StorageError(WorkoutLogError, OSError):
    """Raised when the backing file cannot be read, parsed or written."""

    kind = ErrorKind.STORAGE
