"""
Format and calendar checks for dates and exercise entries.

Every store operation runs these checks before touching memory or disk.
"""

from __future__ import annotations

import calendar
import re
from decimal import Decimal
from typing import Any

from .errors import FormatError, RangeError
from .models import Entry, Unit

# Matches: YYYY-MM-DD, e.g. "2024-03-10"
DATE_RE = re.compile(r"(?P<y>[0-9]{4})-(?P<m>[0-9]{2})-(?P<d>[0-9]{2})")

# Matches: <name>_<sets>_<reps>_<intensity><unit>, e.g. "squat_5_5_100.5kg"
ENTRY_RE = re.compile(
    r"(?P<name>[A-Za-z-]+)_(?P<sets>[0-9]+)_(?P<reps>[0-9]+)_"
    r"(?P<intensity>[0-9]+(?:\.[0-9]+)?)(?P<unit>kg|sec|min)"
)

FIELD_DELIMITER = "_"


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year`` (Gregorian calendar)."""
    return calendar.monthrange(year, month)[1]


def validate_date(value: Any) -> str:
    """
    Check that ``value`` is a ``YYYY-MM-DD`` string naming a real date.

    Day ``00`` is accepted; the upper bound honours leap years.

    Raises:
        FormatError: if the text does not match ``YYYY-MM-DD``
        RangeError: if the month is not 01-12 or the day exceeds the month
    """
    if not isinstance(value, str):
        raise FormatError(f"Date must be a string, got {type(value).__name__}")
    match = DATE_RE.fullmatch(value)
    if match is None:
        raise FormatError(f"Date should be formatted YYYY-MM-DD, got {value!r}")

    year, month, day = int(match["y"]), int(match["m"]), int(match["d"])
    if not 1 <= month <= 12:
        raise RangeError(f"Month {month:02d} in {value} does not exist")
    if day < 0 or day > days_in_month(year, month):
        raise RangeError(f"Day {day:02d} in {value} is outside the month")
    return value


def _match_entry(value: Any) -> re.Match[str]:
    match = ENTRY_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise FormatError(
            f"Exercise should be formatted name_sets_reps_intensity(kg|sec|min), got {value!r}"
        )
    return match


def validate_entry(value: Any) -> str:
    """
    Check that ``value`` is an entry in storage form.

    Raises:
        FormatError: on a missing field, a wrong unit or any stray character
    """
    _match_entry(value)
    return value


def parse_entry(value: Any) -> Entry:
    """Validate ``value`` and split it into an ``Entry``."""
    match = _match_entry(value)
    return Entry(
        name=match["name"],
        sets=int(match["sets"]),
        reps=int(match["reps"]),
        intensity=Decimal(match["intensity"]),
        unit=Unit(match["unit"]),
    )


def to_display(entry: str, separator: str) -> str:
    """Rewrite the field delimiter of a stored entry, e.g. ``squat | 5 | 5 | 100kg``."""
    return entry.replace(FIELD_DELIMITER, separator)
