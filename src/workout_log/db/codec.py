"""
Line grammar of the backing file.

Each registered date opens with a ``DATE`` line; its entries follow as
``ENTRY`` lines in insertion order. Fields are tab separated::

    DATE	2024-03-10
    ENTRY	2024-03-10	squat_5_5_100.5kg
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..errors import StorageError, WorkoutLogError
from ..validation import validate_date, validate_entry

DATE_TAG = "DATE"
ENTRY_TAG = "ENTRY"
SEP = "\t"


def dump_records(records: Mapping[str, Sequence[str]]) -> str:
    lines: list[str] = []
    for date, entries in records.items():
        lines.append(f"{DATE_TAG}{SEP}{date}")
        lines.extend(f"{ENTRY_TAG}{SEP}{date}{SEP}{entry}" for entry in entries)
    return "".join(line + "\n" for line in lines)


def load_records(text: str) -> dict[str, list[str]]:
    """
    Parse backing file ``text`` into an insertion-ordered mapping.

    A repeated ``DATE`` line is a no-op. Anything else that does not fit the
    grammar raises ``StorageError`` naming the offending line.
    """
    records: dict[str, list[str]] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue
        fields = raw.split(SEP)
        tag = fields[0]
        try:
            if tag == DATE_TAG and len(fields) == 2:
                records.setdefault(validate_date(fields[1]), [])
            elif tag == ENTRY_TAG and len(fields) == 3:
                date = validate_date(fields[1])
                if date not in records:
                    raise StorageError(f"line {lineno}: entry for undeclared date {date}")
                records[date].append(validate_entry(fields[2]))
            else:
                raise StorageError(f"line {lineno}: unrecognised record {raw!r}")
        except StorageError:
            raise
        except WorkoutLogError as e:
            raise StorageError(f"line {lineno}: {e}") from e
    return records
