"""
File-backed store mapping workout dates to their exercise entries.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from pathlib import Path

from ..config import SETTINGS
from ..errors import NotFoundError, StorageError
from ..models import Entry
from ..validation import parse_entry, to_display, validate_date, validate_entry
from .codec import dump_records, load_records

logger = logging.getLogger(__name__)


class WorkoutStore:
    """
    Date-keyed record store mirrored to one text file.

    Each mutation builds the new mapping as a copy, rewrites the whole file
    atomically (temp file + ``os.replace``) and only then swaps the copy in.
    A failed write therefore leaves memory and disk as they were.
    """

    def __init__(self, path: str | os.PathLike[str], separator: str | None = None):
        self.path = Path(path)
        self.separator = separator if separator is not None else SETTINGS.DISPLAY_SEPARATOR
        self._lock = threading.RLock()
        self._records: dict[str, list[str]] = self._load()

    def _load(self) -> dict[str, list[str]]:
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                logger.info("Created workout log at %s", self.path)
            text = self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to open workout log %s: %s", self.path, e)
            raise StorageError(f"Cannot open workout log {self.path}: {e}") from e
        try:
            records = load_records(text)
        except StorageError as e:
            logger.error("Failed to parse workout log %s: %s", self.path, e)
            raise
        logger.debug("Loaded %d workouts from %s", len(records), self.path)
        return records

    def _commit(self, records: dict[str, list[str]]) -> None:
        """Persist ``records`` and make them the in-memory state."""
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(dump_records(records))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Failed to write workout log %s: %s", self.path, e)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            raise StorageError(f"Cannot write workout log {self.path}: {e}") from e
        self._records = records
        self._sync_dir()

    def _sync_dir(self) -> None:
        """Flush the rename of the backing file to disk (POSIX only)."""
        if os.name != "posix":
            return
        try:
            fd = os.open(self.path.parent, os.O_RDONLY)
            try:
                os.fsync(fd)
            finally:
                os.close(fd)
        except OSError as e:
            # the new file is already in place; only the rename may be lost on a crash
            logger.warning("Failed to sync directory of %s: %s", self.path, e)

    def _snapshot(self) -> dict[str, list[str]]:
        return {date: list(entries) for date, entries in self._records.items()}

    def _require(self, date: str) -> list[str]:
        try:
            return self._records[date]
        except KeyError:
            raise NotFoundError(date) from None

    # ---- mutations ---------------------------------------------------------

    def register_date(self, date: str) -> bool:
        """
        Create an empty record for ``date``.

        Returns True if the date was new, False if it was already registered.
        """
        validate_date(date)
        with self._lock:
            if date in self._records:
                return False
            records = self._snapshot()
            records[date] = []
            self._commit(records)
        logger.info("Registered workout %s", date)
        return True

    def append_entry(self, date: str, entry: str, *, create: bool = False) -> None:
        """
        Append ``entry`` to the record of ``date``.

        With ``create=True`` a missing date is registered in the same write
        instead of raising ``NotFoundError``.
        """
        validate_date(date)
        validate_entry(entry)
        with self._lock:
            if not create:
                self._require(date)
            records = self._snapshot()
            records.setdefault(date, []).append(entry)
            self._commit(records)
        logger.info("Added %s to workout %s", entry, date)

    def clear_record(self, date: str) -> None:
        """Drop every entry of ``date`` but keep the date registered."""
        validate_date(date)
        with self._lock:
            self._require(date)
            records = self._snapshot()
            records[date] = []
            self._commit(records)
        logger.info("Cleared workout %s", date)

    def remove_date(self, date: str) -> None:
        validate_date(date)
        with self._lock:
            self._require(date)
            records = self._snapshot()
            del records[date]
            self._commit(records)
        logger.info("Removed workout %s", date)

    # ---- queries -----------------------------------------------------------

    def get_entries(self, date: str) -> list[str]:
        """Entries of ``date`` in storage form, as a new list."""
        validate_date(date)
        with self._lock:
            return list(self._require(date))

    def get_display_entries(self, date: str) -> list[str]:
        return [to_display(entry, self.separator) for entry in self.get_entries(date)]

    def get_parsed_entries(self, date: str) -> list[Entry]:
        return [parse_entry(entry) for entry in self.get_entries(date)]

    def contains(self, date: str) -> bool:
        validate_date(date)
        with self._lock:
            return date in self._records

    def dates(self) -> list[str]:
        """Registered dates in the order they were first added."""
        with self._lock:
            return list(self._records)

    def __contains__(self, date: object) -> bool:
        with self._lock:
            return date in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self.dates())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"<WorkoutStore path={self.path} workouts={len(self)}>"
