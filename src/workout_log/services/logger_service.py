"""
Facade used by front ends to log workouts against a "current date".
"""

from __future__ import annotations

import os

from ..config import SETTINGS
from ..db import WorkoutStore
from ..errors import NotFoundError
from ..validation import validate_date, validate_entry


class WorkoutLogger:
    """
    Wraps a ``WorkoutStore`` and remembers the last date referenced.

    Operations taking an optional ``date`` fall back to ``current_date``.
    The cursor only moves after the operation naming it succeeds.
    """

    def __init__(
        self, path: str | os.PathLike[str] | None = None, separator: str | None = None
    ):
        if path is None:
            path = SETTINGS.WORKOUT_LOG_FILE
        self.store = WorkoutStore(path, separator)
        self._current_date: str | None = None

    @property
    def current_date(self) -> str | None:
        """Last date referenced, or None if no date has been set yet."""
        return self._current_date

    def _resolve(self, date: str | None) -> str:
        if date is not None:
            return date
        if self._current_date is None:
            raise NotFoundError(None, "No current workout date has been set")
        return self._current_date

    def add_workout(self, date: str, entry: str | None = None) -> None:
        """Register ``date`` and optionally log its first ``entry``."""
        validate_date(date)
        if entry is None:
            self.store.register_date(date)
        else:
            validate_entry(entry)
            self.store.append_entry(date, entry, create=True)
        self._current_date = date

    def add_exercise(self, entry: str, date: str | None = None) -> None:
        target = self._resolve(date)
        self.store.append_entry(target, entry)
        self._current_date = target

    def get_workout(self, date: str | None = None) -> list[str]:
        """Display-form entries of ``date`` (or the current date)."""
        target = self._resolve(date)
        entries = self.store.get_display_entries(target)
        self._current_date = target
        return entries

    def get_workout_raw(self, date: str | None = None) -> list[str]:
        """Storage-form entries of ``date`` (or the current date)."""
        target = self._resolve(date)
        entries = self.store.get_entries(target)
        self._current_date = target
        return entries

    def get_current_workout(self) -> list[str]:
        return self.get_workout()

    def get_current_workout_raw(self) -> list[str]:
        return self.get_workout_raw()

    def clear_workout(self, date: str | None = None) -> None:
        target = self._resolve(date)
        self.store.clear_record(target)
        self._current_date = target

    def clear_current_workout(self) -> None:
        self.clear_workout()

    def has_workout_date(self, date: str) -> bool:
        found = self.store.contains(date)
        self._current_date = date
        return found

    def remove_workout(self, date: str) -> None:
        self.store.remove_date(date)
        self._current_date = date
