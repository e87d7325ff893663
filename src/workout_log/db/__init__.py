"""Persistent storage for workout records."""

from .store import WorkoutStore

__all__ = ["WorkoutStore"]
