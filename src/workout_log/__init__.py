"""Workout Log - date-keyed exercise log persisted to a plain text file."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("workout-log")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
