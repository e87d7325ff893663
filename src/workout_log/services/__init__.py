"""
Services layer for the workout log.
"""

from .logger_service import WorkoutLogger

__all__ = ["WorkoutLogger"]
