"""
Pydantic models for parsed exercise entries.
"""

from __future__ import annotations

import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Unit(str, enum.Enum):
    """Intensity units accepted in an entry."""

    KG = "kg"
    SEC = "sec"
    MIN = "min"


class Entry(BaseModel):
    """Structured view of one stored entry, e.g. ``squat_5_5_100.5kg``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    intensity: Decimal = Field(..., ge=0)
    unit: Unit

    def __str__(self) -> str:
        return f"{self.name}: {self.sets}x{self.reps} @ {self.intensity}{self.unit.value}"
