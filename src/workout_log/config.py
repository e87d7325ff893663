import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env for local use; real environment variables take precedence
load_dotenv(override=False)


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables.
    Uses pydantic for validation and parsing.
    """

    WORKOUT_LOG_FILE: Path = Field(Path("workouts.log"), description="Backing file path")
    LOG_LEVEL: str = Field("INFO", description="Root logger level name")
    DISPLAY_SEPARATOR: str = Field(" | ", description="Field separator for display entries")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("DISPLAY_SEPARATOR")
    @classmethod
    def separator_required(cls, v):
        if not v:
            raise ValueError("DISPLAY_SEPARATOR must not be empty")
        return v


SETTINGS = Config()
