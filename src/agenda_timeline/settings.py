"""Timeline configuration loaded from environment variables.

Holds logging switches, the default strategy, and the host's default day
(as wall-clock text, validated with the time codec).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from agenda_timeline.clock import parse_time
from agenda_timeline.types import DayConfig


class TimelineSettings(BaseSettings):
    """Settings read from AGENDA_* environment variables or a .env file."""

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Engine
    strategy: str = Field(
        default="day_partitioned",
        description="Default walker: inline, anchored or day_partitioned",
    )

    # Default day, as offered to a new agenda
    day_start: str = Field(default="09:00", description="Day start, HH:MM")
    day_end: str = Field(default="16:00", description="Day end, HH:MM")
    number_of_days: int = Field(default=1, ge=1, description="Days in the agenda")
    break_interval_min: int | None = Field(
        default=90,
        description="Minutes of work between breaks (unset disables breaks)",
    )
    break_duration_min: int | None = Field(default=15, description="Break length")
    lunch_target: str | None = Field(
        default="12:00",
        description="Approximate lunch start, HH:MM (unset disables lunch)",
    )
    lunch_duration_min: int | None = Field(default=60, description="Lunch length")

    model_config = {
        "env_prefix": "AGENDA_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("day_start", "day_end", "lunch_target")
    @classmethod
    def _check_time(cls, v: str | None) -> str | None:
        if v is not None and parse_time(v) is None:
            raise ValueError(f"expected H:MM or HH:MM, got {v!r}")
        return v

    @field_validator("strategy")
    @classmethod
    def _check_strategy(cls, v: str) -> str:
        from agenda_timeline.timeline import Strategy

        return Strategy(v.lower()).value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {v!r}")
        return level

    def to_day_config(self) -> DayConfig:
        """Build the default DayConfig these settings describe."""
        return DayConfig(
            day_start_min=parse_time(self.day_start),  # type: ignore[arg-type]
            day_end_min=parse_time(self.day_end),  # type: ignore[arg-type]
            number_of_days=self.number_of_days,
            break_interval_min=self.break_interval_min,
            break_duration_min=self.break_duration_min,
            lunch_target_min=parse_time(self.lunch_target),
            lunch_duration_min=self.lunch_duration_min,
        )


# Singleton pattern
_settings: TimelineSettings | None = None


def get_settings() -> TimelineSettings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = TimelineSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached singleton so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
