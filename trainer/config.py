"""Configuration management for the triad trainer.

Loads and validates environment variables using Pydantic settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class TrainerConfig(BaseSettings):
    """Triad trainer configuration loaded from environment variables."""

    env: Literal["development", "production", "test"] = Field(
        default="development", alias="TRIADS_ENV"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", alias="TRIADS_LOG_LEVEL"
    )

    # Session defaults
    default_genre: str = Field(default="hands_foundation", alias="TRIADS_DEFAULT_GENRE")
    coverage_mode: bool = Field(default=True, alias="TRIADS_COVERAGE_MODE")
    default_bpm: int = Field(default=92, alias="TRIADS_DEFAULT_BPM", ge=30, le=260)
    default_mode: Literal["training", "flow"] = Field(
        default="training", alias="TRIADS_DEFAULT_MODE"
    )
    default_instrument: Literal["pad", "pad_kick", "kit"] = Field(
        default="pad", alias="TRIADS_DEFAULT_INSTRUMENT"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Singleton configuration instance
_config: TrainerConfig | None = None


def get_config() -> TrainerConfig:
    """Get the global configuration instance.

    Returns:
        TrainerConfig: Configuration singleton
    """
    global _config
    if _config is None:
        _config = TrainerConfig()
    return _config


def reset_config() -> None:
    """Drop the singleton so the next get_config() re-reads the environment."""
    global _config
    _config = None
