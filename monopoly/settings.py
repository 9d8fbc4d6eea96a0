"""
Central application configuration using pydantic-settings.

Environment variables (prefix: MONOPOLY_):
    MONOPOLY_LOG_LEVEL      - Logging level name (default: INFO)
    MONOPOLY_DICE_SEED      - Optional seed for reproducible dice
    MONOPOLY_STARTING_CASH  - Cash each player starts with (default: 1500)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MonopolySettings(BaseSettings):
    """Runtime settings for the tile engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MONOPOLY_",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name (DEBUG, INFO, WARNING, ...).",
    )
    dice_seed: Optional[int] = Field(
        default=None,
        description="Seed for the default dice; unset means nondeterministic.",
    )
    starting_cash: int = Field(
        default=1500,
        ge=0,
        description="Cash each player starts the game with.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Upper-case the level name and reject unknown levels."""
        if not value:
            return "INFO"
        value = str(value).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value


@lru_cache
def get_settings() -> MonopolySettings:
    """Return cached settings instance."""
    return MonopolySettings()


def configure_logging(settings: Optional[MonopolySettings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
