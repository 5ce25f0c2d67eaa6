"""
Greed - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Variables are prefixed with ``GREED_`` (e.g. ``GREED_LOG_LEVEL=DEBUG``) and
may also be placed in a ``.env`` file.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.engine.base import GameConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Rules
    num_dice: int = Field(default=5, ge=1)
    entry_score: int = Field(default=300, ge=0)
    final_round_score: int = Field(default=3000, ge=1)

    model_config = {
        "env_prefix": "GREED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    def game_config(self) -> GameConfig:
        """Rule constants for a new game."""
        return GameConfig(
            num_dice=self.num_dice,
            entry_score=self.entry_score,
            final_round_score=self.final_round_score,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
