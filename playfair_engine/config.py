"""
Engine settings
===============
Read from ``PLAYFAIR_*`` environment variables or a local ``.env`` file:

    PLAYFAIR_DEFAULT_KEY_LENGTH=12
    PLAYFAIR_LOG_LEVEL=DEBUG
    PLAYFAIR_LOG_FILE=/tmp/playfair.log

Nothing is cached at import time; ``get_settings()`` reads the environment
each time it is called.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlayfairSettings(BaseSettings):
    """Tunables for the cipher facade and its logging."""

    model_config = SettingsConfigDict(
        env_prefix="PLAYFAIR_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    default_key_length: int = Field(
        default=10,
        gt=0,
        description="Length used by generate_key when asked for <= 0 letters.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level name for the playfair_engine logger.",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Also write log records to this file when set.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return name

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def get_settings() -> PlayfairSettings:
    return PlayfairSettings()
