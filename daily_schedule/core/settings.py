"""Application settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Settings:
    """Runtime configuration for the schedule service."""

    log_level: str = _DEFAULT_LOG_LEVEL
    app_title: str = "Daily Schedule Service"

    def __post_init__(self) -> None:
        env_level = os.getenv("DAILY_SCHEDULE_LOG_LEVEL")
        env_title = os.getenv("DAILY_SCHEDULE_APP_TITLE")
        if env_level:
            self.log_level = env_level.upper()
        if env_title:
            self.app_title = env_title
        # Unknown names would make logging.Logger.setLevel raise
        if self.log_level not in logging.getLevelNamesMapping():
            self.log_level = _DEFAULT_LOG_LEVEL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
