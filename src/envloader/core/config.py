"""Settings for the envloader command line."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CliSettings(BaseModel):
    """CLI defaults loaded from environment variables."""

    env_file: str = ".env"
    log_level: str = "WARNING"


def load_cli_settings() -> CliSettings:
    """Load CLI defaults from the process environment with validation."""
    env_file = os.getenv("ENVLOADER_ENV_FILE", ".env").strip()
    log_level = os.getenv("ENVLOADER_LOG_LEVEL", "WARNING").strip().upper()

    if not env_file:
        raise ValueError("ENVLOADER_ENV_FILE must not be empty")
    if log_level not in LOG_LEVELS:
        raise ValueError(f"ENVLOADER_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

    return CliSettings(env_file=env_file, log_level=log_level)
