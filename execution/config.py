"""Configuration for the execution package."""

import logging
import os
from functools import lru_cache
from typing import Optional, Union
from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()


@lru_cache
def get_settings() -> "Settings":
    """Get cached settings instance."""
    return Settings()


def parse_log_level(value: Optional[str]) -> Optional[Union[int, str]]:
    """Parse a log level from the environment.

    Args:
        value: A level name (case-insensitive) or a non-negative integer.

    Returns:
        The level name or number, or None when unset.

    Raises:
        ConfigurationError: If the value is not a known level.
    """
    if value is None or not value.strip():
        return None

    value = value.strip()
    if value.isdigit():
        return int(value)

    name = value.upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigurationError(f"Invalid EXECUTION_LOG_LEVEL: {value!r}")
    return name


class Settings:
    """Package settings."""

    def __init__(self):
        # Level for the stdlib logger behind DEFAULT_LOGGER; None leaves it
        # at NOTSET so the host application's configuration applies
        self.log_level: Optional[Union[int, str]] = parse_log_level(
            os.getenv("EXECUTION_LOG_LEVEL")
        )

        # Model used by create_request() when none is given
        self.default_model: str = os.getenv("EXECUTION_DEFAULT_MODEL", "gpt-4o")
