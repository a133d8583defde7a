"""
Pattern Demos - Centralized Configuration

All environment variables and settings in one place.
"""

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"


def parse_log_level(value: str) -> str:
    """Normalize a level name; unknown names fall back to WARNING."""
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass
class Config:
    """Application configuration loaded from environment."""

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            log_level=parse_log_level(os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL)),
        )


# Global config instance
config = Config.from_env()
