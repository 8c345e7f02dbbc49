"""
Cacher Configuration Settings

This module contains all configuration constants for Cacher.
Values are read from the environment once, at import time.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application configuration settings."""

    # Search settings
    # Presence of this variable (any value) selects case-sensitive search
    CASE_SENSITIVE_ENV: str = "CASE_SENSITIVE"
    FILE_ENCODING: str = "utf-8"

    # Workout demo settings
    WORKOUT_DELAY: float = float(os.environ.get("CACHER_WORKOUT_DELAY", "2.0"))
    WORKOUT_LOW_INTENSITY: int = 25
    WORKOUT_BREAK_NUMBER: int = 3

    # Logging settings
    DEBUG: bool = os.environ.get("CACHER_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("CACHER_LOG_LEVEL", "WARNING")


# Global settings instance
settings = Settings()
