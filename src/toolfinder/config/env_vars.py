"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names read by toolfinder."""

    # Search tuning
    MAX_SUGGESTIONS = "TOOLFINDER_MAX_SUGGESTIONS"
    FUZZY_THRESHOLD = "TOOLFINDER_FUZZY_THRESHOLD"

    # Persistence
    PREFERENCES_DIR = "TOOLFINDER_PREFERENCES_DIR"

    # Logging
    LOG_LEVEL = "TOOLFINDER_LOG_LEVEL"
    LOG_FILE = "TOOLFINDER_LOG_FILE"


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Example:
        >>> level = get_env(EnvVar.LOG_LEVEL, "WARNING")
    """
    return os.getenv(var.value, default)


def get_env_int(var: EnvVar, default: int | None = None) -> int | None:
    """Get environment variable as integer.

    Returns ``default`` when the variable is unset or not an integer.
    """
    value = get_env(var)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        return default


def get_env_float(var: EnvVar, default: float | None = None) -> float | None:
    """Get environment variable as float.

    Returns ``default`` when the variable is unset or not a number.
    """
    value = get_env(var)
    if value is None:
        return default

    try:
        return float(value)
    except ValueError:
        return default
