"""
Configuration for toolfinder.

Defaults, environment variables and logging setup.
"""

from toolfinder.config.env_vars import (
    EnvVar,
    get_env,
    get_env_float,
    get_env_int,
)
from toolfinder.config.logging import get_logger, setup_logging

__all__ = [
    "EnvVar",
    "get_env",
    "get_env_float",
    "get_env_int",
    "get_logger",
    "setup_logging",
]
