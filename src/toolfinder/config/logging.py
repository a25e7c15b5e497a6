# toolfinder/config/logging.py
"""
Logging configuration for hosts embedding toolfinder.

The library only ever calls ``logging.getLogger(__name__)``; nothing here runs
on import. Hosts that want console or rotating-file output call
``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from toolfinder.config.defaults import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)
from toolfinder.config.env_vars import EnvVar, get_env


_FORMATS: dict[str, str] = {
    "simple": "%(levelname)-8s %(message)s",
    "detailed": "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s",
    "json": (
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"message": "%(message)s", "logger": "%(name)s"}'
    ),
}


def setup_logging(
    level: str | None = None,
    quiet: bool = False,
    verbose: bool = False,
    format_style: str = "simple",
    log_file: str | None = None,
) -> None:
    """
    Configure logging for the toolfinder package.

    Args:
        level: Base logging level name. Falls back to ``TOOLFINDER_LOG_LEVEL``
               and then to WARNING.
        quiet: If True, only errors are shown
        verbose: If True, enable debug logging
        format_style: "simple", "detailed", or "json"
        log_file: Optional path for a rotating JSON log (DEBUG level).
                  Expands ~ and creates parent directories.
    """
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        level_name = level or get_env(EnvVar.LOG_LEVEL, DEFAULT_LOG_LEVEL) or "WARNING"
        numeric_level = getattr(logging, level_name.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level_name}")
        log_level = numeric_level

    if format_style not in _FORMATS:
        raise ValueError(
            f"Invalid format style: {format_style}. "
            f"Valid styles are: {', '.join(_FORMATS)}"
        )

    package_logger = logging.getLogger("toolfinder")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_FORMATS[format_style]))
    console_handler.setLevel(log_level)

    package_logger.setLevel(log_level)
    package_logger.addHandler(console_handler)
    package_logger.propagate = False

    log_file = log_file or get_env(EnvVar.LOG_FILE)
    if log_file:
        _add_file_handler(package_logger, log_file)


def _add_file_handler(package_logger: logging.Logger, log_file: str) -> None:
    """Add a rotating file handler with JSON format."""
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "line": %(lineno)d, "message": "%(message)s"}'
    )

    file_handler = RotatingFileHandler(
        str(path),
        maxBytes=DEFAULT_LOG_MAX_BYTES,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_formatter)

    # File handler always logs at DEBUG so the package logger must accept it
    if package_logger.level > logging.DEBUG:
        package_logger.setLevel(logging.DEBUG)

    package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the toolfinder namespace."""
    return logging.getLogger(f"toolfinder.{name}")
