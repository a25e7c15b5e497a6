# tests/config/test_logging.py
"""Tests for logging configuration."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest

from toolfinder.config.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging so other tests see default propagation."""
    package_logger = logging.getLogger("toolfinder")
    yield package_logger
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_level(self, restore_package_logger) -> None:
        setup_logging()
        assert restore_package_logger.level == logging.WARNING
        assert restore_package_logger.propagate is False

    def test_quiet(self, restore_package_logger) -> None:
        setup_logging(quiet=True)
        assert restore_package_logger.level == logging.ERROR

    def test_verbose(self, restore_package_logger) -> None:
        setup_logging(verbose=True)
        assert restore_package_logger.level == logging.DEBUG

    def test_explicit_level(self, restore_package_logger) -> None:
        setup_logging(level="info")
        assert restore_package_logger.level == logging.INFO

    def test_level_from_env(
        self, restore_package_logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TOOLFINDER_LOG_LEVEL", "ERROR")
        setup_logging()
        assert restore_package_logger.level == logging.ERROR

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging(level="LOUD")

    def test_invalid_format(self) -> None:
        with pytest.raises(ValueError, match="Invalid format style"):
            setup_logging(format_style="xml")

    def test_json_format(self, restore_package_logger) -> None:
        setup_logging(format_style="json")
        handler = restore_package_logger.handlers[0]
        assert "timestamp" in handler.formatter._fmt

    def test_repeated_setup_replaces_handlers(self, restore_package_logger) -> None:
        setup_logging()
        setup_logging()
        assert len(restore_package_logger.handlers) == 1

    def test_root_logger_untouched(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        setup_logging(verbose=True)
        assert logging.getLogger().handlers == root_handlers

    def test_log_file(self, restore_package_logger, tmp_path) -> None:
        log_path = tmp_path / "logs" / "toolfinder.log"
        setup_logging(log_file=str(log_path))

        file_handlers = [
            h
            for h in restore_package_logger.handlers
            if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_path.parent.exists()
        assert restore_package_logger.level == logging.DEBUG

        get_logger("search").debug("indexed")
        file_handlers[0].flush()
        assert '"message": "indexed"' in log_path.read_text(encoding="utf-8")

    def test_log_file_from_env(
        self, restore_package_logger, tmp_path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        log_path = tmp_path / "env.log"
        monkeypatch.setenv("TOOLFINDER_LOG_FILE", str(log_path))
        setup_logging()
        assert any(
            isinstance(h, RotatingFileHandler)
            for h in restore_package_logger.handlers
        )


class TestGetLogger:
    def test_namespaced(self) -> None:
        assert get_logger("search").name == "toolfinder.search"
