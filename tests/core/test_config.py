"""
tests/core/test_config.py

Tests for Settings and the logger helper.
"""

import logging

import pytest
from pydantic import ValidationError

from shared_utils.core.config import Settings, settings
from shared_utils.core.logger import PACKAGE_LOGGER_NAME, _configure_package_logger, get_logger


class TestSettings:

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("LOCAL_TIMEZONE", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)

        s = Settings(_env_file=None)

        assert s.debug is False
        assert s.local_timezone is None

    def test_reads_environment_case_insensitively(self, monkeypatch) -> None:
        monkeypatch.setenv("local_timezone", "Europe/Berlin")
        monkeypatch.setenv("DEBUG", "true")

        s = Settings(_env_file=None)

        assert s.local_timezone == "Europe/Berlin"
        assert s.debug is True

    def test_unknown_timezone_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Settings(_env_file=None, local_timezone="Mars/Olympus_Mons")


class TestGetLogger:

    def test_returns_named_logger(self) -> None:
        logger = get_logger("shared_utils.files.data_url")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "shared_utils.files.data_url"

    def test_module_loggers_live_under_the_package_logger(self) -> None:
        logger = get_logger("shared_utils.files.data_url")

        assert logger.parent is logging.getLogger(PACKAGE_LOGGER_NAME)


class TestConfigurePackageLogger:

    @pytest.fixture
    def fresh_loggers(self, monkeypatch):
        """Empty root and package loggers, restored after the test."""
        root = logging.getLogger()
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        root_level, package_level = root.level, package_logger.level
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(package_logger, "handlers", [])
        monkeypatch.setattr(settings, "debug", False)

        yield root, package_logger

        root.setLevel(root_level)
        package_logger.setLevel(package_level)

    def test_adds_a_handler_to_the_package_logger_only(self, fresh_loggers) -> None:
        root, package_logger = fresh_loggers
        root_level = root.level
        root.handlers.clear()  # drop pytest's call-phase capture handlers

        _configure_package_logger()

        assert len(package_logger.handlers) == 1
        assert root.handlers == []
        assert root.level == root_level

    def test_defers_to_an_already_configured_host(self, fresh_loggers) -> None:
        root, package_logger = fresh_loggers
        root.handlers.append(logging.NullHandler())

        _configure_package_logger()

        assert package_logger.handlers == []
        assert package_logger.level == logging.INFO
