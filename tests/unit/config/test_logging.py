"""
Unit tests for logging setup.

stdout carries the MCP protocol, so nothing may be logged there.
"""

import logging

import pytest

from linkchecker.config.logging import ColoredFormatter, get_logger, setup_logging
from linkchecker.config.settings import Settings


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("linkchecker")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_logs_go_to_stderr(self, settings, capsys):
        setup_logging(settings)

        get_logger("server").info("Link Checker MCP server is running...")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Link Checker MCP server is running..." in captured.err

    def test_setup_is_quiet_at_info(self, settings, capsys):
        """Only the readiness line should appear at startup."""
        setup_logging(settings)

        captured = capsys.readouterr()
        assert captured.err == ""

    def test_log_file(self, settings, tmp_path):
        settings.log_file = tmp_path / "logs" / "linkchecker.log"

        setup_logging(settings)
        get_logger("probe").warning("something happened")
        for handler in logging.getLogger("linkchecker").handlers:
            handler.flush()

        assert "something happened" in settings.log_file.read_text()

    def test_level_applied(self, settings):
        settings.log_level = "WARNING"

        setup_logging(settings)

        assert logging.getLogger("linkchecker").level == logging.WARNING


class TestGetLogger:
    def test_prefixes_short_names(self):
        assert get_logger("server").name == "linkchecker.server"

    def test_keeps_package_names(self):
        assert get_logger("linkchecker.checks.probe").name == "linkchecker.checks.probe"


class TestColoredFormatter:
    def test_colors_level_without_mutating_record(self):
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("linkchecker", logging.ERROR, __file__, 1, "boom", None, None)

        output = formatter.format(record)

        assert "\033[31mERROR\033[0m" in output
        assert record.levelname == "ERROR"
