"""Tests for logger module."""

import logging
from unittest.mock import patch

from juicebot.util import logger as logger_module
from juicebot.util.logger import (
    DATE_FORMAT,
    LOG_FORMAT,
    ColorFormatter,
    PromptToolkitHandler,
    get_logger,
    set_log_level,
    should_use_color,
)


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
        func="test_func",
    )


class TestShouldUseColor:
    """Tests for should_use_color function."""

    @patch("sys.stderr.isatty")
    def test_tty(self, mock_isatty):
        mock_isatty.return_value = True
        assert should_use_color() is True

    @patch("sys.stderr.isatty")
    def test_no_tty(self, mock_isatty):
        mock_isatty.return_value = False
        assert should_use_color() is False

    @patch("sys.stderr.isatty")
    def test_exception(self, mock_isatty):
        mock_isatty.side_effect = Exception("Error")
        assert should_use_color() is False


def test_color_formatter_wraps_error_in_red():
    formatter = ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    formatted = formatter.format(make_record(logging.ERROR, "boom"))

    assert formatted.startswith("\033[31m")
    assert formatted.endswith("\033[0m")
    assert "boom" in formatted


def test_prompt_toolkit_handler_prints():
    handler = PromptToolkitHandler(formatter=logging.Formatter("%(message)s"))

    with patch.object(logger_module, "print_formatted_text") as printer:
        handler.emit(make_record(msg="to console"))

    printer.assert_called_once()


def test_get_logger_namespaced_and_cached(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "LOGS_DIR", tmp_path)
    monkeypatch.setattr(logger_module, "LOG_FILEPATH", None)

    first = get_logger("unit_test_logger")
    second = get_logger("unit_test_logger")

    assert first is second
    assert first.name == "juicebot.unit_test_logger"
    assert first.propagate is False
    assert len(first.handlers) == 2


def test_set_log_level_updates_existing_loggers(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "LOGS_DIR", tmp_path)
    monkeypatch.setattr(logger_module, "LOG_FILEPATH", None)
    monkeypatch.setattr(logger_module, "LOG_LEVEL", logging.INFO)
    log = get_logger("level_test_logger")

    set_log_level("warning")
    assert log.level == logging.WARNING

    set_log_level("nonsense")
    assert log.level == logging.INFO


def test_discord_internals_silenced():
    assert logging.getLogger("discord.http").level == logging.ERROR
