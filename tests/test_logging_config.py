# Area: Shared Tests
"""Tests for logging setup and formatters."""

import json
import logging

import pytest

from memory_game.errors import InvalidSettingsError
from memory_game.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_settings_error,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    pkg_logger = logging.getLogger("memory_game")
    handlers, level, propagate = list(pkg_logger.handlers), pkg_logger.level, pkg_logger.propagate
    yield
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


def _record(level=logging.INFO, msg="hello %s", args=("world",)):
    return logging.LogRecord("memory_game.engine", level, __file__, 1, msg, args, None)


class TestFormatters:

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "memory_game.engine"
        assert data["message"] == "hello world"
        assert "timestamp" in data

    def test_terminal_formatter_colours_level(self):
        output = TerminalFormatter(fmt="%(levelname)s %(message)s").format(_record(logging.WARNING))
        assert "\033[33m" in output
        assert "hello world" in output

    def test_terminal_formatter_leaves_record_plain(self):
        record = _record()
        TerminalFormatter().format(record)
        assert record.levelname == "INFO"


class TestSetupLogging:

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(log_file, level=logging.DEBUG, terminal=False)
        logging.getLogger("memory_game.engine").info("Level solved")
        for handler in logging.getLogger("memory_game").handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["message"] == "Level solved"

    def test_terminal_only(self):
        setup_logging(None, terminal=True)
        handlers = logging.getLogger("memory_game").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, TerminalFormatter)

    def test_no_handlers_requested(self):
        setup_logging(None, terminal=False)
        handlers = logging.getLogger("memory_game").handlers
        assert [type(h) for h in handlers] == [logging.NullHandler]

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(tmp_path / "a.log", terminal=True)
        setup_logging(tmp_path / "b.log", terminal=True)
        assert len(logging.getLogger("memory_game").handlers) == 2


class TestLogSettingsError:

    def test_prints_block(self, capsys):
        log_settings_error(InvalidSettingsError(["startingLives: bad"]))
        assert "INVALID MEMORY GAME SETTINGS" in capsys.readouterr().err
