# Area: Shared
"""
memory_game.logging_config — Structured logging setup
=====================================================

Configures dual logging for the ``memory_game`` logger hierarchy:
a coloured terminal handler (stderr) and a JSON-lines file handler.
The terminal handler can be left out for interactive play so that log
lines do not interleave with the rendered board.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidSettingsError

logger = logging.getLogger("memory_game")


class TerminalFormatter(logging.Formatter):
    """Coloured formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Colour a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per line for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[Union[str, Path]] = "memory_game.log",
    level: int = logging.INFO,
    terminal: bool = True,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or Path, optional
        JSON-lines log file. ``None`` disables file logging.
    level : int
        Logging level. Defaults to INFO.
    terminal : bool
        Attach the coloured stderr handler.
    """
    pkg_logger = logging.getLogger("memory_game")
    pkg_logger.setLevel(level)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    if terminal:
        terminal_handler = logging.StreamHandler(sys.stderr)
        terminal_handler.setLevel(level)
        terminal_handler.setFormatter(TerminalFormatter(
            fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        ))
        pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning("Could not create log file: %s", e)

    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())

    pkg_logger.propagate = False


def log_settings_error(error: InvalidSettingsError) -> None:
    """Print the formatted settings error block and record it in the log."""
    print(error.format_error_log(), file=sys.stderr)
    logger.error(
        "Invalid settings: %s", "; ".join(error.validation_errors) or error.message,
    )
