# Area: Shared
"""
memory_game.errors — Custom exception classes
==============================================

Defines the exception hierarchy raised by the engine and the command
layer. Every error carries the user-facing message the routing layer
sends back as a command-response string.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


INVALID_COMMAND_MESSAGE = "Invalid command"
GAME_FULL_MESSAGE = "Game is full"
GAME_NOT_IN_PROGRESS_MESSAGE = "Game is not in progress"
GAME_ID_MISMATCH_MESSAGE = "Game ID mismatch"
GAME_NOT_STARTABLE_MESSAGE = "Game is not startable"
BOARD_POSITION_NOT_VALID_MESSAGE = "Board position is not valid"
PLAYER_NOT_IN_GAME_MESSAGE = "Player is not in this game"
PLAYER_ALREADY_IN_GAME_MESSAGE = "Player is already in this game"
PLAYER_IS_NOT_AN_ADMINISTRATOR_MESSAGE = "Player is not an administrator"
NO_NEGATIVE_NUMBERS_MESSAGE = "Negative numbers are not allowed"
COMPETITIVE_MODE_NOT_CUSTOMIZABLE_MESSAGE = (
    "Player cannot customize settings in Competitive mode"
)
INVALID_SETTINGS_MESSAGE = "The provided game settings are invalid"
GAME_SETTINGS_MISSING_MESSAGE = "Game settings are missing but expected"
GAME_DISABLED_BY_ADMIN_MESSAGE = "Game is disabled by an administrator"


class InvalidParametersError(Exception):
    """Base exception for all memory_game errors.

    ``message`` is the exact string surfaced to the player.
    """

    default_message = INVALID_COMMAND_MESSAGE

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MemoryGameError(InvalidParametersError):
    """Raised by the MemoryGame engine itself."""
    pass


class PlayerAlreadyInGameError(MemoryGameError):
    default_message = PLAYER_ALREADY_IN_GAME_MESSAGE


class GameFullError(MemoryGameError):
    default_message = GAME_FULL_MESSAGE


class PlayerNotInGameError(MemoryGameError):
    default_message = PLAYER_NOT_IN_GAME_MESSAGE


class GameNotStartableError(MemoryGameError):
    default_message = GAME_NOT_STARTABLE_MESSAGE


class CompetitiveModeNotCustomizableError(MemoryGameError):
    default_message = COMPETITIVE_MODE_NOT_CUSTOMIZABLE_MESSAGE


class SettingsMissingError(MemoryGameError):
    default_message = GAME_SETTINGS_MISSING_MESSAGE


class GameNotInProgressError(MemoryGameError):
    default_message = GAME_NOT_IN_PROGRESS_MESSAGE


class BoardPositionNotValidError(MemoryGameError):
    default_message = BOARD_POSITION_NOT_VALID_MESSAGE


class InvalidSettingsError(MemoryGameError):
    """Raised when a settings record fails validation.

    Stores the candidate and the individual validation errors so the
    caller can log or display them.
    """

    default_message = INVALID_SETTINGS_MESSAGE

    def __init__(
        self,
        validation_errors: Optional[List[str]] = None,
        candidate: Optional[Dict[str, Any]] = None,
    ):
        self.validation_errors = validation_errors or []
        self.candidate = candidate
        super().__init__()

    def format_error_log(self) -> str:
        lines = [
            "",
            "=" * 64,
            " INVALID MEMORY GAME SETTINGS",
            "=" * 64,
        ]
        if self.candidate is not None:
            lines.append(" ── CANDIDATE " + "─" * 50)
            lines.append(_indent_json(self.candidate))
            lines.append("")
        if self.validation_errors:
            lines.append(" ── VALIDATION ERRORS " + "─" * 42)
            for error in self.validation_errors:
                lines.append(f" • {error}")
        lines.append("=" * 64)
        lines.append("")
        return "\n".join(lines)


# ── Command-layer errors ─────────────────────────────────────


class InvalidCommandError(InvalidParametersError):
    default_message = INVALID_COMMAND_MESSAGE


class GameIDMismatchError(InvalidParametersError):
    default_message = GAME_ID_MISMATCH_MESSAGE


class GameDisabledByAdminError(InvalidParametersError):
    default_message = GAME_DISABLED_BY_ADMIN_MESSAGE


class NotAdministratorError(InvalidParametersError):
    default_message = PLAYER_IS_NOT_AN_ADMINISTRATOR_MESSAGE


class NegativeNumberError(InvalidParametersError):
    default_message = NO_NEGATIVE_NUMBERS_MESSAGE


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
