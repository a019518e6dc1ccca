# Area: Admin
"""
memory_game.admin — Administrator settings controller
=====================================================

Owns the town's ``DefaultMemoryGameSettings``. Administrators replace
the competitive defaults here; games that already started keep the
snapshot they took at ``start_game`` and are unaffected.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .errors import NotAdministratorError
from ._engine.state import Player
from .settings import (
    DefaultMemoryGameSettings,
    MemoryGameSettings,
    validate_settings,
)

logger = logging.getLogger("memory_game.admin")


class AdminSettingsController:
    """
    Validated, admin-only edits to the shared default settings.

    Args:
        default_settings: The shared record; created with defaults if omitted
    """

    def __init__(self, default_settings: Optional[DefaultMemoryGameSettings] = None):
        self.default_settings = default_settings or DefaultMemoryGameSettings()

    def current_settings(self) -> MemoryGameSettings:
        """Independent copy of the current defaults."""
        return self.default_settings.snapshot()

    def update_memory_game_settings(
        self,
        player: Player,
        new_settings: Union[MemoryGameSettings, Mapping[str, Any]],
    ) -> bool:
        """
        Replace the default settings.

        Returns:
            False if the new settings equal the current ones, else True

        Raises:
            NotAdministratorError: ``player`` is not an administrator
            InvalidSettingsError: ``new_settings`` fail validation
        """
        if not player.is_admin:
            raise NotAdministratorError()
        validated = validate_settings(new_settings)
        if validated.model_dump() == self.current_settings().model_dump():
            return False

        self.default_settings.replace_with(validated)
        logger.info("Default memory game settings updated by %s: %s",
                    player.username, validated.model_dump())
        return True

    def set_playable(self, player: Player, playable: bool) -> None:
        """Enable or disable joining memory games town-wide."""
        if not player.is_admin:
            raise NotAdministratorError()
        self.default_settings.set_playable(playable)
        logger.info("Memory game %s by %s",
                    "enabled" if playable else "disabled", player.username)
