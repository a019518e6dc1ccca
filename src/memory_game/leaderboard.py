# Area: Leaderboard
"""
memory_game.leaderboard — In-memory leaderboard
================================================

``LeaderboardDatabase`` stores finished scores for a town and is the
``ScoreTransmitter`` handed to every MemoryGame. ``Leaderboard`` is the
area players interact with: filtered score views, per-player
visibility, and administrator-only settings.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from .errors import (
    InvalidCommandError,
    NegativeNumberError,
    NotAdministratorError,
)
from ._engine.state import Player
from .transmitter import ScoreTransmitter
from .types import (
    LEADERBOARD_AREA_TYPE,
    LeaderboardField,
    LeaderboardSettingsModel,
    ScoreRecord,
)

logger = logging.getLogger("memory_game.leaderboard")

ALL_FIELDS: List[LeaderboardField] = ["score", "date", "player_username", "game_type"]


class LeaderboardDatabase(ScoreTransmitter):
    """Score store shared by the game areas and the leaderboard area."""

    def __init__(
        self,
        scores: Optional[List[ScoreRecord]] = None,
        hidden_townees: Optional[List[str]] = None,
        visible_fields: Optional[List[LeaderboardField]] = None,
    ):
        self.scores: List[ScoreRecord] = list(scores) if scores else []
        self.hidden_townees: List[str] = list(hidden_townees) if hidden_townees else []
        self.visible_fields: List[LeaderboardField] = (
            list(visible_fields) if visible_fields else list(ALL_FIELDS)
        )
        self._score_added_callback: Optional[Callable[[], None]] = None
        self._lock = threading.Lock()

    def add_score(self, record: ScoreRecord) -> None:
        with self._lock:
            self.scores.append(record)
        logger.info("Score recorded: %s scored %s in %s",
                    record.get("player_username"), record.get("score"),
                    record.get("game_type"))
        if self._score_added_callback is not None:
            self._score_added_callback()

    def register_score_added_callback(self, callback: Callable[[], None]) -> None:
        self._score_added_callback = callback

    def clear(self) -> None:
        with self._lock:
            self.scores = []


class Leaderboard:
    """
    Leaderboard area for a town.

    Usage:
        database = LeaderboardDatabase()
        board = Leaderboard("leaderboard-1", database, emitter=broadcast)
        board.get_scores("MemoryGameArea", "alice")
    """

    def __init__(
        self,
        area_id: str,
        database: LeaderboardDatabase,
        emitter: Optional[Callable[[], None]] = None,
        default_display_count: int = 10,
        default_sort_type: LeaderboardField = "score",
    ):
        self.id = area_id
        self._database = database
        self._emitter = emitter
        self._default_display_count = default_display_count
        self._default_sort_type: LeaderboardField = default_sort_type
        self._database.register_score_added_callback(self._emit_area_changed)

    @property
    def default_display_count(self) -> int:
        return self._default_display_count

    @property
    def default_sort_type(self) -> LeaderboardField:
        return self._default_sort_type

    def to_model(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": LEADERBOARD_AREA_TYPE,
            "settings": {
                "default_display_count": self._default_display_count,
                "default_sort_type": self._default_sort_type,
                "visible_fields": list(self._database.visible_fields),
                "reset": False,
            },
            "scores": [dict(record) for record in self._database.scores],
            "hidden_townees": list(self._database.hidden_townees),
        }

    def handle_command(self, command: Dict[str, Any], player: Player) -> None:
        """Route a LeaderboardSettings or LeaderboardVisibility command."""
        command_type = command.get("type")
        if command_type == "LeaderboardSettings":
            self.apply_leaderboard_settings(command.get("settings", {}), player)
            return None
        if command_type == "LeaderboardVisibility":
            self.set_visibility(player, bool(command.get("set_leaderboard_visible")))
            return None
        raise InvalidCommandError()

    def get_scores(self, game_type: str, player_username: str) -> List[ScoreRecord]:
        """
        Scores for one game type with hidden fields blanked out.

        The requesting player always sees their own username even when
        usernames are hidden. Returns copies; stored records are never
        modified.
        """
        visible = self._database.visible_fields
        scores: List[ScoreRecord] = []
        for stored in self._database.scores:
            if stored.get("game_type") != game_type:
                continue
            record: ScoreRecord = dict(stored)  # type: ignore[assignment]
            if ("player_username" not in visible
                    and record.get("player_username") != player_username):
                record["player_username"] = None
            if "score" not in visible:
                record["score"] = None
            if "date" not in visible:
                record["date"] = None
            if "game_type" not in visible:
                record["game_type"] = None
            scores.append(record)
        return scores

    def reset_leaderboard(self, player: Player) -> None:
        """Erase all scores. Administrators only."""
        _require_admin(player)
        self._database.clear()
        logger.info("Leaderboard %s reset by %s", self.id, player.username)
        self._emit_area_changed()

    def apply_leaderboard_settings(
        self, settings: LeaderboardSettingsModel, player: Player,
    ) -> None:
        """Apply display settings. Administrators only."""
        _require_admin(player)
        if settings.get("reset"):
            self.reset_leaderboard(player)
        if settings.get("default_display_count") is not None:
            self.set_default_display_count(settings["default_display_count"])
        if settings.get("default_sort_type"):
            self.set_default_sort_type(settings["default_sort_type"])
        if settings.get("visible_fields") is not None:
            unknown = [f for f in settings["visible_fields"] if f not in ALL_FIELDS]
            if unknown:
                raise InvalidCommandError(f"Unknown leaderboard fields: {unknown}")
            self._database.visible_fields = list(settings["visible_fields"])
        self._emit_area_changed()

    def set_default_display_count(self, count: int) -> None:
        if count < 0:
            raise NegativeNumberError()
        self._default_display_count = count
        self._emit_area_changed()

    def set_default_sort_type(self, sort_type: LeaderboardField) -> None:
        if sort_type not in ALL_FIELDS:
            raise InvalidCommandError(f"Unknown sort field: {sort_type}")
        self._default_sort_type = sort_type
        self._emit_area_changed()

    def set_visibility(self, player: Player, visible: bool) -> None:
        """Show or hide the leaderboard for one player."""
        hidden = self._database.hidden_townees
        if visible:
            self._database.hidden_townees = [pid for pid in hidden if pid != player.id]
        elif player.id not in hidden:
            hidden.append(player.id)
        self._emit_area_changed()

    def get_hidden_townees(self) -> List[str]:
        return list(self._database.hidden_townees)

    def _emit_area_changed(self) -> None:
        if self._emitter is not None:
            self._emitter()


def _require_admin(player: Player) -> None:
    if not player.is_admin:
        raise NotAdministratorError()
