# Area: Area
"""
memory_game.area — Memory game area and command routing
=======================================================

The town-facing wrapper around a ``MemoryGame``. Player commands arrive
as dicts with a ``type`` key and are dispatched through a handler
registry. The area owns the current game instance, replacing it when a
finished game is joined or restarted, and emits a change notification
after every successful command.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, List, Optional

from ._engine import GameMove, GameStatus, MemoryGame, MemoryGameMove, Player, Scheduler
from ._engine.board import make_rng
from .errors import (
    GameDisabledByAdminError,
    GameIDMismatchError,
    GameNotInProgressError,
    InvalidCommandError,
)
from .settings import DefaultMemoryGameSettings
from .transmitter import ScoreTransmitter
from .types import MEMORY_GAME_AREA_TYPE

logger = logging.getLogger("memory_game.area")

CommandHandler = Callable[[Dict[str, Any], Player], Optional[Dict[str, Any]]]


class MemoryGameArea:
    """
    Routes player commands to the area's current memory game.

    Usage:
        area = MemoryGameArea("area-1", defaults, leaderboard_db, emitter=broadcast)
        area.add_occupant(alice)
        result = area.handle_command({"type": "JoinGame"}, alice)
        area.handle_command({
            "type": "MemoryGameStartGame",
            "game_id": result["game_id"],
            "competitive_mode": True,
        }, alice)
    """

    def __init__(
        self,
        area_id: str,
        default_settings: DefaultMemoryGameSettings,
        score_transmitter: ScoreTransmitter,
        emitter: Optional[Callable[[], None]] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.id = area_id
        self._default_settings = default_settings
        self._transmitter = score_transmitter
        self._emitter = emitter
        self._scheduler = scheduler
        self._rng = rng if rng is not None else make_rng(seed)
        self._game: Optional[MemoryGame] = None
        self._occupants: List[Player] = []
        self._handlers: Dict[str, CommandHandler] = {}

        self.register_handler("JoinGame", self._handle_join)
        self.register_handler("MemoryGameStartGame", self._handle_start)
        self.register_handler("GameMove", self._handle_move)
        self.register_handler("LeaveGame", self._handle_leave)

    @property
    def game(self) -> Optional[MemoryGame]:
        return self._game

    @property
    def occupants(self) -> List[Player]:
        return list(self._occupants)

    def register_handler(self, command_type: str, handler: CommandHandler) -> None:
        self._handlers[command_type] = handler
        logger.debug("Registered handler for %s", command_type)

    # ── Occupancy ────────────────────────────────────────────

    def add_occupant(self, player: Player) -> None:
        if all(p.id != player.id for p in self._occupants):
            self._occupants.append(player)
            self._emit_area_changed()

    def remove_occupant(self, player: Player) -> None:
        """Remove a player from the area, leaving their game if they are in it."""
        if self._game is not None and self._game.state.player == player.id:
            if self._game.state.status is not GameStatus.OVER:
                self._game.leave(player)
        self._occupants = [p for p in self._occupants if p.id != player.id]
        self._emit_area_changed()

    def to_model(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": MEMORY_GAME_AREA_TYPE,
            "occupants": [p.id for p in self._occupants],
            "game": self._game.to_model() if self._game is not None else None,
        }

    # ── Commands ─────────────────────────────────────────────

    def handle_command(
        self, command: Dict[str, Any], player: Player,
    ) -> Optional[Dict[str, Any]]:
        """
        Dispatch one command.

        Args:
            command: Command dict; ``command["type"]`` selects the handler
            player: The player issuing the command

        Returns:
            ``{"game_id": ...}`` for JoinGame, otherwise None

        Raises:
            InvalidCommandError: unknown or malformed command
            InvalidParametersError: any engine or routing failure
        """
        command_type = command.get("type") if isinstance(command, dict) else None
        handler = self._handlers.get(command_type) if command_type else None
        if handler is None:
            raise InvalidCommandError()
        result = handler(command, player)
        self._emit_area_changed()
        return result

    def _handle_join(self, command: Dict[str, Any], player: Player) -> Dict[str, Any]:
        if not self._default_settings.is_playable:
            raise GameDisabledByAdminError()
        if self._game is None or self._game.state.status is GameStatus.OVER:
            self._game = self._new_game()
        self._game.join(player)
        return {"game_id": self._game.id}

    def _handle_start(self, command: Dict[str, Any], player: Player) -> None:
        game = self._require_game(command)
        if game.state.status is GameStatus.OVER:
            game = self._new_game()
            game.join(player)
            self._game = game
        game.start_game(
            bool(command.get("competitive_mode", False)),
            emitter=self._emit_area_changed,
            customized_settings=command.get("customized_settings"),
        )
        return None

    def _handle_move(self, command: Dict[str, Any], player: Player) -> None:
        game = self._require_game(command)
        payload = command.get("move")
        if not isinstance(payload, dict) or "row" not in payload or "column" not in payload:
            raise InvalidCommandError()
        game.apply_move(GameMove(
            player_id=player.id,
            game_id=game.id,
            move=MemoryGameMove(
                row=payload["row"],
                column=payload["column"],
                transmit_score=bool(payload.get("transmit_score", False)),
            ),
        ))
        return None

    def _handle_leave(self, command: Dict[str, Any], player: Player) -> None:
        self._require_game(command).leave(player)
        return None

    def _require_game(self, command: Dict[str, Any]) -> MemoryGame:
        if self._game is None:
            raise GameNotInProgressError()
        if command.get("game_id") != self._game.id:
            raise GameIDMismatchError()
        return self._game

    def _new_game(self) -> MemoryGame:
        game = MemoryGame(
            self._default_settings,
            self._transmitter,
            scheduler=self._scheduler,
            rng=self._rng,
        )
        logger.info("[%s] New game %s", self.id, game.id)
        return game

    def _emit_area_changed(self) -> None:
        if self._emitter is not None:
            self._emitter()
