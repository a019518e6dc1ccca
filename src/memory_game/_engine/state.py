# Area: Engine
"""
memory_game._engine.state — Game state and move types
======================================================

Holds the authoritative state of one MemoryGame instance plus the
small value types (players, moves, board size) the engine consumes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging

logger = logging.getLogger("memory_game.state")

# True = correctly revealed, False = incorrectly revealed, None = not guessed
MemoryGameCell = Optional[bool]
MemoryGameBoard = List[List[MemoryGameCell]]


class GameStatus(Enum):
    """Lifecycle status of a MemoryGame."""
    WAITING_FOR_PLAYERS = "WAITING_FOR_PLAYERS"   # No game started yet
    WAITING_TO_START    = "WAITING_TO_START"      # Pattern shown for memorization
    IN_PROGRESS         = "IN_PROGRESS"           # Player is guessing
    OVER                = "OVER"                  # Lives exhausted or player left


@dataclass(frozen=True)
class Player:
    """A town occupant as seen by the game layer."""
    id: str
    username: str
    is_admin: bool = False


@dataclass(frozen=True)
class BoardDimensions:
    rows: int
    columns: int


@dataclass(frozen=True)
class MemoryGameMove:
    """A single guess at one board cell."""
    row: int
    column: int
    transmit_score: bool = False


@dataclass(frozen=True)
class GameMove:
    """A move tagged with the acting player and target game."""
    player_id: str
    game_id: str
    move: MemoryGameMove


@dataclass
class GameState:
    """
    Full state of one MemoryGame.

    The engine is the only writer. Readers should treat it as a
    read-only view or take a snapshot with ``to_model()``.
    """
    status: GameStatus = GameStatus.WAITING_FOR_PLAYERS
    player: Optional[str] = None
    score: int = 0
    lives: int = 0
    board_size: BoardDimensions = field(default_factory=lambda: BoardDimensions(0, 0))
    solution_board: MemoryGameBoard = field(default_factory=list)
    guesses_board: MemoryGameBoard = field(default_factory=list)
    transmit_score: bool = False
    memorization_time_seconds: float = 0
    guessing_time_seconds: float = 0
    unknown_tile_color: Optional[str] = None
    tile_shape: Optional[str] = None

    def advance_status(self, new_status: GameStatus) -> None:
        if new_status is not self.status:
            logger.info("Status: %s → %s", self.status.value, new_status.value)
        self.status = new_status

    def clear_guesses(self) -> None:
        """Reset every guess cell to not-yet-guessed."""
        self.guesses_board = [
            [None] * self.board_size.columns for _ in range(self.board_size.rows)
        ]

    def is_on_board(self, row: int, column: int) -> bool:
        return (0 <= row < self.board_size.rows
                and 0 <= column < self.board_size.columns)
