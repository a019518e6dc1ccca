"""
memory_game.types — TypedDict schemas for snapshots, records and commands
=========================================================================

This module documents the exact structure of the dictionaries that
cross the package boundary: state snapshots handed to the transport
layer, score records handed to the leaderboard, and the commands the
game area accepts.

Use __annotations__ to inspect fields:

    >>> ScoreRecord.__annotations__
    {'id': str, 'score': Optional[int], 'date': Optional[datetime], ...}
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, TypedDict


GameStatusName = Literal["WAITING_FOR_PLAYERS", "WAITING_TO_START", "IN_PROGRESS", "OVER"]
LeaderboardField = Literal["score", "date", "player_username", "game_type"]

MEMORY_GAME_AREA_TYPE = "MemoryGameArea"
LEADERBOARD_AREA_TYPE = "LeaderboardArea"


# ============================================
# Game state snapshot
# ============================================

class BoardSizeModel(TypedDict):
    rows: int
    columns: int


class MemoryGameStateModel(TypedDict):
    """Snapshot returned by MemoryGame.to_model()["state"].

    Fields
    ------
    status : GameStatusName
        Current lifecycle status.
    player : Optional[str]
        Player id, retained after the player leaves a running game.
    solution_board : List[List[bool]]
        Target tiles of the current level.
    guesses_board : List[List[Optional[bool]]]
        True/False for revealed cells, None for unguessed ones.
    """
    status: GameStatusName
    player: Optional[str]
    score: int
    lives: int
    board_size: BoardSizeModel
    solution_board: List[List[Optional[bool]]]
    guesses_board: List[List[Optional[bool]]]
    transmit_score: bool
    memorization_time_seconds: float
    guessing_time_seconds: float
    unknown_tile_color: Optional[str]
    tile_shape: Optional[str]


class GameInstanceModel(TypedDict):
    id: str
    state: MemoryGameStateModel
    players: List[str]


# ============================================
# Leaderboard
# ============================================

class ScoreRecord(TypedDict):
    """A finished competitive score handed to the leaderboard.

    Fields
    ------
    id : str
        Unique record id, e.g. "score-1a2b3c4d5e6f".
    score : Optional[int]
        Final score; None when hidden by leaderboard visibility.
    date : Optional[datetime]
        UTC time the game ended.
    player_username : Optional[str]
    game_type : Optional[str]
        Always "MemoryGameArea" for records from this engine.
    """
    id: str
    score: Optional[int]
    date: Optional[datetime]
    player_username: Optional[str]
    game_type: Optional[str]


class LeaderboardSettingsModel(TypedDict, total=False):
    default_display_count: int
    default_sort_type: LeaderboardField
    visible_fields: List[LeaderboardField]
    reset: bool


# ============================================
# Game area commands
# ============================================

class MovePayload(TypedDict, total=False):
    row: int
    column: int
    transmit_score: bool


class JoinGameCommand(TypedDict):
    type: Literal["JoinGame"]


class LeaveGameCommand(TypedDict):
    type: Literal["LeaveGame"]
    game_id: str


class GameMoveCommand(TypedDict):
    type: Literal["GameMove"]
    game_id: str
    move: MovePayload


class MemoryGameStartGameCommand(TypedDict, total=False):
    type: Literal["MemoryGameStartGame"]
    game_id: str
    competitive_mode: bool
    customized_settings: Dict[str, Any]
