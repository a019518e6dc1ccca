# Area: Engine
"""
memory_game._engine.snapshot — Game state snapshot builder
==========================================================

Builds serializable, independent copies of a game's state for the
transport layer. Mutating a snapshot never touches the live game.
"""

from typing import List

from .state import GameState, MemoryGameBoard
from ..types import GameInstanceModel, MemoryGameStateModel


def build_state_snapshot(state: GameState) -> MemoryGameStateModel:
    """Build a serializable copy of the game state."""
    return {
        "status": state.status.value,
        "player": state.player,
        "score": state.score,
        "lives": state.lives,
        "board_size": {
            "rows": state.board_size.rows,
            "columns": state.board_size.columns,
        },
        "solution_board": _copy_board(state.solution_board),
        "guesses_board": _copy_board(state.guesses_board),
        "transmit_score": state.transmit_score,
        "memorization_time_seconds": state.memorization_time_seconds,
        "guessing_time_seconds": state.guessing_time_seconds,
        "unknown_tile_color": state.unknown_tile_color,
        "tile_shape": state.tile_shape,
    }


def build_game_model(game_id: str, state: GameState) -> GameInstanceModel:
    players: List[str] = [state.player] if state.player else []
    return {
        "id": game_id,
        "state": build_state_snapshot(state),
        "players": players,
    }


def _copy_board(board: MemoryGameBoard) -> MemoryGameBoard:
    return [list(row) for row in board]
