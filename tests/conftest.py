# Area: Shared Tests
"""Shared fixtures: virtual clock, settings, players, and game factories."""

from typing import List, Tuple
from unittest.mock import MagicMock

import pytest

from memory_game import (
    DefaultMemoryGameSettings,
    GameMove,
    MemoryGame,
    MemoryGameMove,
    Player,
    ScoreTransmitter,
    VirtualScheduler,
)


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def defaults():
    return DefaultMemoryGameSettings()


@pytest.fixture
def transmitter():
    return MagicMock(spec=ScoreTransmitter)


@pytest.fixture
def alice():
    return Player(id="p-alice", username="alice")


@pytest.fixture
def bob():
    return Player(id="p-bob", username="bob")


@pytest.fixture
def admin():
    return Player(id="p-admin", username="admin", is_admin=True)


@pytest.fixture
def casual_settings():
    """Valid casual settings in wire (camelCase) form."""
    return {
        "startingLives": 2,
        "startingBoardSize": {"rows": 4, "columns": 4},
        "memorizationTimeSeconds": 3,
        "guessingTimeSeconds": 10,
        "increasingDifficulty": False,
        "targetTilesPercentage": 0.5,
    }


@pytest.fixture
def make_game(defaults, transmitter, scheduler):
    """Factory for games on the virtual clock with a fixed seed."""
    def _make(seed=7, settings=None, score_transmitter=None):
        return MemoryGame(
            settings if settings is not None else defaults,
            score_transmitter if score_transmitter is not None else transmitter,
            scheduler=scheduler,
            seed=seed,
        )
    return _make


@pytest.fixture
def started_game(make_game, alice):
    """Competitive game with alice joined and the first level shown."""
    game = make_game()
    game.join(alice)
    game.start_game(True)
    return game


def _cells(game: MemoryGame, target: bool) -> List[Tuple[int, int]]:
    board = game.state.solution_board
    return [
        (r, c)
        for r, row in enumerate(board)
        for c, cell in enumerate(row)
        if bool(cell) is target
    ]


@pytest.fixture
def targets():
    """Return the target cells of a game's current level."""
    return lambda game: _cells(game, True)


@pytest.fixture
def blanks():
    """Return the non-target cells of a game's current level."""
    return lambda game: _cells(game, False)


@pytest.fixture
def move():
    """Build a GameMove for a player."""
    def _move(game, player, row, column, transmit=False):
        return GameMove(
            player_id=player.id,
            game_id=game.id,
            move=MemoryGameMove(row=row, column=column, transmit_score=transmit),
        )
    return _move
