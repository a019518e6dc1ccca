"""
memory_game — Timer-governed single-player memory game
======================================================

A player memorizes a pattern of highlighted tiles, then reproduces it
from memory before the guessing clock runs out. Boards grow as levels
are solved; mistakes cost lives; competitive scores go to the
leaderboard.

Quick Start:
    from memory_game import (
        DefaultMemoryGameSettings, LeaderboardDatabase, MemoryGame, Player,
    )
    game = MemoryGame(DefaultMemoryGameSettings(), LeaderboardDatabase())
    game.join(Player(id="p1", username="alice"))
    game.start_game(competitive_mode=True)

Command routing:
    from memory_game import MemoryGameArea
    area = MemoryGameArea("area-1", defaults, leaderboard_db, emitter=broadcast)
    area.handle_command({"type": "JoinGame"}, alice)

Deterministic timing (tests, simulations):
    from memory_game import VirtualScheduler
    scheduler = VirtualScheduler()
    game = MemoryGame(defaults, transmitter, scheduler=scheduler, seed=7)
    scheduler.advance(5)   # memorization deadline fires
"""

from ._engine import (
    MISTAKES_PER_LEVEL,
    BoardDimensions,
    GameMove,
    GameState,
    GameStatus,
    MemoryGame,
    MemoryGameMove,
    Player,
    Scheduler,
    ThreadingScheduler,
    TimerController,
    VirtualScheduler,
)
from .admin import AdminSettingsController
from .area import MemoryGameArea
from .config import load_default_settings
from .errors import (
    BoardPositionNotValidError,
    CompetitiveModeNotCustomizableError,
    GameDisabledByAdminError,
    GameFullError,
    GameIDMismatchError,
    GameNotInProgressError,
    GameNotStartableError,
    InvalidCommandError,
    InvalidParametersError,
    InvalidSettingsError,
    MemoryGameError,
    NegativeNumberError,
    NotAdministratorError,
    PlayerAlreadyInGameError,
    PlayerNotInGameError,
    SettingsMissingError,
)
from .leaderboard import Leaderboard, LeaderboardDatabase
from .logging_config import setup_logging
from .settings import (
    BoardSize,
    DefaultMemoryGameSettings,
    MemoryGameSettings,
    validate_settings,
)
from .transmitter import ScoreTransmitter
from .types import (
    GameInstanceModel,
    MemoryGameStateModel,
    ScoreRecord,
)

__version__ = "1.0.0"

__all__ = [
    # Engine
    "MemoryGame",
    "MISTAKES_PER_LEVEL",
    "BoardDimensions",
    "GameMove",
    "GameState",
    "GameStatus",
    "MemoryGameMove",
    "Player",
    "Scheduler",
    "ThreadingScheduler",
    "VirtualScheduler",
    "TimerController",
    # Areas
    "MemoryGameArea",
    "Leaderboard",
    "LeaderboardDatabase",
    "AdminSettingsController",
    "ScoreTransmitter",
    # Settings
    "BoardSize",
    "MemoryGameSettings",
    "DefaultMemoryGameSettings",
    "validate_settings",
    "load_default_settings",
    "setup_logging",
    # Errors
    "InvalidParametersError",
    "MemoryGameError",
    "PlayerAlreadyInGameError",
    "GameFullError",
    "PlayerNotInGameError",
    "GameNotStartableError",
    "CompetitiveModeNotCustomizableError",
    "SettingsMissingError",
    "GameNotInProgressError",
    "BoardPositionNotValidError",
    "InvalidSettingsError",
    "InvalidCommandError",
    "GameIDMismatchError",
    "GameDisabledByAdminError",
    "NotAdministratorError",
    "NegativeNumberError",
    # Types
    "GameInstanceModel",
    "MemoryGameStateModel",
    "ScoreRecord",
]
