"""
memory_game._engine — Game engine internals
============================================

State machine, board generation, deadline timers and state snapshots
for a single MemoryGame instance.
"""

from .game import MemoryGame, MISTAKES_PER_LEVEL
from .state import (
    BoardDimensions,
    GameMove,
    GameState,
    GameStatus,
    MemoryGameMove,
    Player,
)
from .scheduler import Scheduler, ThreadingScheduler, VirtualScheduler
from .timer import TimerController

__all__ = [
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
]
