# Area: Leaderboard
"""
memory_game.transmitter — Score submission contract
===================================================

The engine hands a finished competitive score to a ``ScoreTransmitter``.
It calls ``add_score`` at most once per game, only when the player runs
out of lives, and never for casual games.

``LeaderboardDatabase`` in ``memory_game.leaderboard`` is the in-process
implementation; a persistent store only needs to subclass this.
"""

from abc import ABC, abstractmethod

from .types import ScoreRecord


class ScoreTransmitter(ABC):
    """Abstract receiver of finished competitive scores."""

    @abstractmethod
    def add_score(self, record: ScoreRecord) -> None:
        """
        Accept a finished score.

        Parameters
        ----------
        record : ScoreRecord
            {
                "id": str,                  # e.g. "score-1a2b3c4d5e6f"
                "score": int,               # e.g. 48
                "date": datetime,           # UTC end time
                "player_username": str,     # e.g. "alice"
                "game_type": str            # "MemoryGameArea"
            }
        """
        pass
