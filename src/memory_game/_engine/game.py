# Area: Engine
"""
memory_game._engine.game — The MemoryGame state machine
========================================================

One player memorizes a randomly generated pattern, then reproduces it
from memory against the clock. Correct guesses score, three wrong
guesses cost a life and replay the level, and running out of lives ends
the game (submitting the score to the leaderboard when the game was
competitive and the player asked for it).

Status flow:
    WAITING_FOR_PLAYERS -> WAITING_TO_START       (start_game)
    WAITING_TO_START    -> IN_PROGRESS            (memorization deadline or first guess)
    IN_PROGRESS         -> WAITING_TO_START       (level solved, or level failed with lives left)
    IN_PROGRESS         -> OVER                   (guessing deadline or 3rd mistake on the last life)
    WAITING_TO_START / IN_PROGRESS -> OVER        (leave)
    OVER                -> WAITING_TO_START       (start_game once a player is present)

Every public operation and every deadline runs under one per-instance
lock, so a move and a deadline arriving together are serialized.
"""

from __future__ import annotations

import logging
import random
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Union

from .board import generate_level, make_rng
from .scheduler import Scheduler, ThreadingScheduler
from .snapshot import build_game_model
from .state import (
    BoardDimensions,
    GameMove,
    GameState,
    GameStatus,
    Player,
)
from .timer import TimerController
from ..errors import (
    BoardPositionNotValidError,
    CompetitiveModeNotCustomizableError,
    GameFullError,
    GameNotInProgressError,
    GameNotStartableError,
    PlayerAlreadyInGameError,
    PlayerNotInGameError,
    SettingsMissingError,
)
from ..settings import (
    DEFAULT_TILE_SHAPE,
    DEFAULT_UNKNOWN_TILE_COLOR,
    DefaultMemoryGameSettings,
    MemoryGameSettings,
    clamp_board_size,
    validate_settings,
)
from ..transmitter import ScoreTransmitter
from ..types import MEMORY_GAME_AREA_TYPE, GameInstanceModel, ScoreRecord

logger = logging.getLogger("memory_game.engine")

MISTAKES_PER_LEVEL = 3

Emitter = Callable[[], None]


class MemoryGame:
    """
    A single-player memory game instance.

    Args:
        default_settings: Competitive defaults, read (and copied) at start
        score_transmitter: Receives finished competitive scores
        scheduler: Deadline backend; wall-clock threads when omitted
        rng: Random source for board generation
        seed: Seed for a fresh ``random.Random`` when ``rng`` is omitted
        game_id: Instance id; generated when omitted
    """

    def __init__(
        self,
        default_settings: DefaultMemoryGameSettings,
        score_transmitter: ScoreTransmitter,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[Union[int, str]] = None,
        game_id: Optional[str] = None,
    ):
        self.id = game_id or f"game-{uuid.uuid4().hex[:12]}"
        self._default_settings = default_settings
        self._transmitter = score_transmitter
        self._rng = rng if rng is not None else make_rng(seed)
        self._lock = threading.RLock()
        self.timer = TimerController(
            scheduler or ThreadingScheduler(), self._lock, on_fired=self._notify_changed,
        )
        self._state = GameState()
        self._occupant: Optional[Player] = None
        self._emitter: Optional[Emitter] = None

        # Per-game
        self._game_started = False
        self._competitive_mode = False
        self._score_transmitted = False
        self._tile_percentage = 0.0
        self._increasing_difficulty = False

        # Per-level
        self._tiles_to_memorize = 0
        self._current_score_increment = 0
        self._remaining_mistakes = MISTAKES_PER_LEVEL

    # ── Read access ──────────────────────────────────────────

    @property
    def state(self) -> GameState:
        """Live state. Read only; use ``to_model()`` for a stable copy."""
        return self._state

    @property
    def competitive_mode(self) -> bool:
        return self._competitive_mode

    @property
    def remaining_mistakes(self) -> int:
        return self._remaining_mistakes

    @property
    def tiles_to_memorize(self) -> int:
        return self._tiles_to_memorize

    def to_model(self) -> GameInstanceModel:
        with self._lock:
            return build_game_model(self.id, self._state)

    # ── Occupancy ────────────────────────────────────────────

    def join(self, player: Player) -> None:
        """
        Add the sole player. Does not advance the status: a game only
        starts on ``start_game``.

        Raises:
            PlayerAlreadyInGameError: ``player`` is already the occupant
            GameFullError: another player occupies the game
        """
        with self._lock:
            if self._occupant is not None:
                if self._occupant.id == player.id:
                    raise PlayerAlreadyInGameError()
                raise GameFullError()
            self._occupant = player
            self._state.player = player.id
            logger.info("[%s] %s joined", self.id, player.username)

    def leave(self, player: Player) -> None:
        """
        Remove the player.

        Before a game starts the player is simply cleared. Leaving a
        running game ends it without submitting a score; the player id
        stays in the state so late readers can see who left.

        Raises:
            PlayerNotInGameError: ``player`` is not the current occupant
        """
        with self._lock:
            self.timer.disarm()
            if self._occupant is None or self._occupant.id != player.id:
                raise PlayerNotInGameError()
            self._occupant = None
            if self._state.status in (GameStatus.WAITING_FOR_PLAYERS, GameStatus.OVER):
                self._state.player = None
            else:
                self._game_started = False
                self._state.advance_status(GameStatus.OVER)
            logger.info("[%s] %s left", self.id, player.username)

    # ── Start ────────────────────────────────────────────────

    def start_game(
        self,
        competitive_mode: bool,
        emitter: Optional[Emitter] = None,
        customized_settings: Optional[Union[MemoryGameSettings, Mapping[str, Any]]] = None,
    ) -> None:
        """
        Start a game and show the first pattern.

        Competitive games use a copy of the default settings and may
        submit their score. Casual games require player settings, which
        are validated before anything changes.

        Args:
            competitive_mode: Ranked game on default settings
            emitter: Called after each deadline-driven transition
            customized_settings: Casual-mode settings (wire dict or model)

        Raises:
            CompetitiveModeNotCustomizableError: competitive with settings
            SettingsMissingError: casual without settings
            GameNotStartableError: no player, or a game is running
            InvalidSettingsError: casual settings fail validation
        """
        with self._lock:
            self.timer.disarm()
            if competitive_mode and customized_settings is not None:
                raise CompetitiveModeNotCustomizableError()
            if not competitive_mode and customized_settings is None:
                raise SettingsMissingError()
            if (self._state.status not in (GameStatus.WAITING_FOR_PLAYERS, GameStatus.OVER)
                    or self._occupant is None
                    or self._game_started):
                raise GameNotStartableError()

            # One read of the shared defaults; every field comes from this copy
            defaults = self._default_settings.snapshot()
            settings = validate_settings(defaults if competitive_mode else customized_settings)

            self._apply_settings(settings, defaults, competitive_mode)
            self._emitter = emitter
            self._game_started = True
            logger.info(
                "[%s] %s game started for %s on %dx%d",
                self.id, "Competitive" if competitive_mode else "Casual",
                self._occupant.username,
                self._state.board_size.rows, self._state.board_size.columns,
            )
            self._initialize_new_level(self._state.board_size)

    def _apply_settings(
        self,
        settings: MemoryGameSettings,
        defaults: MemoryGameSettings,
        competitive_mode: bool,
    ) -> None:
        size = clamp_board_size(
            settings.starting_board_size.rows, settings.starting_board_size.columns,
        )
        state = self._state
        state.board_size = BoardDimensions(size.rows, size.columns)
        state.lives = settings.starting_lives
        state.score = 0
        state.transmit_score = False
        state.player = self._occupant.id if self._occupant else None
        state.memorization_time_seconds = settings.memorization_time_seconds
        state.guessing_time_seconds = settings.guessing_time_seconds
        state.unknown_tile_color = (
            settings.unknown_tile_color
            or defaults.unknown_tile_color
            or DEFAULT_UNKNOWN_TILE_COLOR
        )
        state.tile_shape = (
            settings.tile_shape
            or defaults.tile_shape
            or DEFAULT_TILE_SHAPE
        )
        self._tile_percentage = settings.target_tiles_percentage
        self._increasing_difficulty = settings.increasing_difficulty
        self._competitive_mode = competitive_mode
        self._score_transmitted = False

    # ── Moves ────────────────────────────────────────────────

    def apply_move(self, move: GameMove) -> None:
        """
        Apply one guess.

        A guess during memorization ends memorization early. A correct
        guess scores the level's target count; finding every target
        starts the next level. The third wrong guess in a level costs a
        life and replays the same pattern, or ends the game on the last
        life.

        Raises:
            GameNotInProgressError: no level is being played
            PlayerNotInGameError: the mover is not the occupant
            BoardPositionNotValidError: off the board or already guessed
        """
        with self._lock:
            state = self._state
            if state.status not in (GameStatus.WAITING_TO_START, GameStatus.IN_PROGRESS):
                self.timer.disarm()
                raise GameNotInProgressError()
            if self._occupant is None or self._occupant.id != move.player_id:
                self.timer.disarm()
                raise PlayerNotInGameError()
            if state.status is GameStatus.WAITING_TO_START:
                self.timer.disarm()
                self._start_guessing_period()

            state.transmit_score = bool(move.move.transmit_score)
            row, column = move.move.row, move.move.column
            if (not _is_index(row) or not _is_index(column)
                    or not state.is_on_board(row, column)
                    or state.guesses_board[row][column] is not None):
                self.timer.disarm()
                raise BoardPositionNotValidError()

            if state.solution_board[row][column]:
                state.guesses_board[row][column] = True
                state.score += self._current_score_increment
                self._tiles_to_memorize -= 1
                if self._tiles_to_memorize == 0:
                    self._level_solved()
            else:
                state.guesses_board[row][column] = False
                self._remaining_mistakes -= 1
                if self._remaining_mistakes == 0:
                    self._level_failed()

    # ── Transitions ──────────────────────────────────────────

    def _initialize_new_level(self, size: BoardDimensions) -> None:
        level = generate_level(size, self._tile_percentage, self._rng)
        state = self._state
        state.board_size = size
        state.solution_board = level.solution_board
        state.guesses_board = level.guesses_board
        self._tiles_to_memorize = level.target_count
        self._current_score_increment = level.target_count
        self._remaining_mistakes = MISTAKES_PER_LEVEL
        state.advance_status(GameStatus.WAITING_TO_START)
        self.timer.arm(
            state.memorization_time_seconds, self._on_memorization_deadline, "memorization",
        )

    def _start_guessing_period(self) -> None:
        self._state.advance_status(GameStatus.IN_PROGRESS)
        self.timer.arm(
            self._state.guessing_time_seconds, self._on_guessing_deadline, "guessing",
        )

    def _on_memorization_deadline(self) -> None:
        if self._state.status is GameStatus.WAITING_TO_START:
            self._start_guessing_period()

    def _on_guessing_deadline(self) -> None:
        if self._state.status is GameStatus.IN_PROGRESS:
            logger.info("[%s] Guessing time expired", self.id)
            self._level_failed()

    def _level_solved(self) -> None:
        size = self._state.board_size
        if self._increasing_difficulty:
            grown = clamp_board_size(size.rows + 1, size.columns + 1)
            size = BoardDimensions(grown.rows, grown.columns)
        logger.info("[%s] Level solved, score=%d", self.id, self._state.score)
        self._initialize_new_level(size)

    def _level_failed(self) -> None:
        self.timer.disarm()
        self._state.lives -= 1
        logger.info("[%s] Level failed, lives=%d", self.id, self._state.lives)
        if self._state.lives <= 0:
            self._state.lives = 0
            self._end_game()
        else:
            self._restart_level()

    def _restart_level(self) -> None:
        # Same pattern again: keep the solution, clear the guesses
        self._state.clear_guesses()
        self._tiles_to_memorize = self._current_score_increment
        self._remaining_mistakes = MISTAKES_PER_LEVEL
        self._state.advance_status(GameStatus.WAITING_TO_START)
        self.timer.arm(
            self._state.memorization_time_seconds, self._on_memorization_deadline, "memorization",
        )

    def _end_game(self) -> None:
        self.timer.disarm()
        username = self._occupant.username if self._occupant else ""
        self._state.advance_status(GameStatus.OVER)
        self._state.player = None
        self._occupant = None
        self._game_started = False
        logger.info("[%s] Game over, final score=%d", self.id, self._state.score)
        if (self._state.transmit_score and self._competitive_mode
                and not self._score_transmitted):
            self._score_transmitted = True
            self._transmitter.add_score(self._build_score_record(username))

    def _build_score_record(self, username: str) -> ScoreRecord:
        return {
            "id": f"score-{uuid.uuid4().hex[:12]}",
            "score": self._state.score,
            "date": datetime.now(timezone.utc),
            "player_username": username,
            "game_type": MEMORY_GAME_AREA_TYPE,
        }

    def _notify_changed(self) -> None:
        if self._emitter is not None:
            self._emitter()


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
