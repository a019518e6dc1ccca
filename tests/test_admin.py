# Area: Admin Tests
"""Tests for AdminSettingsController."""

import sys
import threading

import pytest

from memory_game import (
    AdminSettingsController,
    DefaultMemoryGameSettings,
    GameStatus,
    InvalidSettingsError,
    MemoryGame,
    NotAdministratorError,
)


@pytest.fixture
def controller(defaults):
    return AdminSettingsController(defaults)


class TestUpdateSettings:

    def test_requires_admin(self, controller, alice, casual_settings):
        with pytest.raises(NotAdministratorError) as exc_info:
            controller.update_memory_game_settings(alice, casual_settings)
        assert exc_info.value.message == "Player is not an administrator"

    def test_updates_shared_defaults_in_place(self, controller, defaults, admin, casual_settings):
        assert controller.update_memory_game_settings(admin, casual_settings) is True
        assert defaults.starting_lives == 2
        assert defaults.target_tiles_percentage == 0.5
        assert defaults.increasing_difficulty is False

    def test_unchanged_settings_return_false(self, controller, defaults, admin):
        assert controller.update_memory_game_settings(admin, defaults.to_wire()) is False

    def test_invalid_settings_rejected(self, controller, defaults, admin, casual_settings):
        casual_settings["guessingTimeSeconds"] = 0
        with pytest.raises(InvalidSettingsError):
            controller.update_memory_game_settings(admin, casual_settings)
        assert defaults.guessing_time_seconds == 15

    def test_running_game_unaffected(self, controller, defaults, admin, casual_settings,
                                     transmitter, scheduler, alice):
        game = MemoryGame(defaults, transmitter, scheduler=scheduler, seed=1)
        game.join(alice)
        game.start_game(True)
        controller.update_memory_game_settings(admin, casual_settings)
        assert game.state.lives == 3
        scheduler.advance(5)
        assert game.state.status is GameStatus.IN_PROGRESS

    def test_next_game_uses_new_defaults(self, controller, defaults, admin, casual_settings,
                                         transmitter, scheduler, alice):
        controller.update_memory_game_settings(admin, casual_settings)
        game = MemoryGame(defaults, transmitter, scheduler=scheduler, seed=1)
        game.join(alice)
        game.start_game(True)
        assert game.state.lives == 2
        assert game.tiles_to_memorize == 8


class TestCurrentSettings:

    def test_returns_copy(self, controller, defaults):
        current = controller.current_settings()
        current.starting_lives = 8
        assert defaults.starting_lives == 3

    def test_creates_defaults_when_omitted(self):
        controller = AdminSettingsController()
        assert isinstance(controller.default_settings, DefaultMemoryGameSettings)


class TestPlayable:

    def test_set_playable(self, controller, defaults, admin):
        controller.set_playable(admin, False)
        assert defaults.is_playable is False

    def test_set_playable_requires_admin(self, controller, alice):
        with pytest.raises(NotAdministratorError):
            controller.set_playable(alice, False)


class TestConcurrentUpdates:
    """Games started during admin edits see one complete settings record."""

    def test_start_never_mixes_old_and_new_defaults(self, controller, defaults, admin,
                                                     transmitter, scheduler, alice):
        small = {
            "startingLives": 3,
            "startingBoardSize": {"rows": 4, "columns": 4},
            "memorizationTimeSeconds": 5,
            "guessingTimeSeconds": 15,
            "increasingDifficulty": True,
            "targetTilesPercentage": 0.25,
            "tileShape": "square",
        }
        large = {
            "startingLives": 9,
            "startingBoardSize": {"rows": 10, "columns": 10},
            "memorizationTimeSeconds": 50,
            "guessingTimeSeconds": 60,
            "increasingDifficulty": True,
            "targetTilesPercentage": 0.25,
            "tileShape": "circle",
        }
        allowed = {(3, 4, 5, 15, "square"), (9, 10, 50, 60, "circle")}
        stop = threading.Event()

        def flip():
            while not stop.is_set():
                controller.update_memory_game_settings(admin, large)
                controller.update_memory_game_settings(admin, small)

        interval = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        worker = threading.Thread(target=flip, daemon=True)
        worker.start()
        mixed = []
        try:
            for _ in range(1000):
                game = MemoryGame(defaults, transmitter, scheduler=scheduler, seed=1)
                game.join(alice)
                game.start_game(True)
                state = game.state
                seen = (
                    state.lives,
                    state.board_size.rows,
                    state.memorization_time_seconds,
                    state.guessing_time_seconds,
                    state.tile_shape,
                )
                if seen not in allowed:
                    mixed.append(seen)
                game.leave(alice)
        finally:
            stop.set()
            worker.join(5)
            sys.setswitchinterval(interval)
        assert mixed == []
