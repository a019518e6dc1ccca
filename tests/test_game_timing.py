# Area: Engine Tests
"""Tests for deadline-driven transitions on the virtual clock."""

from unittest.mock import MagicMock

from memory_game import GameStatus


class TestMemorizationDeadline:
    """Memorization ends when its deadline passes."""

    def test_not_before_deadline(self, started_game, scheduler):
        scheduler.advance(4.99)
        assert started_game.state.status is GameStatus.WAITING_TO_START

    def test_deadline_starts_guessing(self, started_game, scheduler):
        scheduler.advance(5)
        assert started_game.state.status is GameStatus.IN_PROGRESS
        assert started_game.timer.label == "guessing"

    def test_first_move_cancels_memorization_deadline(self, started_game, alice, move, targets, scheduler):
        row, column = targets(started_game)[0]
        started_game.apply_move(move(started_game, alice, row, column))
        # Only the guessing deadline is pending now
        assert scheduler.pending() == 1
        scheduler.advance(5)
        assert started_game.state.status is GameStatus.IN_PROGRESS


class TestGuessingDeadline:
    """Running out of guessing time costs a life."""

    def test_timeout_costs_life_and_replays(self, started_game, scheduler):
        solution = [list(r) for r in started_game.state.solution_board]
        scheduler.advance(5)
        scheduler.advance(15)
        assert started_game.state.lives == 2
        assert started_game.state.status is GameStatus.WAITING_TO_START
        assert started_game.state.solution_board == solution
        assert started_game.timer.label == "memorization"

    def test_timeout_on_last_life_ends_game(self, make_game, alice, scheduler, casual_settings, transmitter):
        casual_settings["startingLives"] = 1
        game = make_game()
        game.join(alice)
        game.start_game(False, customized_settings=casual_settings)
        scheduler.advance(3)
        assert game.state.status is GameStatus.IN_PROGRESS
        scheduler.advance(10)
        assert game.state.status is GameStatus.OVER
        assert game.state.lives == 0
        assert game.timer.is_armed is False
        transmitter.add_score.assert_not_called()

    def test_idle_game_runs_out_of_lives(self, started_game, scheduler):
        # 3 lives, each lost after 5s memorization + 15s guessing
        scheduler.advance(59)
        assert started_game.state.lives == 1
        scheduler.advance(1)
        assert started_game.state.status is GameStatus.OVER
        assert scheduler.pending() == 0

    def test_guess_does_not_reset_guessing_deadline(self, started_game, alice, move, targets, scheduler):
        scheduler.advance(5)
        scheduler.advance(10)
        row, column = targets(started_game)[0]
        started_game.apply_move(move(started_game, alice, row, column))
        scheduler.advance(5)
        assert started_game.state.lives == 2


class TestDeadlineRaces:
    """Deadlines superseded by moves or leaves never act."""

    def test_leave_cancels_deadline(self, started_game, alice, scheduler):
        started_game.leave(alice)
        assert scheduler.advance(100) == 0
        assert started_game.state.status is GameStatus.OVER
        assert started_game.state.lives == 3

    def test_level_solved_rearms_fresh_memorization(self, started_game, alice, move, targets, scheduler):
        scheduler.advance(5)
        scheduler.advance(14)
        for row, column in targets(started_game):
            started_game.apply_move(move(started_game, alice, row, column))
        # The old guessing deadline at t=20 must not cost a life
        scheduler.advance(1)
        assert started_game.state.lives == 3
        assert started_game.state.status is GameStatus.WAITING_TO_START
        scheduler.advance(4)
        assert started_game.state.status is GameStatus.IN_PROGRESS

    def test_emitter_called_once_per_deadline(self, make_game, alice, scheduler):
        emitter = MagicMock()
        game = make_game()
        game.join(alice)
        game.start_game(True, emitter=emitter)
        scheduler.advance(5)
        scheduler.advance(15)
        assert emitter.call_count == 2
