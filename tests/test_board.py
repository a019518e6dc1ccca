# Area: Engine Tests
"""Tests for level board generation."""

import random

import pytest

from memory_game._engine.board import (
    count_targets,
    generate_level,
    make_rng,
    target_tile_count,
)
from memory_game._engine.state import BoardDimensions


class TestTargetTileCount:
    """Target count rounds up."""

    def test_quarter_of_four_by_four(self):
        assert target_tile_count(4, 4, 0.25) == 4

    def test_rounds_up(self):
        # 3 * 3 * 0.25 = 2.25
        assert target_tile_count(3, 3, 0.25) == 3

    def test_zero_percentage(self):
        assert target_tile_count(5, 5, 0) == 0

    def test_full_board(self):
        assert target_tile_count(6, 7, 1) == 42


class TestGenerateLevel:
    """Tests for generate_level()."""

    @pytest.mark.parametrize("rows,columns,pct", [
        (1, 1, 1.0),
        (4, 4, 0.25),
        (4, 4, 0.5),
        (5, 7, 0.3),
        (24, 24, 0.1),
        (24, 24, 1.0),
        (10, 3, 0.0),
    ])
    def test_exact_target_count(self, rows, columns, pct):
        level = generate_level(BoardDimensions(rows, columns), pct, random.Random(3))
        expected = target_tile_count(rows, columns, pct)
        assert level.target_count == expected
        assert count_targets(level.solution_board) == expected

    def test_board_shapes(self):
        level = generate_level(BoardDimensions(3, 5), 0.4, make_rng(1))
        assert len(level.solution_board) == 3
        assert all(len(row) == 5 for row in level.solution_board)
        assert len(level.guesses_board) == 3
        assert all(len(row) == 5 for row in level.guesses_board)

    def test_guesses_start_unguessed(self):
        level = generate_level(BoardDimensions(4, 4), 0.5, make_rng(1))
        assert all(cell is None for row in level.guesses_board for cell in row)

    def test_solution_cells_are_booleans(self):
        level = generate_level(BoardDimensions(4, 4), 0.5, make_rng(1))
        assert all(isinstance(cell, bool) for row in level.solution_board for cell in row)

    def test_same_seed_same_board(self):
        size = BoardDimensions(4, 4)
        first = generate_level(size, 0.5, make_rng(42))
        second = generate_level(size, 0.5, make_rng(42))
        assert first.solution_board == second.solution_board

    def test_rows_are_independent_lists(self):
        level = generate_level(BoardDimensions(3, 3), 0.0, make_rng(0))
        level.guesses_board[0][0] = True
        assert level.guesses_board[1][0] is None

    def test_too_many_targets_raises(self):
        with pytest.raises(ValueError):
            generate_level(BoardDimensions(2, 2), 1.5, make_rng(0))


class TestCountTargets:

    def test_ignores_false_and_none(self):
        assert count_targets([[True, False], [None, True]]) == 2
