# Area: Engine
"""
memory_game._engine.board — Level board generation
===================================================

Builds the solution board (which tiles the player must memorize) and a
blank guesses board for one level. Randomness comes from an injected
``random.Random``-compatible source so a seeded source reproduces the
exact same board.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Union

from .state import BoardDimensions, MemoryGameBoard


@dataclass
class Level:
    """Boards and target count for one generated level."""
    size: BoardDimensions
    solution_board: MemoryGameBoard
    guesses_board: MemoryGameBoard
    target_count: int


def target_tile_count(rows: int, columns: int, target_tiles_percentage: float) -> int:
    """Number of target tiles for a board, rounded up."""
    return math.ceil(rows * columns * target_tiles_percentage)


def make_rng(seed: Optional[Union[int, str]] = None) -> random.Random:
    """Seeded source for tests and replays; unseeded otherwise."""
    return random.Random(seed)


def generate_level(
    size: BoardDimensions,
    target_tiles_percentage: float,
    rng: random.Random,
) -> Level:
    """
    Generate a level of the given size.

    Target cells are placed by rejection sampling: draw a uniformly
    random cell and mark it unless it is already a target, until the
    target count is reached.

    Raises
    ------
    ValueError
        If the target count exceeds the number of cells.
    """
    rows, columns = size.rows, size.columns
    target = target_tile_count(rows, columns, target_tiles_percentage)
    if target > rows * columns:
        raise ValueError(
            f"Cannot place {target} targets on a {rows}x{columns} board"
        )

    solution: MemoryGameBoard = [[False] * columns for _ in range(rows)]
    guesses: MemoryGameBoard = [[None] * columns for _ in range(rows)]

    placed = 0
    while placed < target:
        row = rng.randrange(rows)
        column = rng.randrange(columns)
        if not solution[row][column]:
            solution[row][column] = True
            placed += 1

    return Level(
        size=size,
        solution_board=solution,
        guesses_board=guesses,
        target_count=target,
    )


def count_targets(board: MemoryGameBoard) -> int:
    return sum(1 for row in board for cell in row if cell is True)
