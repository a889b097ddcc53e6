"""Immutable game state and the piece sequencer."""

from __future__ import annotations

import time
from dataclasses import dataclass, field, fields, replace
from typing import Optional

import numpy as np

from .board import GRID_WIDTH, Grid, create_empty_grid
from .rng import hash_seed, scale
from .tetromino import TETROMINOS, Shape, extent


@dataclass(frozen=True, eq=False)
class GameState:
    """Snapshot of a game session.

    A new instance is produced for every transition; nothing mutates an
    existing state.  ``row`` and ``col`` anchor the top-left corner of
    ``current_tetromino`` in the grid.  ``seed`` is the last generator hash used
    by the sequencer.
    """

    current_tetromino: Shape
    next_tetromino: Shape
    seed: int
    grid: Grid = field(default_factory=create_empty_grid)
    level: int = 0
    score: int = 0
    lines_cleared: int = 0
    game_end: bool = False
    row: int = 0
    col: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        for f in fields(self):
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            if isinstance(mine, np.ndarray):
                if not np.array_equal(mine, theirs):
                    return False
            elif mine != theirs:
                return False
        return True

    def evolve(self, **changes) -> "GameState":
        """Return a copy of this state with ``changes`` applied."""

        return replace(self, **changes)


def random_tetromino(value: int) -> Shape:
    """Map a generator hash onto a catalog entry."""

    return TETROMINOS[int(scale(value) * len(TETROMINOS))]


def spawn_anchor(shape: Shape) -> tuple[int, int]:
    """Return the ``(row, col)`` a freshly spawned ``shape`` starts at.

    The piece is centred horizontally and lifted so that its first occupied row
    lines up with the top of the grid.
    """

    col = (GRID_WIDTH - shape.shape[1]) // 2
    return -extent(shape).first_row, col


def clock_seed() -> int:
    """Return the wall-clock time in milliseconds, used to seed new games."""

    return time.time_ns() // 1_000_000


def create_new_state(previous: Optional[GameState] = None, seed: Optional[int] = None) -> GameState:
    """Start a new game or roll the sequencer over to the next piece.

    Without ``previous`` a fresh game is created from ``seed`` (the clock when
    omitted).  With ``previous`` its ``next_tetromino`` is promoted, a new
    lookahead piece is drawn by hashing the stored seed forward one step, and
    the grid, score and level carry over.
    """

    if previous is not None:
        value = hash_seed(previous.seed)
        current = previous.next_tetromino
        row, col = spawn_anchor(current)
        return previous.evolve(
            current_tetromino=current,
            next_tetromino=random_tetromino(value),
            seed=value,
            row=row,
            col=col,
        )

    if seed is None:
        seed = clock_seed()
    first = hash_seed(seed)
    second = hash_seed(first)
    current = random_tetromino(first)
    row, col = spawn_anchor(current)
    return GameState(
        current_tetromino=current,
        next_tetromino=random_tetromino(second),
        seed=second,
        row=row,
        col=col,
    )


__all__ = ["GameState", "random_tetromino", "spawn_anchor", "clock_seed", "create_new_state"]
