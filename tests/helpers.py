from __future__ import annotations

import numpy as np

from blockdrop.board import GRID_HEIGHT, GRID_WIDTH
from blockdrop.game_state import GameState, create_new_state
from blockdrop.tetromino import TetrominoType, rotate_cw, shape_for

SEED = 12345678


def make_grid(cells: dict[tuple[int, int], int] | None = None) -> np.ndarray:
    grid = np.zeros((GRID_HEIGHT, GRID_WIDTH), dtype=np.uint8)
    for (row, col), value in (cells or {}).items():
        grid[row, col] = value
    grid.setflags(write=False)
    return grid


def piece_state(kind: TetrominoType, row: int, col: int, *, turns: int = 0, grid=None) -> GameState:
    shape = shape_for(kind)
    for _ in range(turns):
        shape = rotate_cw(shape)
    state = create_new_state(None, SEED)
    return state.evolve(
        current_tetromino=shape,
        row=row,
        col=col,
        grid=grid if grid is not None else make_grid(),
    )
