"""Bounds correction and collision predicates for the falling piece.

All helpers are pure functions of a :class:`~blockdrop.game_state.GameState`.
The composite policy that decides whether a piece moves or lands lives in
:mod:`blockdrop.engine`.
"""

from __future__ import annotations

from .board import GRID_HEIGHT, GRID_WIDTH, Grid
from .game_state import GameState
from .tetromino import extent, occupied_cells


def bound_x(state: GameState) -> GameState:
    """Keep the piece inside the left and right walls.

    The bounding box may overhang a wall only by columns that are empty in the
    piece's own shape.  Any other overhang is clamped to the nearest legal
    column.
    """

    ext = extent(state.current_tetromino)
    lowest = -ext.first_col
    highest = GRID_WIDTH - 1 - ext.last_col
    if state.col < lowest:
        return state.evolve(col=lowest)
    if state.col > highest:
        return state.evolve(col=highest)
    return state


def bound_y(state: GameState) -> GameState:
    """Keep the piece between the top of the grid and the floor.

    Same rule as :func:`bound_x` applied to rows.
    """

    ext = extent(state.current_tetromino)
    lowest = -ext.first_row
    highest = GRID_HEIGHT - 1 - ext.last_row
    if state.row < lowest:
        return state.evolve(row=lowest)
    if state.row > highest:
        return state.evolve(row=highest)
    return state


def check_bounds(state: GameState) -> GameState:
    """Apply horizontal then vertical bounds correction."""

    return bound_y(bound_x(state))


def last_non_empty_row_index(state: GameState) -> int:
    return extent(state.current_tetromino).last_row


def is_on_ground(state: GameState) -> bool:
    """Return ``True`` when the piece's lowest occupied row sits on the floor."""

    return state.row + last_non_empty_row_index(state) == GRID_HEIGHT - 1


def _is_filled(grid: Grid, row: int, col: int) -> bool:
    # Walls and the floor count as filled; the space above the grid is open.
    if col < 0 or col >= GRID_WIDTH or row >= GRID_HEIGHT:
        return True
    if row < 0:
        return False
    return bool(grid[row, col] != 0)


def is_colliding_at_cell(
    state: GameState, i: int, j: int, delta_row: int = 0, delta_col: int = 0
) -> bool:
    """Return ``True`` if shape cell ``(i, j)`` hits a filled grid cell.

    The cell is projected by ``delta_row``/``delta_col`` from its current grid
    position.  Empty shape cells never collide and neither does a piece that is
    already on the ground.
    """

    if state.current_tetromino[i, j] == 0:
        return False
    if is_on_ground(state):
        return False
    return _is_filled(
        state.grid, state.row + i + delta_row, state.col + j + delta_col
    )


def is_stacking_on_blocks(state: GameState) -> bool:
    """Return ``True`` if any occupied cell rests directly on a filled cell."""

    return any(
        is_colliding_at_cell(state, i, j, 1, 0)
        for i, j in occupied_cells(state.current_tetromino)
    )


def is_side_colliding(state: GameState, delta_col: int) -> bool:
    """Return ``True`` if shifting by ``delta_col`` columns would hit something.

    ``delta_col == 0`` tests the current placement, which is how rotations are
    validated.
    """

    return any(
        is_colliding_at_cell(state, i, j, 0, delta_col)
        for i, j in occupied_cells(state.current_tetromino)
    )


def is_within_bounds(state: GameState) -> bool:
    """Return ``True`` if every occupied cell of the piece lies in the grid."""

    for i, j in occupied_cells(state.current_tetromino):
        r, c = state.row + i, state.col + j
        if not (0 <= r < GRID_HEIGHT and 0 <= c < GRID_WIDTH):
            return False
    return True


__all__ = [
    "bound_x",
    "bound_y",
    "check_bounds",
    "last_non_empty_row_index",
    "is_on_ground",
    "is_colliding_at_cell",
    "is_stacking_on_blocks",
    "is_side_colliding",
    "is_within_bounds",
]
