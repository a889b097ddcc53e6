"""Grid representation for the playfield.

The grid is a ``GRID_HEIGHT x GRID_WIDTH`` matrix of cell values with row ``0``
at the top.  Grids stored in a game state are read-only; every helper that
changes cells returns a new array.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .tetromino import Shape


# Dimensions of the standard playfield.
GRID_WIDTH = 10
GRID_HEIGHT = 20

Grid = NDArray[np.uint8]


def freeze(grid: Grid) -> Grid:
    """Mark ``grid`` read-only and return it."""

    grid.setflags(write=False)
    return grid


def create_empty_grid() -> Grid:
    """Return a new empty, read-only grid filled with zeros."""

    return freeze(np.zeros((GRID_HEIGHT, GRID_WIDTH), dtype=np.uint8))


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < GRID_HEIGHT and 0 <= col < GRID_WIDTH


def get_cell(grid: Grid, row: int, col: int) -> int:
    """Safely return the value at ``(row, col)``.

    Raises:
        IndexError: If the coordinates are outside the grid.
    """
    if in_bounds(row, col):
        return int(grid[row, col])
    raise IndexError("Cell out of bounds")


def commit_piece(grid: Grid, shape: Shape, row: int, col: int) -> Grid:
    """Return a copy of ``grid`` with the occupied cells of ``shape`` written in.

    The shape's top-left corner sits at ``(row, col)``.  Cells that are already
    occupied keep their value and cells outside the grid are skipped.
    """

    new_grid = grid.copy()
    for i, j in np.argwhere(shape != 0):
        r, c = row + int(i), col + int(j)
        if in_bounds(r, c) and new_grid[r, c] == 0:
            new_grid[r, c] = shape[i, j]
    return freeze(new_grid)


def overlaps(grid: Grid, shape: Shape, row: int, col: int) -> bool:
    """Return ``True`` if any occupied cell of ``shape`` covers a filled cell."""

    for i, j in np.argwhere(shape != 0):
        r, c = row + int(i), col + int(j)
        if in_bounds(r, c) and get_cell(grid, r, c) != 0:
            return True
    return False


def first_full_row(grid: Grid) -> int:
    """Return the index of the topmost full row, or ``-1`` if there is none."""

    full_rows = np.flatnonzero(np.all(grid != 0, axis=1))
    return int(full_rows[0]) if full_rows.size else -1


def remove_row(grid: Grid, index: int) -> Grid:
    """Drop row ``index`` and insert an empty row at the top.

    Rows above ``index`` shift down by one; rows below are untouched.
    """

    remaining = np.delete(grid, index, axis=0)
    new_row = np.zeros((1, grid.shape[1]), dtype=grid.dtype)
    return freeze(np.vstack((new_row, remaining)))


__all__ = [
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "Grid",
    "freeze",
    "create_empty_grid",
    "in_bounds",
    "get_cell",
    "commit_piece",
    "overlaps",
    "first_full_row",
    "remove_row",
]
