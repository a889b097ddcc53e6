"""Utility helpers for hosts driving the engine."""

from __future__ import annotations

from typing import List

from .board import in_bounds
from .game_state import GameState
from .tetromino import Shape, occupied_cells


TICK_RATE_MS = 1000


def tick_interval_ms(level: int, base_ms: float = TICK_RATE_MS) -> float:
    """Return the timer period in milliseconds for ``level``.

    Level ``0`` ticks every ``base_ms``.  The interval shrinks by 15% per level
    but never drops below 50ms.
    """

    return max(50.0, base_ms * (0.85 ** level))


def render_grid(state: GameState) -> List[List[int]]:
    """Return the grid as nested lists with the falling piece overlaid.

    Renderers can draw the result directly without knowing about anchors.
    Cells already filled keep their value.
    """

    grid = state.grid.tolist()
    shape = state.current_tetromino
    for i, j in occupied_cells(shape):
        r, c = state.row + i, state.col + j
        if in_bounds(r, c) and grid[r][c] == 0:
            grid[r][c] = int(shape[i, j])
    return grid


def render_shape(shape: Shape) -> List[List[int]]:
    """Return ``shape`` as nested lists, as used by the preview panel."""

    return shape.tolist()


def format_grid(grid: List[List[int]]) -> str:
    """Return an ASCII picture of ``grid``; filled cells show their colour value."""

    return "\n".join("".join(str(cell) if cell else "." for cell in row) for row in grid)


__all__ = ["TICK_RATE_MS", "tick_interval_ms", "render_grid", "render_shape", "format_grid"]
