from __future__ import annotations

import pytest

from helpers import SEED

from blockdrop.game_state import create_new_state
from blockdrop.utils import TICK_RATE_MS, format_grid, render_grid, render_shape, tick_interval_ms


def test_tick_interval_starts_at_base_rate_and_speeds_up() -> None:
    assert tick_interval_ms(0) == pytest.approx(TICK_RATE_MS)
    assert tick_interval_ms(1) < tick_interval_ms(0)
    assert tick_interval_ms(100) == 50.0
    assert tick_interval_ms(0, base_ms=200) == pytest.approx(200)


def test_render_grid_overlays_falling_piece_without_mutating_state() -> None:
    state = create_new_state(None, SEED)
    grid = render_grid(state)
    assert grid[0][4:6] == [4, 4]
    assert grid[1][4:6] == [4, 4]
    assert sum(cell != 0 for row in grid for cell in row) == 4
    assert not state.grid.any()


def test_render_shape_and_format_grid() -> None:
    state = create_new_state(None, SEED)
    assert render_shape(state.next_tetromino) == [[2, 0, 0], [2, 2, 2], [0, 0, 0]]
    text = format_grid(render_grid(state))
    lines = text.splitlines()
    assert len(lines) == 20
    assert lines[0] == "....44...."
