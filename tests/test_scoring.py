from __future__ import annotations

import numpy as np

from helpers import SEED, make_grid

from blockdrop.game_state import create_new_state
from blockdrop.scoring import LINES_PER_LEVEL, SCORE_PER_LINE, clear_lines, update_score


def _state_with(cells, **changes):
    return create_new_state(None, SEED).evolve(grid=make_grid(cells), **changes)


def _full_row(row: int, value: int = 1):
    return {(row, c): value for c in range(10)}


def test_bottom_row_cleared_and_rows_shift_down() -> None:
    cells = _full_row(19)
    cells.update({(18, c): 2 for c in range(9)})
    state = _state_with(cells)

    updated = update_score(state)
    assert updated.score == SCORE_PER_LINE
    assert updated.lines_cleared == 1
    assert updated.level == 0
    assert not updated.grid[0].any()
    assert np.array_equal(updated.grid[19], state.grid[18])
    assert updated.grid.shape == state.grid.shape


def test_middle_row_removal_keeps_rows_below() -> None:
    cells = _full_row(10, value=5)
    cells.update({(9, 0): 3, (4, 7): 6, (15, 2): 7})
    state = _state_with(cells)

    updated = update_score(state)
    assert np.array_equal(updated.grid[1:11], state.grid[0:10])
    assert np.array_equal(updated.grid[11:], state.grid[11:])
    assert updated.grid[10, 0] == 3
    assert updated.grid[5, 7] == 6
    assert updated.grid[15, 2] == 7


def test_tenth_clear_raises_level_and_resets_counter() -> None:
    state = _state_with(_full_row(19), lines_cleared=LINES_PER_LEVEL - 1, level=2, score=90)
    updated = update_score(state)
    assert updated.level == 3
    assert updated.lines_cleared == 0
    assert updated.score == 100


def test_no_full_row_returns_same_state() -> None:
    state = _state_with({(19, c): 1 for c in range(9)})
    assert update_score(state) is state


def test_update_score_clears_one_row_per_call() -> None:
    cells = _full_row(18)
    cells.update(_full_row(19))
    state = _state_with(cells)
    once = update_score(state)
    assert once.score == SCORE_PER_LINE
    assert np.all(once.grid[19] != 0)


def test_clear_lines_awards_every_full_row() -> None:
    cells = _full_row(17)
    cells.update(_full_row(19))
    cells[(18, 0)] = 4
    state = _state_with(cells)

    cleared = clear_lines(state)
    assert cleared.score == 2 * SCORE_PER_LINE
    assert cleared.lines_cleared == 2
    assert np.count_nonzero(cleared.grid) == 1
    assert cleared.grid[19, 0] == 4


def test_finished_game_keeps_its_score() -> None:
    state = _state_with(_full_row(19), game_end=True, score=50)
    assert update_score(state) is state
    assert clear_lines(state) is state
