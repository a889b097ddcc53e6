from __future__ import annotations

from helpers import make_grid, piece_state

from blockdrop.collision import (
    bound_x,
    bound_y,
    check_bounds,
    is_colliding_at_cell,
    is_on_ground,
    is_side_colliding,
    is_stacking_on_blocks,
    is_within_bounds,
)
from blockdrop.tetromino import TetrominoType


def test_overhang_over_empty_rows_is_kept() -> None:
    state = piece_state(TetrominoType.I, row=-1, col=3)
    assert bound_y(state) is state
    assert is_within_bounds(state)


def test_overhang_over_occupied_row_is_clamped() -> None:
    state = piece_state(TetrominoType.I, row=-2, col=3)
    assert bound_y(state).row == -1


def test_vertical_i_may_hang_off_left_wall_by_its_empty_columns() -> None:
    state = piece_state(TetrominoType.I, row=5, col=-2, turns=1)
    assert bound_x(state) is state
    assert bound_x(state.evolve(col=-3)).col == -2


def test_vertical_i_clamped_at_right_wall() -> None:
    state = piece_state(TetrominoType.I, row=5, col=8, turns=1)
    assert bound_x(state).col == 7


def test_piece_wider_than_remaining_columns_is_pulled_back() -> None:
    state = piece_state(TetrominoType.I, row=5, col=8)
    corrected = check_bounds(state)
    assert corrected.col == 6
    assert is_within_bounds(corrected)


def test_piece_below_floor_is_lifted() -> None:
    state = piece_state(TetrominoType.O, row=19, col=4)
    assert bound_y(state).row == 18


def test_ground_check_uses_last_occupied_row() -> None:
    assert is_on_ground(piece_state(TetrominoType.O, row=18, col=4))
    assert not is_on_ground(piece_state(TetrominoType.O, row=17, col=4))
    # T's bottom row is empty, so its anchor sits one row lower on the floor.
    assert is_on_ground(piece_state(TetrominoType.T, row=18, col=4))


def test_stacking_detects_block_directly_below() -> None:
    grid = make_grid({(18, 4): 1})
    assert is_stacking_on_blocks(piece_state(TetrominoType.O, row=16, col=4, grid=grid))
    assert not is_stacking_on_blocks(piece_state(TetrominoType.O, row=15, col=4, grid=grid))


def test_side_collision_against_blocks_and_walls() -> None:
    grid = make_grid({(5, 3): 2})
    state = piece_state(TetrominoType.O, row=5, col=4, grid=grid)
    assert is_side_colliding(state, -1)
    assert not is_side_colliding(state, 1)
    assert is_side_colliding(piece_state(TetrominoType.O, row=5, col=0), -1)
    assert is_side_colliding(piece_state(TetrominoType.O, row=5, col=8), 1)


def test_empty_shape_cells_never_collide() -> None:
    grid = make_grid({(5, 4): 1})
    state = piece_state(TetrominoType.T, row=5, col=4, grid=grid)
    # Shape cell (0, 0) of T is empty and sits over the filled grid cell.
    assert not is_colliding_at_cell(state, 0, 0)
    assert is_colliding_at_cell(state, 0, 1, 0, -1)


def test_pieces_on_ground_do_not_collide() -> None:
    grid = make_grid({(18, 3): 1})
    state = piece_state(TetrominoType.O, row=18, col=4, grid=grid)
    assert not is_side_colliding(state, -1)
