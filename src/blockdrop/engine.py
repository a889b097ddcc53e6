"""State transitions for the falling piece.

:func:`process_event` is the single entry point used by hosts.  It folds one
:class:`~blockdrop.events.Tick` or :class:`~blockdrop.events.Move` into a game
state and returns the next state.  Landing a piece commits it to the grid and
pulls the next piece from the sequencer; line clears are left to
:mod:`blockdrop.scoring` so the host decides when to score.
"""

from __future__ import annotations

from typing import Optional

from .board import commit_piece, overlaps
from .collision import (
    check_bounds,
    is_on_ground,
    is_side_colliding,
    is_stacking_on_blocks,
)
from .events import Direction, Event, Move, Tick
from .game_state import GameState, create_new_state
from .tetromino import rotate_cw


def tetromino_landed(state: GameState) -> GameState:
    """Commit the falling piece to the grid and spawn the next one.

    The game ends when the freshly spawned piece already overlaps or rests on
    existing blocks.
    """

    grid = commit_piece(state.grid, state.current_tetromino, state.row, state.col)
    new_state = create_new_state(state.evolve(grid=grid))
    if overlaps(grid, new_state.current_tetromino, new_state.row, new_state.col) or (
        is_stacking_on_blocks(new_state)
    ):
        return new_state.evolve(game_end=True)
    return new_state


def check_stacking_on_blocks(state: GameState) -> GameState:
    return tetromino_landed(state) if is_stacking_on_blocks(state) else state


def check_side_collisions(state: GameState, direction: Direction) -> GameState:
    """Shift the piece one column unless something is in the way.

    A shifted piece that ends up resting on blocks lands.
    """

    delta_col = direction.column_delta
    if is_side_colliding(state, delta_col):
        return state
    return check_stacking_on_blocks(state.evolve(col=state.col + delta_col))


def check_collisions(state: GameState, direction: Optional[Direction] = None) -> GameState:
    """Resolve the proposed ``state`` against walls and landed blocks.

    With a horizontal ``direction`` the piece is moved sideways when possible.
    Without one the piece lands if it is on the ground or stacked on blocks.
    """

    if direction is not None:
        return check_side_collisions(state, direction)
    if is_on_ground(state):
        return tetromino_landed(state)
    return check_stacking_on_blocks(state)


def rotate(state: GameState) -> GameState:
    """Rotate the falling piece clockwise.

    The rotated piece is pushed back inside the walls first.  If it then
    overlaps landed blocks the rotation is rejected and ``state`` is returned.
    """

    rotated = check_bounds(state.evolve(current_tetromino=rotate_cw(state.current_tetromino)))
    if is_side_colliding(rotated, 0):
        return state
    return check_collisions(rotated)


def tick(state: GameState) -> GameState:
    """Advance the falling piece by one row."""

    return check_bounds(check_collisions(state.evolve(row=state.row + 1)))


def move(state: GameState, direction: Direction) -> GameState:
    """Apply a player input to ``state``.

    Directions outside :class:`Direction` leave the state unchanged.
    """

    try:
        direction = Direction(direction)
    except ValueError:
        return state
    if direction in (Direction.LEFT, Direction.RIGHT):
        return check_bounds(check_collisions(state, direction))
    if direction is Direction.DOWN:
        return tick(state)
    if direction is Direction.UP:
        return check_bounds(rotate(state))
    return state


def process_event(event: Event, state: GameState) -> GameState:
    """Return the state that follows ``state`` after ``event``.

    Finished games are returned unchanged, as are events that are not
    recognised.
    """

    if state.game_end:
        return state
    match event:
        case Tick():
            return tick(state)
        case Move(direction=direction):
            return move(state, direction)
        case _:
            return state


__all__ = [
    "tetromino_landed",
    "check_collisions",
    "rotate",
    "tick",
    "move",
    "process_event",
]
