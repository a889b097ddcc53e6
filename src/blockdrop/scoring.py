"""Line clearing, score and level progression."""

from __future__ import annotations

from .board import first_full_row, remove_row
from .game_state import GameState


SCORE_PER_LINE = 10
LINES_PER_LEVEL = 10


def update_score(state: GameState) -> GameState:
    """Clear the topmost full row and award points for it.

    The row is removed and an empty row is inserted at the top.  Every
    ``LINES_PER_LEVEL`` clears raise the level by one and restart the counter.
    Only one row is cleared per call; finished games keep their score.
    """

    if state.game_end:
        return state
    index = first_full_row(state.grid)
    if index < 0:
        return state

    lines = state.lines_cleared + 1
    level_up = lines == LINES_PER_LEVEL
    return state.evolve(
        grid=remove_row(state.grid, index),
        score=state.score + SCORE_PER_LINE,
        level=state.level + 1 if level_up else state.level,
        lines_cleared=0 if level_up else lines,
    )


def clear_lines(state: GameState) -> GameState:
    """Clear every full row, awarding each one as :func:`update_score` does."""

    while True:
        updated = update_score(state)
        if updated is state:
            return state
        state = updated


__all__ = ["SCORE_PER_LINE", "LINES_PER_LEVEL", "update_score", "clear_lines"]
