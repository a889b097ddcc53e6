"""Pure state-transition engine for a falling-block puzzle game."""

from .board import GRID_HEIGHT, GRID_WIDTH, create_empty_grid
from .tetromino import TETROMINOS, TetrominoType, rotate_cw, shape_for
from .events import Direction, Move, Tick
from .game_state import GameState, create_new_state
from .engine import process_event, rotate, tetromino_landed
from .scoring import clear_lines, update_score
from .session import GameSession
from .utils import format_grid, render_grid, tick_interval_ms

__all__ = [
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "create_empty_grid",
    "TETROMINOS",
    "TetrominoType",
    "rotate_cw",
    "shape_for",
    "Direction",
    "Move",
    "Tick",
    "GameState",
    "create_new_state",
    "process_event",
    "rotate",
    "tetromino_landed",
    "update_score",
    "clear_lines",
    "GameSession",
    "render_grid",
    "format_grid",
    "tick_interval_ms",
]
