"""Simple pygame front-end for the block-dropping engine.

The window shows the playfield, a preview of the next piece, the level, the
score and the session high score.  Arrow keys move and rotate, ``P`` pauses and
``R`` restarts.  All game rules live in the engine; this module only turns key
presses and elapsed frame time into events for :class:`GameSession` and draws
the resulting state.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Optional

import pygame

from .board import GRID_HEIGHT, GRID_WIDTH
from .events import Direction, Event, Move
from .game_state import GameState
from .session import GameSession
from .tetromino import Shape
from .utils import TICK_RATE_MS, render_grid, render_shape

LOGGER = logging.getLogger(__name__)

# Size of a single grid cell in pixels
CELL_SIZE = 20
# Width of the side panel holding the preview and the text fields
PANEL_WIDTH = 160
PREVIEW_HEIGHT = 80
# Frames per second to run the game loop at
FPS = 60

# Mapping from the integer stored in the grid to a colour
CELL_COLORS = {
    0: (0, 0, 0),
    1: (0, 255, 255),
    2: (0, 0, 255),
    3: (255, 165, 0),
    4: (255, 255, 0),
    5: (0, 255, 0),
    6: (128, 0, 128),
    7: (255, 0, 0),
}

KEY_EVENTS = {
    pygame.K_LEFT: Move(Direction.LEFT),
    pygame.K_RIGHT: Move(Direction.RIGHT),
    pygame.K_DOWN: Move(Direction.DOWN),
    pygame.K_UP: Move(Direction.UP),
}


def key_to_event(key: int) -> Optional[Event]:
    """Return the engine event bound to ``key``, if any."""

    return KEY_EVENTS.get(key)


def _draw_cell(screen: pygame.Surface, x: int, y: int, value: int) -> None:
    rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, CELL_COLORS[value], rect)
    pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def draw_board(screen: pygame.Surface, state: GameState) -> None:
    """Render the grid with the falling piece overlaid."""

    for r, row in enumerate(render_grid(state)):
        for c, value in enumerate(row):
            _draw_cell(screen, c * CELL_SIZE, r * CELL_SIZE, value)


def draw_preview(screen: pygame.Surface, shape: Shape) -> None:
    """Render ``shape`` in the preview area of the side panel."""

    left = GRID_WIDTH * CELL_SIZE
    for i, row in enumerate(render_shape(shape)):
        for j, value in enumerate(row):
            if value:
                _draw_cell(screen, left + (j + 2) * CELL_SIZE, (i + 1) * CELL_SIZE, value)


def draw_text(
    screen: pygame.Surface, font: pygame.font.Font, state: GameState, high_score: int
) -> None:
    left = GRID_WIDTH * CELL_SIZE + 10
    lines = [
        f"Level: {state.level}",
        f"Score: {state.score}",
        f"High score: {high_score}",
    ]
    for n, text in enumerate(lines):
        surface = font.render(text, True, (255, 255, 255))
        screen.blit(surface, (left, PREVIEW_HEIGHT + 20 + n * 24))
    if state.game_end:
        surface = font.render("Game over - press R", True, (255, 80, 80))
        screen.blit(surface, (left, PREVIEW_HEIGHT + 20 + len(lines) * 24 + 12))


class GameRunner:
    """Manage the pygame loop around a :class:`GameSession`."""

    def __init__(self, *, seed: Optional[int] = None, tick_ms: float = TICK_RATE_MS) -> None:
        self._seed = seed
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._clock: pygame.time.Clock | None = None
        self._open = False
        self.session = GameSession(tick_ms=tick_ms)

    @property
    def running(self) -> bool:
        return self._open

    def handle_key(self, key: int) -> None:
        """Process a key press."""

        if key == pygame.K_r:
            self.session.restart(self._seed)
        elif key == pygame.K_p:
            if self.session.paused:
                self.session.resume()
            else:
                self.session.pause()
        else:
            event = key_to_event(key)
            if event is not None:
                self.session.step(event)

    def _draw(self) -> None:
        state = self.session.state
        if self._screen is None or self._font is None or state is None:
            return
        self._screen.fill((0, 0, 0))
        draw_board(self._screen, state)
        draw_preview(self._screen, state.next_tetromino)
        draw_text(self._screen, self._font, state, self.session.high_score)
        pygame.display.set_caption(
            f"blockdrop - {'Paused - ' if self.session.paused else ''}Score: {state.score}"
        )
        pygame.display.flip()

    async def _run_loop(self) -> None:
        # Bind SDL to the page canvas when running on the web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        width = GRID_WIDTH * CELL_SIZE + PANEL_WIDTH
        height = GRID_HEIGHT * CELL_SIZE
        self._screen = pygame.display.set_mode((width, height))
        self._font = pygame.font.Font(None, 24)
        pygame.display.set_caption("blockdrop")
        self._clock = pygame.time.Clock()

        self.session.start(self._seed)
        self._open = True
        while self._open:
            dt = self._clock.tick(FPS) if self._clock else 0
            # Key presses and timer ticks share one ordered stream per frame.
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._open = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
            self.session.advance(dt)
            self._draw()
            await asyncio.sleep(0)

        self.session.stop()
        pygame.quit()
        LOGGER.info("Window closed")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (plain Python); run synchronously
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())

    def stop(self) -> None:
        if not self._open:
            LOGGER.info("Stop ignored: game not running")
            return
        self._open = False


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blockdrop in a pygame window.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence (default: clock).")
    parser.add_argument(
        "--tick-ms",
        type=float,
        default=TICK_RATE_MS,
        help="Milliseconds between gravity ticks at level 0.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    GameRunner(seed=args.seed, tick_ms=args.tick_ms).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
