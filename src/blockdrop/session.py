"""Host-side controller for a game session.

The engine itself is pure; whatever a front-end needs to remember between
events (the latest state, the high score, whether a game is running, the timer
accumulator) lives on :class:`GameSession`.  Front-ends feed it key presses via
:meth:`GameSession.step` and elapsed time via :meth:`GameSession.advance`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .engine import process_event
from .events import Event, Tick
from .game_state import GameState, clock_seed, create_new_state
from .scoring import SCORE_PER_LINE, clear_lines
from .tetromino import tetromino_type
from .utils import TICK_RATE_MS, tick_interval_ms


LOGGER = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


@dataclass
class GameSession:
    """Start/stop/restart a game and fold events into its state."""

    tick_ms: float = TICK_RATE_MS
    on_state: Optional[StateListener] = None
    state: Optional[GameState] = None
    running: bool = False
    paused: bool = False
    high_score: int = 0
    drop_accum: float = 0.0

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")

    # Lifecycle --------------------------------------------------------
    def start(self, seed: Optional[int] = None) -> GameState:
        """Begin a new game and return its first state."""

        if self.running:
            LOGGER.info("Already running")
            assert self.state is not None
            return self.state
        if seed is None:
            seed = clock_seed()
        self.state = create_new_state(None, seed)
        self.running = True
        self.paused = False
        self.drop_accum = 0.0
        LOGGER.info("Game started (seed=%d)", seed)
        self._publish()
        return self.state

    def restart(self, seed: Optional[int] = None) -> GameState:
        """Throw away the current game and start a new one."""

        self.running = False
        self.state = None
        LOGGER.info("Restarting")
        return self.start(seed)

    def stop(self) -> None:
        if not self.running:
            LOGGER.info("Stop ignored: not running")
            return
        self.running = False
        self.paused = False
        self.drop_accum = 0.0
        LOGGER.info("Game stopped")

    def pause(self) -> None:
        if not self.running:
            LOGGER.info("Pause ignored: not running")
            return
        self.paused = True
        LOGGER.info("Paused")

    def resume(self) -> None:
        if not self.running:
            LOGGER.info("Resume ignored: not running")
            return
        self.paused = False
        LOGGER.info("Resumed")

    # Event folding ----------------------------------------------------
    def step(self, event: Event) -> Optional[GameState]:
        """Fold ``event`` into the current state and return the new state.

        Events arriving while no game is running or while paused are ignored.
        """

        if not self.running or self.state is None:
            LOGGER.debug("Event ignored: not running")
            return self.state
        if self.paused:
            return self.state

        previous = self.state
        state = clear_lines(process_event(event, previous))
        if state.seed != previous.seed:
            LOGGER.debug(
                "Landed %s at row %d, col %d",
                tetromino_type(previous.current_tetromino).value,
                previous.row,
                previous.col,
            )
        if state.score > previous.score:
            LOGGER.debug(
                "Cleared %d row(s). Score: %d",
                (state.score - previous.score) // SCORE_PER_LINE,
                state.score,
            )
        if state.level > previous.level:
            LOGGER.info("Level up: %d", state.level)
        self.state = state
        if state.game_end:
            self._game_over()
        self._publish()
        return state

    def advance(self, elapsed_ms: float) -> int:
        """Feed ``elapsed_ms`` of wall time and emit the ticks that are due.

        Returns the number of ticks processed.
        """

        if not self.running or self.paused or self.state is None:
            return 0
        self.drop_accum += elapsed_ms
        ticks = 0
        while self.running and self.state is not None:
            delay = tick_interval_ms(self.state.level, self.tick_ms)
            if self.drop_accum < delay:
                break
            self.drop_accum -= delay
            self.step(Tick())
            ticks += 1
        return ticks

    def replay(self, seed: int, events: Iterable[Event]) -> List[GameState]:
        """Restart from ``seed``, fold ``events`` in order and return every state.

        The first element is the initial state.  Replaying stops early once the
        game ends.
        """

        states = [self.restart(seed)]
        for event in events:
            if not self.running:
                break
            state = self.step(event)
            assert state is not None
            states.append(state)
        return states

    # Internal helpers -------------------------------------------------
    def _game_over(self) -> None:
        assert self.state is not None
        self.running = False
        self.drop_accum = 0.0
        if self.state.score > self.high_score:
            self.high_score = self.state.score
        LOGGER.info("Game over. Score: %d (high score %d)", self.state.score, self.high_score)

    def _publish(self) -> None:
        if self.on_state is not None and self.state is not None:
            self.on_state(self.state)


__all__ = ["GameSession", "StateListener"]
