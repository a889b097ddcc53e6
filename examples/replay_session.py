"""Replay a seeded game from a scripted list of inputs.

Run with::

    PYTHONPATH=src python examples/replay_session.py --seed 12345678 --moves left,left,up --ticks 40

The moves are played first, one per event, followed by ``--ticks`` gravity
ticks.  A one-line summary of the run is logged and the final frame printed.
Two runs with the same arguments always produce the same output.
"""

from __future__ import annotations

import argparse
import logging

from blockdrop.events import Direction, Event, Move, Tick
from blockdrop.game_state import GameState
from blockdrop.session import GameSession
from blockdrop.utils import format_grid, render_grid


LOGGER = logging.getLogger(__name__)


def build_events(moves: str, ticks: int) -> list[Event]:
    events: list[Event] = []
    for name in moves.split(","):
        if name.strip():
            events.append(Move(Direction.from_name(name)))
    events.extend(Tick() for _ in range(ticks))
    return events


def count_landings(states: list[GameState]) -> int:
    """Return how many pieces landed during ``states``."""

    return sum(1 for before, after in zip(states, states[1:]) if after.seed != before.seed)


def _format_summary(states: list[GameState]) -> str:
    if not states:
        return "No states recorded."
    final = states[-1]
    return (
        f"events={len(states) - 1}, landed={count_landings(states)}, "
        f"score={final.score}, level={final.level}, game_over={final.game_end}"
    )


def log_summary(states: list[GameState], *, seed: int) -> str:
    message = _format_summary(states)
    LOGGER.info("Replay of seed %d: %s", seed, message)
    return message


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=12345678, help="Seed for the piece sequence.")
    parser.add_argument(
        "--moves",
        default="",
        help="Comma separated directions (left, right, down, up) to play first.",
    )
    parser.add_argument("--ticks", type=int, default=100, help="Gravity ticks to play after the moves.")
    parser.add_argument(
        "--no-grid",
        dest="print_grid",
        action="store_false",
        help="Skip printing the final frame (logging only).",
    )
    parser.set_defaults(print_grid=True)
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    session = GameSession()
    states = session.replay(args.seed, build_events(args.moves, args.ticks))
    log_summary(states, seed=args.seed)
    if args.print_grid:
        print(format_grid(render_grid(states[-1])))


if __name__ == "__main__":
    main()
