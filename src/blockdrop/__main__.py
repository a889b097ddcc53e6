"""Simple ASCII demo for the engine.

Run with: `python -m blockdrop`

Plays a seeded game headlessly by dropping pieces with ticks only and prints
the final frame, which is handy as a smoke test that the engine lands pieces
and spawns new ones.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from . import GameSession, Tick, format_grid, render_grid


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=12345678, help="Seed for the piece sequence.")
    parser.add_argument("--ticks", type=int, default=200, help="How many gravity ticks to play.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g. DEBUG, INFO).")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    session = GameSession()
    states = session.replay(args.seed, (Tick() for _ in range(args.ticks)))
    final = states[-1]
    print(format_grid(render_grid(final)))
    print(f"Level: {final.level}  Score: {final.score}  Game over: {final.game_end}")


if __name__ == "__main__":
    main()
