"""Events folded into the game state.

An event is either a :class:`Tick` from the game timer or a :class:`Move` from
the player.  ``process_event`` pattern-matches on these two types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(str, Enum):
    """Directions a player can press."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Parse a direction name such as ``"left"`` (case insensitive).

        Raises:
            ValueError: If ``name`` is not a known direction.
        """

        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {name!r}") from None

    @property
    def column_delta(self) -> int:
        if self is Direction.LEFT:
            return -1
        if self is Direction.RIGHT:
            return 1
        return 0


@dataclass(frozen=True)
class Tick:
    """One step of the game timer."""


@dataclass(frozen=True)
class Move:
    """A directional input from the player."""

    direction: Direction


Event = Union[Tick, Move]


__all__ = ["Direction", "Tick", "Move", "Event"]
