"""Seeded pseudo-random numbers for piece sequencing.

A plain linear congruential generator using GCC's constants.  Both helpers are
pure so a whole game can be replayed from its starting seed.
"""

from __future__ import annotations

from typing import Iterator

# LCG parameters
MODULUS = 0x80000000  # 2**31
MULTIPLIER = 1103515245
INCREMENT = 12345


def hash_seed(seed: int) -> int:
    """Advance the generator one step and return the new hash."""

    return (MULTIPLIER * seed + INCREMENT) % MODULUS


def scale(value: int) -> float:
    """Return ``value`` normalised to the half-open range ``[0, 1)``."""

    return value / MODULUS


def sequence(seed: int, count: int) -> Iterator[int]:
    """Yield the first ``count`` hashes following ``seed``."""

    value = seed
    for _ in range(count):
        value = hash_seed(value)
        yield value


__all__ = ["MODULUS", "MULTIPLIER", "INCREMENT", "hash_seed", "scale", "sequence"]
