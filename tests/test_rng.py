from __future__ import annotations

import pytest

from blockdrop.rng import MODULUS, hash_seed, scale, sequence


def test_hash_matches_known_lcg_values() -> None:
    assert hash_seed(12345678) == 1177510511
    assert hash_seed(1177510511) == 587524988
    assert hash_seed(0) == 12345


def test_hash_stays_below_modulus() -> None:
    value = 987654321
    for _ in range(1000):
        value = hash_seed(value)
        assert 0 <= value < MODULUS


def test_scale_is_half_open_unit_interval() -> None:
    assert scale(0) == 0.0
    assert scale(MODULUS // 2) == pytest.approx(0.5)
    assert scale(MODULUS - 1) < 1.0


def test_sequence_is_reproducible() -> None:
    first = list(sequence(12345678, 5))
    assert first == list(sequence(12345678, 5))
    assert first[:3] == [1177510511, 587524988, 113261573]
