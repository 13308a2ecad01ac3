"""Tests for block color sources."""

import random

import pytest

from stacker.game.colors import PALETTE, CycleColorSource, RandomColorSource


def test_palette_matches_classic_size():
    assert len(PALETTE) == 19
    assert len(set(PALETTE)) == 19


def test_random_source_picks_from_palette():
    source = RandomColorSource(random.Random(7))
    for _ in range(50):
        assert source() in PALETTE


def test_random_source_is_reproducible_with_seed():
    first = RandomColorSource(random.Random(42))
    second = RandomColorSource(random.Random(42))
    assert [first() for _ in range(20)] == [second() for _ in range(20)]


def test_random_source_custom_palette():
    source = RandomColorSource(random.Random(1), palette=[(1, 2, 3)])
    assert source() == (1, 2, 3)


def test_cycle_source_repeats():
    source = CycleColorSource([(1, 1, 1), (2, 2, 2)])
    assert [source() for _ in range(5)] == [
        (1, 1, 1), (2, 2, 2), (1, 1, 1), (2, 2, 2), (1, 1, 1),
    ]


@pytest.mark.parametrize("factory", [
    lambda: CycleColorSource([]),
    lambda: RandomColorSource(palette=[]),
])
def test_empty_sources_rejected(factory):
    with pytest.raises(ValueError):
        factory()
