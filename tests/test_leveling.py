"""Tests for the level selection strategies."""
from collections import Counter
from random import Random

import pytest

from pyskip import InvalidLevelError, SkipList, fixed_level, geometric_level


def test_geometric_level_in_range():
    rng = Random(0)
    for max_level in (1, 2, 5, 16):
        for _ in range(500):
            assert 1 <= geometric_level(max_level, 0.9, rng) <= max_level


def test_geometric_level_max_one():
    """A ceiling of one always yields one, whatever the draw."""
    rng = Random(3)
    assert {geometric_level(1, 0.999, rng) for _ in range(100)} == {1}


def test_geometric_distribution_shape():
    """Roughly half the nodes reach level two with p=0.5."""
    rng = Random(42)
    counts = Counter(geometric_level(16, 0.5, rng) for _ in range(20000))
    assert 0.45 < counts[1] / 20000 < 0.55
    assert counts[1] > counts[2] > counts[3]


def test_fixed_seed_is_reproducible():
    """Same seed, same inserts, same layout."""
    def build():
        sl = SkipList[int](6, 0.5, seed=2024)
        for v in (8, 3, 5, 1, 9, 2, 7):
            sl.insert(v)
        return [[n.value, len(n.forward)] for n in _nodes(sl)]

    assert build() == build()


def test_fixed_level():
    """fixed_level always picks its height, capped by max_level."""
    sl = SkipList[int](3, 0.5, leveler=fixed_level(2))
    for v in (1, 2, 3):
        sl.insert(v)
    assert sl.level == 2
    assert all(len(n.forward) == 2 for n in _nodes(sl))

    capped = SkipList[int](2, 0.5, leveler=fixed_level(10))
    capped.insert(1)
    assert capped.level == 2


def test_fixed_level_rejects_zero():
    with pytest.raises(ValueError):
        fixed_level(0)


@pytest.mark.parametrize("bad", [0, 6, -1])
def test_out_of_range_leveler_leaves_list_untouched(bad):
    """A leveler returning a bad height fails before any splice."""
    heights = iter([2, bad])
    sl = SkipList[int](5, 0.5, leveler=lambda m, p, rng: next(heights))
    sl.insert(1)
    with pytest.raises(InvalidLevelError):
        sl.insert(2)
    assert sl.levels() == [[1], [1]]
    assert len(sl) == 1


def _nodes(sl):
    x = sl.head.forward[0]
    while x is not None:
        yield x
        x = x.forward[0]
