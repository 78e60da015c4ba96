"""Level selection strategies for new skip-list nodes.

A *leveler* is any callable ``(max_level, probability, rng) -> int`` returning
the number of forward links a freshly inserted node gets. The list validates
the result, so strategies only need to stay within ``[1, max_level]``.

The default is the classic geometric scheme: flip a biased coin until it comes
up tails or the ceiling is hit. With ``p = 1/b`` the expected height is
O(log_b n).
"""
from __future__ import annotations

from collections.abc import Callable
from random import Random

__all__ = [
    "Leveler",
    "geometric_level",
    "fixed_level",
]

Leveler = Callable[[int, float, Random], int]


def geometric_level(max_level: int, probability: float, rng: Random) -> int:
    lvl = 1
    while rng.random() < probability and lvl < max_level:
        lvl += 1
    return lvl


def fixed_level(height: int) -> Leveler:
    """Return a leveler that always picks ``height`` (capped at ``max_level``).

    Handy for deterministic tests and for running the list as a plain
    sorted linked list (``height=1``).
    """
    if height < 1:
        raise ValueError(f"height must be >= 1, got {height}")

    def _level(max_level: int, probability: float, rng: Random) -> int:
        return min(height, max_level)

    return _level
