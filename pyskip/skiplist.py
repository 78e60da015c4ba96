"""Probabilistic ordered container built as a skip list.

Every node sits on the base chain (level 0) and, with probability ``p`` per
step, on each higher "express" chain as well. Lookups start at the top chain
of the sentinel head and drop a level whenever the next hop would overshoot.

Complexities (average case):
    • search   – O(log n)
    • insert   – O(log n)
    • remove   – O(log n)
    • copy     – O(n log n)   (values are re-inserted, levels re-drawn)
    • move     – O(1)

Duplicates are kept as separate nodes. ``remove`` unlinks at most one of them,
the first one reached by the descent.
"""
from __future__ import annotations

import copy as _copy
import logging
import sys
from collections.abc import Iterator
from random import Random
from typing import Any, Generic, Optional, TextIO, TypeVar

from .errors import InvalidLevelError, InvalidProbabilityError
from .leveling import Leveler, geometric_level

__all__ = [
    "DEFAULT_MAX_LEVEL",
    "DEFAULT_PROBABILITY",
    "Node",
    "SkipList",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_LEVEL = 5
DEFAULT_PROBABILITY = 0.5


class Node(Generic[T]):
    """A value plus one forward link per level it participates in."""

    __slots__ = ("value", "forward")

    def __init__(self, value: Optional[T], level: int):
        self.value = value
        self.forward: list[Optional[Node[T]]] = [None] * level

    @property
    def level(self) -> int:
        return len(self.forward)

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self.value!r}@{self.level}>"


class SkipList(Generic[T]):
    """Sorted multiset backed by a skip list.

    Parameters
    ----------
    max_level: int
        Ceiling on the number of levels any node (and the head) spans.
    probability: float
        Chance of promoting a new node one more level, in ``(0, 1)``.
    seed: int | None
        Seed for the private random source, for reproducible layouts.
    leveler: Leveler | None
        Level selection strategy, see :mod:`pyskip.leveling`.

    Nodes handed out by :meth:`search` are read-only views into the list and
    must not be held across a mutating call.
    """

    def __init__(
        self,
        max_level: int = DEFAULT_MAX_LEVEL,
        probability: float = DEFAULT_PROBABILITY,
        *,
        seed: Optional[int] = None,
        leveler: Optional[Leveler] = None,
    ):
        if isinstance(max_level, bool) or not isinstance(max_level, int) or max_level < 1:
            raise InvalidLevelError(f"max_level must be an int >= 1, got {max_level!r}")
        if not 0.0 < probability < 1.0:
            raise InvalidProbabilityError(f"probability must be in (0, 1), got {probability!r}")
        self._max_level = max_level
        self._probability = float(probability)
        self._leveler: Leveler = leveler or geometric_level
        self._rng = Random(seed)
        self._reset()

    # ---------------------------------------------------------------------
    # Configuration & state
    # ---------------------------------------------------------------------
    @property
    def max_level(self) -> int:
        return self._max_level

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def level(self) -> int:
        """Highest level currently in use."""
        return self._level

    @property
    def head(self) -> Node[T]:
        return self._head

    def empty(self) -> bool:
        return self._level == 1 and self._head.forward[0] is None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.empty()

    def __contains__(self, value: T) -> bool:
        return self.search(value) is not None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_level={self._max_level}, "
            f"probability={self._probability}, level={self._level}, size={self._size})"
        )

    # ---------------------------------------------------------------------
    # Mutation API
    # ---------------------------------------------------------------------
    def insert(self, value: T) -> None:
        """Add `value`, keeping any equal values already present."""
        update = self._find_update_nodes(value)
        lvl = self._random_level()
        if lvl > self._level:
            for i in range(self._level, lvl):
                update[i] = self._head
            logger.debug("level raised %d -> %d", self._level, lvl)
            self._level = lvl
        new_node: Node[T] = Node(value, lvl)
        for i in range(lvl):
            new_node.forward[i] = update[i].forward[i]
            update[i].forward[i] = new_node
        self._size += 1

    def remove(self, value: T) -> None:
        """Unlink one node equal to `value`; absent values are ignored."""
        update = self._find_update_nodes(value)
        target = update[0].forward[0]
        if target is None or target.value != value:
            return
        for i in range(self._level):
            if update[i].forward[i] is not target:
                break
            update[i].forward[i] = target.forward[i]
        self._size -= 1
        top = self._level
        while self._level > 1 and self._head.forward[self._level - 1] is None:
            self._level -= 1
        if self._level != top:
            logger.debug("level shrunk %d -> %d", top, self._level)

    def clear(self) -> None:
        if self._size:
            logger.debug("clearing %d nodes", self._size)
        self._reset()

    # ---------------------------------------------------------------------
    # Query API
    # ---------------------------------------------------------------------
    def search(self, value: T) -> Optional[Node[T]]:
        """Return the first node equal to `value`, or ``None``."""
        x = self._head
        for i in reversed(range(self._level)):
            while (nxt := x.forward[i]) is not None and nxt.value < value:  # type: ignore[operator]
                x = nxt
        x = x.forward[0]  # type: ignore[assignment]
        if x is not None and x.value == value:
            return x
        return None

    # ---------------------------------------------------------------------
    # Copy & move
    # ---------------------------------------------------------------------
    def copy(self) -> SkipList[T]:
        """Value copy: same configuration and values, freshly drawn levels."""
        clone = self._blank_like()
        for value in self._values():
            clone.insert(value)
        logger.debug("copied %d values", clone._size)
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> SkipList[T]:
        clone = self._blank_like()
        memo[id(self)] = clone
        for value in self._values():
            clone.insert(_copy.deepcopy(value, memo))
        return clone

    def assign(self, other: SkipList[T]) -> SkipList[T]:
        """Replace this list's contents with a value copy of `other`."""
        if not isinstance(other, SkipList):
            raise TypeError(f"cannot assign from {type(other).__name__}")
        if other is self:
            return self
        values = list(other._values())
        self._max_level = other._max_level
        self._probability = other._probability
        self._leveler = other._leveler
        self._reset()
        for value in values:
            self.insert(value)
        return self

    def move(self) -> SkipList[T]:
        """Hand every node to a new list and leave this one empty."""
        target = self._blank_like()
        target._take(self)
        return target

    def move_from(self, other: SkipList[T]) -> SkipList[T]:
        """Drop this list's nodes and take over `other`'s, emptying `other`."""
        if not isinstance(other, SkipList):
            raise TypeError(f"cannot move from {type(other).__name__}")
        if other is not self:
            self._take(other)
        return self

    # ---------------------------------------------------------------------
    # Diagnostics
    # ---------------------------------------------------------------------
    def levels(self) -> list[list[T]]:
        """Values along each active level's chain, top level first."""
        out: list[list[T]] = []
        for i in reversed(range(self._level)):
            chain: list[T] = []
            x = self._head.forward[i]
            while x is not None:
                chain.append(x.value)  # type: ignore[arg-type]
                x = x.forward[i]
            out.append(chain)
        return out

    def dump(self) -> str:
        lines = []
        for i, chain in zip(reversed(range(self._level)), self.levels()):
            lines.append(f"Level {i}: " + "".join(f"{v} -> " for v in chain) + "None")
        return "\n".join(lines)

    def display(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        print(self.dump(), file=out)
        print(file=out)

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    def _reset(self) -> None:
        self._head: Node[T] = Node(None, self._max_level)
        self._level = 1
        self._size = 0

    def _blank_like(self) -> SkipList[T]:
        return type(self)(self._max_level, self._probability, leveler=self._leveler)

    def _take(self, other: SkipList[T]) -> None:
        self._max_level = other._max_level
        self._probability = other._probability
        self._leveler = other._leveler
        self._rng = other._rng
        self._head = other._head
        self._level = other._level
        self._size = other._size
        logger.debug("moved %d nodes", self._size)
        other._rng = Random()
        other._reset()

    def _random_level(self) -> int:
        lvl = self._leveler(self._max_level, self._probability, self._rng)
        if not 1 <= lvl <= self._max_level:
            raise InvalidLevelError(f"leveler returned {lvl!r}, expected 1..{self._max_level}")
        return lvl

    def _find_update_nodes(self, value: T) -> list[Node[T]]:
        """Last node before `value` on every level, head for inactive ones."""
        update: list[Node[T]] = [self._head] * self._max_level
        x = self._head
        for i in reversed(range(self._level)):
            while (nxt := x.forward[i]) is not None and nxt.value < value:  # type: ignore[operator]
                x = nxt
            update[i] = x
        return update

    def _values(self) -> Iterator[T]:
        x = self._head.forward[0]
        while x is not None:
            yield x.value  # type: ignore[misc]
            x = x.forward[0]
