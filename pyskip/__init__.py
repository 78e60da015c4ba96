"""pyskip: a small generic skip list for Python.

The package exposes :class:`pyskip.SkipList`, an ordered multiset with
O(log n) expected insert/search/remove, while keeping the level selection
strategy pluggable so layouts can be made deterministic in tests.
"""

from __future__ import annotations

__all__ = [
    "SkipList",
    "Node",
    "SkipListError",
    "InvalidLevelError",
    "InvalidProbabilityError",
    "geometric_level",
    "fixed_level",
]

from .errors import InvalidLevelError, InvalidProbabilityError, SkipListError
from .leveling import fixed_level, geometric_level
from .skiplist import Node, SkipList
