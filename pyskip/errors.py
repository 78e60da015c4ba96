"""Exceptions raised by :mod:`pyskip`.

Every error derives from :class:`SkipListError`. Configuration errors also
derive from :class:`ValueError` so callers validating user input can catch
them the usual way.
"""
from __future__ import annotations

__all__ = [
    "SkipListError",
    "InvalidLevelError",
    "InvalidProbabilityError",
]


class SkipListError(Exception):
    """Base class for all skip-list errors."""


class InvalidLevelError(SkipListError, ValueError):
    """Raised for a bad ``max_level`` or an out-of-range node level."""


class InvalidProbabilityError(SkipListError, ValueError):
    """Raised when the promotion probability is outside ``(0, 1)``."""
