"""Shared fixtures for the skip-list tests."""
import pytest

from pyskip import SkipList


@pytest.fixture
def populated():
    """List holding 3, 5 and 7."""
    sl = SkipList[int](seed=7)
    for v in (3, 5, 7):
        sl.insert(v)
    return sl
