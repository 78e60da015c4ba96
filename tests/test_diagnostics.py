"""Diagnostic dump, logging and the demo harness."""
import io
import logging

from pyskip import SkipList
from pyskip.__main__ import main


def _stacked():
    heights = iter([1, 3, 2, 1])
    sl = SkipList[int](4, 0.5, leveler=lambda m, p, rng: next(heights))
    for v in (3, 6, 7, 9):
        sl.insert(v)
    return sl


def test_levels_top_first():
    assert _stacked().levels() == [[6], [6, 7], [3, 6, 7, 9]]


def test_dump_format():
    assert _stacked().dump() == (
        "Level 2: 6 -> None\n"
        "Level 1: 6 -> 7 -> None\n"
        "Level 0: 3 -> 6 -> 7 -> 9 -> None"
    )


def test_dump_empty():
    assert SkipList().dump() == "Level 0: None"


def test_display_writes_blank_line():
    buf = io.StringIO()
    sl = _stacked()
    sl.display(buf)
    assert buf.getvalue() == sl.dump() + "\n\n"


def test_diagnostics_do_not_mutate():
    sl = _stacked()
    before = (sl.level, len(sl), sl.levels())
    sl.dump()
    sl.display(io.StringIO())
    assert (sl.level, len(sl), sl.levels()) == before


def test_repr():
    assert repr(_stacked()) == "SkipList(max_level=4, probability=0.5, level=3, size=4)"


def test_level_changes_are_logged(caplog):
    """Growth and shrink of the list level are logged at debug."""
    caplog.set_level(logging.DEBUG, logger="pyskip")
    sl = _stacked()
    sl.remove(6)
    messages = [r.getMessage() for r in caplog.records]
    assert "level raised 1 -> 3" in messages
    assert "level shrunk 3 -> 2" in messages


def test_demo_harness(capsys):
    """The demo walks both scenarios and ends successfully."""
    assert main(["--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert "After removing 6:" in out
    assert "Level 0: 3 -> 7 -> 9 -> 12 -> None" in out
    assert "Level 0: 2 -> 3 -> 4 -> 5 -> 6 -> 7 -> 8 -> 9 -> None" in out
    assert out.rstrip().endswith("All checks passed!")
