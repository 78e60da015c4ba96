"""Demo harness: ``python -m pyskip [--seed N] [-v]``."""
from __future__ import annotations

import argparse
import logging

from .skiplist import SkipList


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pyskip", description="Skip list walkthrough")
    parser.add_argument("--seed", type=int, default=None, help="Seed for level selection")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log level changes")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    basic = SkipList[int](5, 0.7, seed=args.seed)
    for v in (3, 6, 7, 9, 12):
        basic.insert(v)
    print("After insertions:")
    basic.display()
    assert 6 in basic and 8 not in basic

    basic.remove(6)
    print("After removing 6:")
    basic.display()
    assert 6 not in basic

    small = SkipList[int](4, 0.5, seed=args.seed)
    for v in range(1, 11):
        small.insert(v)
    print("Skip list with 10 elements:")
    small.display()

    small.remove(1)
    small.remove(10)
    print("After removing first and last elements:")
    small.display()

    print("All checks passed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
