"""How far each value can climb by absorbing every value not larger than its running sum."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_right
from collections.abc import Iterator, Sequence
from itertools import accumulate
from typing import TextIO


def max_reach(values: Sequence[int]) -> list[int]:
    """Return, for each value in input order, the furthest sorted index it can reach.

    Starting from a value, everything up to its position in sorted order is
    absorbed; the running sum then absorbs every value not exceeding it,
    repeating until nothing new is reached.
    """
    ordered = sorted(values)
    prefix = list(accumulate(ordered))
    reach: dict[int, int] = {}
    for start, value in enumerate(ordered):
        position = start
        while True:
            previous = position
            found = bisect_right(ordered, prefix[position]) - 1
            if found >= 0:
                position = found
            if position == previous:
                break
        reach[value] = position
    return [reach[value] for value in values]


def _read_ints(stream: TextIO) -> Iterator[int]:
    return iter(map(int, stream.read().split()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the reach of every value."""
    argparse.ArgumentParser(
        prog="prefix-reach",
        description="For each value, print the furthest sorted index it can absorb.",
    ).parse_args(argv)
    numbers = _read_ints(sys.stdin)
    for _ in range(next(numbers)):
        count = next(numbers)
        values = [next(numbers) for _ in range(count)]
        print(" ".join(map(str, max_reach(values))))
    return 0


if __name__ == "__main__":
    sys.exit(main())