"""Fewest floor-halvings that make a sequence strictly increasing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def min_halvings(values: Sequence[int]) -> int | None:
    """Return the fewest halvings making values strictly increasing, or None if impossible.

    Elements are processed from the right; each is halved until it falls
    below its (already adjusted) successor.
    """
    if not values:
        return 0
    following = values[-1]
    first_offset = len(values) - 2
    total = 0
    for offset, value in enumerate(reversed(values[:-1])):
        number = value
        steps = 0
        while number > 0 and number >= following:
            number //= 2
            steps += 1
        if (number == 0 and offset != first_offset) or number == following:
            return None
        following = number
        total += steps
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the halving count or -1."""
    argparse.ArgumentParser(
        prog="halving",
        description="Print the fewest halvings that make a sequence strictly increasing.",
    ).parse_args(argv)
    numbers = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(numbers)):
        count = next(numbers)
        values = [next(numbers) for _ in range(count)]
        answer = min_halvings(values)
        print(-1 if answer is None else answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())