"""Longest time a countdown can last when each tool adds capped time."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


def max_time(a: int, b: int, increments: Iterable[int]) -> int:
    """Return the longest countdown starting at b, capped at a, using every increment.

    Each tool is applied when the timer reads 1, so it adds at most a - 1.
    """
    return b + sum(min(a - 1, step) for step in increments)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the longest time for each."""
    argparse.ArgumentParser(
        prog="timer",
        description="Print the longest a capped countdown can last with every tool.",
    ).parse_args(argv)
    numbers = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(numbers)):
        a, b, count = next(numbers), next(numbers), next(numbers)
        increments = [next(numbers) for _ in range(count)]
        print(max_time(a, b, increments))
    return 0


if __name__ == "__main__":
    sys.exit(main())