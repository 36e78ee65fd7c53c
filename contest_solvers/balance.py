"""Fewest removals so the remaining values form a chain with gaps at most k."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise


def min_removals(values: Iterable[int], k: int) -> int:
    """Return how many values to drop so sorted neighbours differ by at most k."""
    ordered = sorted(values)
    if not ordered:
        return 0
    longest = run = 1
    for previous, current in pairwise(ordered):
        if current - previous > k:
            run = 1
        else:
            run += 1
        longest = max(longest, run)
    return len(ordered) - longest


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the removal count for each."""
    argparse.ArgumentParser(
        prog="balance",
        description="Print the fewest removals leaving neighbours within k.",
    ).parse_args(argv)
    numbers = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(numbers)):
        count, k = next(numbers), next(numbers)
        values = [next(numbers) for _ in range(count)]
        print(min_removals(values, k))
    return 0


if __name__ == "__main__":
    sys.exit(main())