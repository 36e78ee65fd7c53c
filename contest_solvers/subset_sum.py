"""Decide whether k distinct numbers from 1..n can add up to x."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def _triangle(m: int) -> int:
    return m * (m + 1) // 2


def sum_achievable(n: int, k: int, x: int) -> bool:
    """Return whether some k distinct integers in 1..n sum to exactly x."""
    smallest = _triangle(k)
    largest = _triangle(n) - _triangle(n - k)
    return smallest <= x <= largest


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO for each."""
    argparse.ArgumentParser(
        prog="subset-sum",
        description="Tell whether k distinct numbers from 1..n can sum to x.",
    ).parse_args(argv)
    numbers = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(numbers)):
        n, k, x = next(numbers), next(numbers), next(numbers)
        print("YES" if sum_achievable(n, k, x) else "NO")
    return 0


if __name__ == "__main__":
    sys.exit(main())