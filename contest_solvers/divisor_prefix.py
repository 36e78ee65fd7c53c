"""Length of the longest run 1, 2, ..., m of consecutive divisors of n."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import count


def longest_divisor_prefix(n: int) -> int:
    """Return the largest m such that every integer in 1..m divides n (capped at n)."""
    for candidate in count(1):
        if candidate > n or n % candidate:
            return candidate - 1
    raise AssertionError("unreachable")


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the prefix length for each."""
    argparse.ArgumentParser(
        prog="divisor-prefix",
        description="Print how many of 1, 2, 3, ... in a row divide n.",
    ).parse_args(argv)
    numbers = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(numbers)):
        print(longest_divisor_prefix(next(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())