"""Smallest and largest bus count for a fleet of 4- and 6-wheel buses."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def bus_count_range(n: int) -> tuple[int, int] | None:
    """Return (fewest, most) buses with n wheels in total, or None if impossible."""
    if n < 4 or n % 2:
        return None
    return -(-n // 6), n // 4


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the bus range or -1."""
    argparse.ArgumentParser(
        prog="wheel-count",
        description="Print the fewest and most 4/6-wheel buses for a wheel count.",
    ).parse_args(argv)
    numbers = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(numbers)):
        answer = bus_count_range(next(numbers))
        print(-1 if answer is None else f"{answer[0]} {answer[1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())