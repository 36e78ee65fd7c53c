"""One more than the longest run of equal adjacent characters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import groupby


def required_length(s: str) -> int:
    """Return the length of the longest run of equal characters in s, plus one."""
    return max((sum(1 for _ in group) for _, group in groupby(s)), default=0) + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the required length for each."""
    argparse.ArgumentParser(
        prog="run-length",
        description="Print one more than the longest run of equal characters.",
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    for _ in range(int(next(tokens))):
        next(tokens)  # declared length; the string carries its own
        print(required_length(next(tokens)))
    return 0


if __name__ == "__main__":
    sys.exit(main())