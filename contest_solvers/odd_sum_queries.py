"""Answer whether replacing a range with a constant leaves an odd total."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate
from typing import TextIO


def answer_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[bool]:
    """Return, per query (l, r, k), whether setting values[l..r] to k makes the sum odd.

    Positions are 1-based and inclusive; the array itself is not modified
    between queries.
    """
    prefix = [0, *accumulate(values)]
    total = prefix[-1]
    size = len(values)
    answers = []
    for left, right, replacement in queries:
        if not 1 <= left <= right <= size:
            raise ValueError(f"range {left}..{right} is outside 1..{size}")
        removed = prefix[right] - prefix[left - 1]
        added = replacement * (right - left + 1)
        answers.append((total - removed + added) % 2 == 1)
    return answers


def _read_ints(stream: TextIO) -> Iterator[int]:
    return iter(map(int, stream.read().split()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO for each query."""
    argparse.ArgumentParser(
        prog="odd-sum-queries",
        description="Tell whether replacing a range with a constant gives an odd sum.",
    ).parse_args(argv)
    numbers = _read_ints(sys.stdin)
    for _ in range(next(numbers)):
        size, query_count = next(numbers), next(numbers)
        values = [next(numbers) for _ in range(size)]
        queries = [
            (next(numbers), next(numbers), next(numbers)) for _ in range(query_count)
        ]
        for odd in answer_queries(values, queries):
            print("YES" if odd else "NO")
    return 0


if __name__ == "__main__":
    sys.exit(main())