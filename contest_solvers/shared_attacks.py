"""Count the squares from which a generalised knight forks both king and queen."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

Square = tuple[int, int]

_DIAGONALS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def _attackers(a: int, b: int, origin: Square) -> set[Square]:
    x, y = origin
    return {
        (x + dx * step_x, y + dy * step_y)
        for dx, dy in _DIAGONALS
        for step_x, step_y in ((a, b), (b, a))
    }


def count_shared_attacks(a: int, b: int, king: Square, queen: Square) -> int:
    """Return how many squares attack both pieces with an (a, b) leap."""
    return len(_attackers(a, b, king) & _attackers(a, b, queen))


def _read_ints(stream: TextIO) -> Iterator[int]:
    return iter(map(int, stream.read().split()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the shared square count for each."""
    argparse.ArgumentParser(
        prog="shared-attacks",
        description="Count squares from which an (a, b) knight forks king and queen.",
    ).parse_args(argv)
    numbers = _read_ints(sys.stdin)
    for _ in range(next(numbers)):
        a, b = next(numbers), next(numbers)
        king = (next(numbers), next(numbers))
        queen = (next(numbers), next(numbers))
        print(count_shared_attacks(a, b, king, queen))
    return 0


if __name__ == "__main__":
    sys.exit(main())