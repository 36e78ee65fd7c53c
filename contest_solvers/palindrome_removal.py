"""Decide whether removing exactly k characters can leave a rearrangeable palindrome."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Sequence


def can_form_palindrome(s: str, k: int) -> bool:
    """Return whether deleting exactly k characters of s lets the rest form a palindrome."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    odd = sum(1 for count in Counter(s).values() if count % 2)
    return odd <= k + 1 and k <= len(s)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO for each."""
    argparse.ArgumentParser(
        prog="palindrome-removal",
        description="Tell whether removing k characters leaves a palindrome anagram.",
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    for _ in range(int(next(tokens))):
        next(tokens)  # declared length; the string carries its own
        k = int(next(tokens))
        s = next(tokens)
        print("YES" if can_form_palindrome(s, k) else "NO")
    return 0


if __name__ == "__main__":
    sys.exit(main())