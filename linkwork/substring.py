"""Length of the longest substring without repeated characters."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_TEXT = "abcabcbb"


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    seen: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in seen:
            seen.discard(s[left])
            left += 1
        seen.add(char)
        best = max(best, right - left + 1)
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Print the longest unique-substring length for each given text."""
    parser = argparse.ArgumentParser(
        description="Length of the longest substring without repeating characters."
    )
    parser.add_argument("texts", nargs="*", help=f"texts to examine (default: {DEFAULT_TEXT!r})")
    args = parser.parse_args(argv)
    for text in args.texts or [DEFAULT_TEXT]:
        result = longest_unique_substring(text)
        print(f"Length of the longest substring without repeating characters: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())