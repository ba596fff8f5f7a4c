"""Abbreviation of overly long words."""

from __future__ import annotations

import argparse
import sys

MAX_LENGTH = 10


def abbreviate(word: str) -> str:
    """Shorten words longer than 10 characters to first letter, count, last letter."""
    if len(word) <= MAX_LENGTH:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many words from stdin; print each abbreviated."""
    parser = argparse.ArgumentParser(
        description="Abbreviate words longer than ten characters read from stdin."
    )
    parser.parse_args(argv)

    print("Enter the value of n:", end="")
    tokens = sys.stdin.read().split()
    if not tokens:
        raise ValueError("expected the number of words")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid word count: {tokens[0]!r}") from None
    for word in tokens[1:1 + max(count, 0)]:
        print(abbreviate(word))
    return 0


if __name__ == "__main__":
    sys.exit(main())