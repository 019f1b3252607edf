"""Naive left-to-right substring search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

DEFAULT_FILE = "KJB.txt"
DEFAULT_PATTERN = "revolters"


def find_first(text: str, pattern: str) -> int | None:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or None."""
    width = len(pattern)
    for start in range(len(text) - width + 1):
        if all(a == b for a, b in zip(text[start:start + width], pattern)):
            return start
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Search a text file for a pattern and report where it first occurs."""
    parser = argparse.ArgumentParser(description="Brute-force substring search")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE)
    parser.add_argument("pattern", nargs="?", default=DEFAULT_PATTERN)
    args = parser.parse_args(argv)

    try:
        with open(args.file, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError:
        print("Error: Could not open the file.", file=sys.stderr)
        return 1

    index = find_first(text, args.pattern)
    if index is None:
        print("Could not find the pattern")
    else:
        print(f"Found pattern at index: {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())