"""Pattern search with the Z algorithm, line by line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

DEFAULT_FILE = "KingJamesBibleProjGutenberg.txt"
SEPARATOR = "$"


def z_array(text: str) -> list[int]:
    """Return the Z array of ``text``; entry 0 is always 0."""
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i > right:
            left = right = i
            while right < n and text[right - left] == text[right]:
                right += 1
            z[i] = right - left
            right -= 1
        else:
            k = i - left
            if z[k] < right - i + 1:
                z[i] = z[k]
            else:
                left = i
                while right < n and text[right - left] == text[right]:
                    right += 1
                z[i] = right - left
                right -= 1
    return z


def find_all(text: str, pattern: str) -> list[int]:
    """Return every offset in ``text`` where ``pattern`` starts, overlaps included."""
    m = len(pattern)
    z = z_array(pattern + SEPARATOR + text)
    return [i - m - 1 for i, length in enumerate(z) if length == m]


def search_lines(lines: Iterable[str], pattern: str) -> list[tuple[int, list[int]]]:
    """Return ``(line_number, offsets)`` for each line holding the pattern, numbered from 1."""
    results = []
    for number, line in enumerate(lines, start=1):
        offsets = find_all(line, pattern)
        if offsets:
            results.append((number, offsets))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Prompt for a pattern and report every line and offset where it occurs."""
    parser = argparse.ArgumentParser(description="Z-algorithm text search")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    try:
        pattern = input("Enter the search pattern: ")
    except EOFError:
        pattern = ""

    try:
        with open(args.file, encoding="latin-1", newline="") as handle:
            lines = [line.removesuffix("\n") for line in handle]
    except OSError:
        print(f"Error: Could not open file '{args.file}'.", file=sys.stderr)
        return 1

    results = search_lines(lines, pattern)
    if not results:
        print("Pattern not found in the text.")
    for number, offsets in results:
        listed = "".join(f"{offset} " for offset in offsets)
        print(f"Pattern found on line {number} at offsets: {listed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())