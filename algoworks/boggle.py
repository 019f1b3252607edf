"""Boggle word search backed by a prefix trie of upper-case words."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum


class Match(IntEnum):
    """How far a string matches the contents of a trie."""

    NONE = 0
    PREFIX = 1
    WORD = 2


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end_of_word: bool = False


def _check_letters(word: str) -> None:
    for ch in word:
        if not "A" <= ch <= "Z":
            raise ValueError(f"only letters A-Z are allowed, got {ch!r} in {word!r}")


class Trie:
    """A prefix tree over the upper-case letters A-Z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        _check_letters(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.end_of_word = True

    def search(self, word: str) -> Match:
        """Tell whether ``word`` is a stored word, a prefix of one, or neither."""
        _check_letters(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return Match.NONE
            node = child
        return Match.WORD if node.end_of_word else Match.PREFIX

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word) is Match.WORD


class Boggle:
    """A rectangular letter grid searched for words held in a trie."""

    def __init__(self, grid: Sequence[Sequence[str]], trie: Trie) -> None:
        rows = [list(row) for row in grid]
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("grid rows must all have the same length")
        self._grid = rows
        self._trie = trie

    @property
    def rows(self) -> int:
        return len(self._grid)

    @property
    def cols(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    def _neighbours(self, row: int, col: int):
        for r in range(row - 1, row + 2):
            for c in range(col - 1, col + 2):
                if 0 <= r < self.rows and 0 <= c < self.cols:
                    yield r, c

    def find_words(self) -> list[str]:
        """Return every trie word traceable through adjacent cells, in discovery order."""
        found: dict[str, None] = {}
        visited: set[tuple[int, int]] = set()
        letters: list[str] = []

        def explore(row: int, col: int) -> None:
            current = "".join(letters)
            match = self._trie.search(current)
            if match is Match.NONE:
                return
            if match is Match.WORD and current not in found:
                found[current] = None
            for cell in self._neighbours(row, col):
                if cell in visited:
                    continue
                visited.add(cell)
                letters.append(self._grid[cell[0]][cell[1]])
                explore(*cell)
                letters.pop()
                visited.discard(cell)

        for row in range(self.rows):
            for col in range(self.cols):
                visited.add((row, col))
                letters.append(self._grid[row][col])
                explore(row, col)
                letters.pop()
                visited.discard((row, col))
        return list(found)


_DEMO_GRID = ["CTAS", "DOGE", "HEAR", "LINK"]
_DEMO_WORDS = ["CAT", "DOG", "HEAR", "LINK", "CAR", "HERO", "GO", "INK", "EAGK", "LIAR"]


def main(argv: Sequence[str] | None = None) -> int:
    """Search the demonstration grid and print every word found."""
    argparse.ArgumentParser(description="Boggle word search demo").parse_args(argv)
    boggle = Boggle(_DEMO_GRID, Trie(_DEMO_WORDS))
    for word in boggle.find_words():
        print(f"Found: {word}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())