"""Gale-Shapley stable matching with a round-by-round record."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_RULE = "-" * 30


@dataclass(frozen=True)
class Round:
    """State after one round of proposals."""

    number: int
    free: tuple[int, ...]
    engagements: tuple[int | None, ...]


@dataclass(frozen=True)
class MatchResult:
    """Final engagements (acceptor index to proposer index) and every round."""

    engagements: tuple[int, ...]
    rounds: tuple[Round, ...]


def prefers(preferences: Sequence[int], candidate: int, current: int) -> bool:
    """Tell whether ``candidate`` ranks above ``current`` in ``preferences``."""
    for choice in preferences:
        if choice == candidate:
            return True
        if choice == current:
            return False
    return False


def _validate(prefs: Sequence[Sequence[int]], size: int, who: str) -> None:
    if len(prefs) != size:
        raise ValueError(f"{who} preferences must have {size} lists")
    for ranking in prefs:
        if sorted(ranking) != list(range(size)):
            raise ValueError(f"each {who} preference list must rank all {size} choices once")


def gale_shapley(
    proposer_prefs: Sequence[Sequence[int]],
    acceptor_prefs: Sequence[Sequence[int]],
) -> MatchResult:
    """Match proposers to acceptors so that no pair would rather be together."""
    size = len(proposer_prefs)
    _validate(proposer_prefs, size, "proposer")
    _validate(acceptor_prefs, size, "acceptor")

    engagements: list[int | None] = [None] * size
    free = [True] * size
    proposals = [0] * size
    free_count = size
    rounds = []
    number = 1

    while free_count > 0:
        for proposer in range(size):
            if not free[proposer]:
                continue
            acceptor = proposer_prefs[proposer][proposals[proposer]]
            proposals[proposer] += 1
            current = engagements[acceptor]
            if current is None:
                engagements[acceptor] = proposer
                free[proposer] = False
                free_count -= 1
            elif prefers(acceptor_prefs[acceptor], proposer, current):
                free[current] = True
                engagements[acceptor] = proposer
                free[proposer] = False
        rounds.append(Round(
            number=number,
            free=tuple(p for p, is_free in enumerate(free) if is_free),
            engagements=tuple(engagements),
        ))
        number += 1

    final = tuple(p for p in engagements if p is not None)
    return MatchResult(engagements=final, rounds=tuple(rounds))


def format_report(
    proposers: Sequence[str], acceptors: Sequence[str], result: MatchResult
) -> str:
    """Render the rounds and final engagements as text."""
    if len(proposers) != len(result.engagements) or len(acceptors) != len(result.engagements):
        raise ValueError("name lists must match the size of the matching")
    lines = ["Initial Proposals and Engagements", _RULE]
    for rnd in result.rounds:
        lines.append(f"Round {rnd.number}")
        lines.append("Queens proposal to:")
        lines.extend(f"    {proposers[p]}" for p in rnd.free)
        lines.append("")
        lines.append("Kings engaged to:")
        lines.extend(
            f"    {acceptors[a]} -> {proposers[p]}"
            for a, p in enumerate(rnd.engagements)
            if p is not None
        )
        lines.append(_RULE)
    lines.append("")
    lines.append("Final Engagements:")
    lines.extend(
        f"    {acceptors[a]} -> {proposers[p]}" for a, p in enumerate(result.engagements)
    )
    return "\n".join(lines)


DEMO_QUEENS = ["QS", "QH", "QD", "QC"]
DEMO_KINGS = ["KH", "KS", "KC", "KD"]
DEMO_QUEEN_PREFS = [[1, 3, 0, 2], [2, 3, 1, 0], [1, 2, 3, 0], [1, 2, 3, 0]]
DEMO_KING_PREFS = [[2, 1, 3, 0], [2, 1, 3, 0], [0, 2, 1, 3], [1, 2, 0, 3]]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration matching and print its report."""
    argparse.ArgumentParser(description="Stable marriage demo").parse_args(argv)
    result = gale_shapley(DEMO_QUEEN_PREFS, DEMO_KING_PREFS)
    print(format_report(DEMO_QUEENS, DEMO_KINGS, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())