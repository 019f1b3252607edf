import pytest

from algoworks.stable_marriage import (
    DEMO_KING_PREFS,
    DEMO_KINGS,
    DEMO_QUEEN_PREFS,
    DEMO_QUEENS,
    gale_shapley,
    format_report,
    main,
    prefers,
)


def _blocking_pairs(proposer_prefs, acceptor_prefs, engagements):
    partner_of = {p: a for a, p in enumerate(engagements)}
    blocking = []
    for proposer, ranking in enumerate(proposer_prefs):
        mine = partner_of[proposer]
        for acceptor in ranking[: ranking.index(mine)]:
            if prefers(acceptor_prefs[acceptor], proposer, engagements[acceptor]):
                blocking.append((proposer, acceptor))
    return blocking


@pytest.fixture
def demo():
    return gale_shapley(DEMO_QUEEN_PREFS, DEMO_KING_PREFS)


def test_demo_final_engagements(demo):
    assert demo.engagements == (3, 2, 1, 0)


def test_demo_round_count(demo):
    assert len(demo.rounds) == 4
    assert [r.number for r in demo.rounds] == [1, 2, 3, 4]
    assert demo.rounds[-1].free == ()


def test_demo_is_stable_and_perfect(demo):
    assert sorted(demo.engagements) == [0, 1, 2, 3]
    assert _blocking_pairs(DEMO_QUEEN_PREFS, DEMO_KING_PREFS, demo.engagements) == []


def test_last_round_matches_final(demo):
    assert demo.rounds[-1].engagements == demo.engagements


@pytest.mark.parametrize(
    "ranking, candidate, current, expected",
    [
        ([2, 1, 3, 0], 2, 1, True),
        ([2, 1, 3, 0], 0, 3, False),
        ([0, 2, 1, 3], 1, 3, True),
        ([1, 2], 5, 6, False),
    ],
)
def test_prefers(ranking, candidate, current, expected):
    assert prefers(ranking, candidate, current) is expected


def test_single_pair():
    result = gale_shapley([[0]], [[0]])
    assert result.engagements == (0,)
    assert len(result.rounds) == 1


def test_invalid_preferences_rejected():
    with pytest.raises(ValueError):
        gale_shapley([[0, 1], [1]], [[0, 1], [1, 0]])
    with pytest.raises(ValueError):
        gale_shapley([[0, 1], [1, 0]], [[0, 0], [1, 0]])
    with pytest.raises(ValueError):
        gale_shapley([[0, 1], [1, 0]], [[0, 1]])


def test_report_structure(demo):
    lines = format_report(DEMO_QUEENS, DEMO_KINGS, demo).splitlines()
    assert lines[0] == "Initial Proposals and Engagements"
    assert lines[1] == "-" * 30
    assert sum(line.startswith("Round ") for line in lines) == len(demo.rounds)
    final = lines[lines.index("Final Engagements:") + 1:]
    assert [line.split(" -> ")[0].strip() for line in final] == DEMO_KINGS
    assert sorted(line.split(" -> ")[1] for line in final) == sorted(DEMO_QUEENS)


def test_report_rejects_wrong_name_count(demo):
    with pytest.raises(ValueError):
        format_report(DEMO_QUEENS[:2], DEMO_KINGS, demo)


def test_main_prints_report(capsys, demo):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip("\n") == format_report(DEMO_QUEENS, DEMO_KINGS, demo)