from swissround.models.player import Competitor
from swissround.models.tournament import Pairing, RoundData
from swissround.standings import (
    rank_for_pairing,
    rank_standings,
    recompute_score,
    recompute_scores,
    standings_table,
)


def _competitor(cid, score=0.0, rating=1200, active=True):
    return Competitor(
        name=cid.upper(), rating=rating, competitor_id=cid, score=score, is_active=active
    )


def _game(white, black, result=None, round_number=1):
    pairing = Pairing.game(round_number, white, white.upper(), black, black.upper())
    pairing.result = result
    return pairing


def test_rank_for_pairing_drops_absent_and_sorts():
    competitors = [
        _competitor("low", score=0.5, rating=2000),
        _competitor("absent", score=3.0, rating=2400, active=False),
        _competitor("top", score=2.0, rating=1100),
        _competitor("tied_high", score=1.0, rating=1600),
        _competitor("tied_low", score=1.0, rating=1500),
    ]

    ranked = rank_for_pairing(competitors)

    assert [c.id for c in ranked] == ["top", "tied_high", "tied_low", "low"]


def test_full_ties_keep_input_order():
    competitors = [_competitor(cid, score=1.0, rating=1500) for cid in "qwerty"]

    assert [c.id for c in rank_for_pairing(competitors)] == list("qwerty")


def test_rank_standings_keeps_absent_competitors():
    competitors = [
        _competitor("a", score=1.0),
        _competitor("b", score=2.0, active=False),
    ]

    assert [c.id for c in rank_standings(competitors)] == ["b", "a"]


def test_recompute_score_counts_wins_draws_and_byes():
    pairings = [
        _game("a", "b", "1-0", 1),
        _game("c", "a", "0.5-0.5", 2),
        _game("a", "d", None, 3),
        Pairing.bye(4, "a", "A"),
        _game("e", "a", "1-0", 5),
        _game("f", "a", "0-1", 6),
    ]

    assert recompute_score("a", pairings) == 3.5
    assert recompute_score("b", pairings) == 0.0
    assert recompute_score("c", pairings) == 0.5
    assert recompute_score("e", pairings) == 1.0
    assert recompute_score("nobody", pairings) == 0.0


def test_recompute_is_idempotent():
    pairings = [_game("a", "b", "1-0"), Pairing.bye(1, "c", "C")]
    competitors = [_competitor("a"), _competitor("b"), _competitor("c")]

    first = recompute_scores(competitors, pairings)
    second = recompute_scores(competitors, pairings)

    assert first == second == {"a": 1.0, "b": 0.0, "c": 1.0}
    assert [c.score for c in competitors] == [1.0, 0.0, 1.0]


def test_draw_adds_half_point_to_both_sides():
    pairings = [_game("a", "b", "1-0", 1), _game("b", "a", None, 2)]
    before_a = recompute_score("a", pairings)
    before_b = recompute_score("b", pairings)

    pairings[1].result = "0.5-0.5"

    assert recompute_score("a", pairings) == before_a + 0.5
    assert recompute_score("b", pairings) == before_b + 0.5


def test_standings_table_counts_games_and_includes_absent():
    a = _competitor("a", score=1.5, rating=1400)
    b = _competitor("b", score=0.5, rating=1300, active=False)
    c = _competitor("c", score=1.0, rating=1200)
    rounds = [
        RoundData(1, [_game("a", "b", "1-0", 1), Pairing.bye(1, "c", "C")]),
        RoundData(2, [_game("a", "c", "0.5-0.5", 2)]),
    ]

    rows = standings_table([a, b, c], rounds)

    assert [(r.rank, r.competitor_id, r.games_played) for r in rows] == [
        (1, "a", 2),
        (2, "c", 2),
        (3, "b", 1),
    ]
    assert rows[2].is_active is False
