import pytest

from swissround.testing.rtg import (
    RandomTournamentGenerator,
    RatingDistribution,
    ResultPattern,
    RTGConfig,
)


def _play(**overrides):
    settings = dict(
        num_players=11,
        num_rounds=5,
        rating_distribution=RatingDistribution.NORMAL,
        result_pattern=ResultPattern.REALISTIC,
        seed=321,
    )
    settings.update(overrides)
    return RandomTournamentGenerator(RTGConfig(**settings)).generate_complete_tournament()


@pytest.mark.parametrize("num_players", [2, 7, 12])
def test_no_duplicate_or_self_pairings(num_players):
    tournament_data = _play(num_players=num_players)

    for round_data in tournament_data["rounds"]:
        seen = set()
        for pairing in round_data.pairings:
            assert pairing.white_id != pairing.black_id
            assert pairing.white_id not in seen
            seen.add(pairing.white_id)
            if pairing.black_id is not None:
                assert pairing.black_id not in seen
                seen.add(pairing.black_id)
        assert seen == set(tournament_data["tournament"].competitors)
        byes = [p for p in round_data.pairings if p.is_bye]
        assert len(byes) == num_players % 2


def test_total_points_match_games_played():
    tournament_data = _play(result_pattern=ResultPattern.RANDOM)
    tournament = tournament_data["tournament"]

    # every finished game and every bye hands out exactly one point
    total_pairings = sum(len(r.pairings) for r in tournament.rounds)
    assert all(r.is_completed for r in tournament.rounds)
    assert sum(c.score for c in tournament.competitors.values()) == total_pairings


def test_absences_are_respected():
    tournament_data = _play(num_players=10, absence_rate=0.3, seed=7)

    for round_data in tournament_data["rounds"]:
        paired = {p.white_id for p in round_data.pairings} | {
            p.black_id for p in round_data.pairings if p.black_id is not None
        }
        assert len(paired) >= 2
        byes = [p for p in round_data.pairings if p.is_bye]
        assert len(byes) == len(paired) % 2


def test_standings_are_sorted():
    rows = _play(result_pattern=ResultPattern.PREDICTABLE)["standings"]

    keys = [(-r.score, -r.rating) for r in rows]
    assert keys == sorted(keys)
    assert [r.rank for r in rows] == list(range(1, len(rows) + 1))


def test_same_seed_same_pairings():
    def names(data):
        return [
            [(p.white_name, p.black_name) for p in r.pairings] for r in data["rounds"]
        ]

    assert names(_play(seed=99)) == names(_play(seed=99))
