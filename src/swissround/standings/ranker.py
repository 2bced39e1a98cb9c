"""Standings and score bookkeeping.

Ranking is by score descending, then rating descending. Competitors still
tied after that keep the order they were given in (Python's sort is stable),
which makes pairing output reproducible for a fixed input order.
"""

# Swiss Round
# Copyright (C) 2025  Swiss Round developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from swissround.constants import LOSS_SCORE
from swissround.models.player import Competitor
from swissround.models.tournament import Pairing, RoundData
from swissround.type_hints import ScoreTable
from swissround.utils import setup_logger

logger = setup_logger(__name__)


def _standing_key(competitor: Competitor):
    return (-competitor.score, -competitor.rating)


def rank_standings(competitors: Iterable[Competitor]) -> List[Competitor]:
    """Order every competitor by score then rating, both descending."""
    return sorted(competitors, key=_standing_key)


def rank_for_pairing(competitors: Iterable[Competitor]) -> List[Competitor]:
    """Order the active competitors for pairing the next round.

    Inactive (absent) competitors are dropped before ranking.
    """
    active = [c for c in competitors if c.is_active]
    ranked = rank_standings(active)
    logger.debug(
        "Ranked %d active competitors for pairing: %s",
        len(ranked),
        [(c.name, c.score) for c in ranked],
    )
    return ranked


def recompute_score(competitor_id: str, pairings: Iterable[Pairing]) -> float:
    """Sum a competitor's points over every pairing of every round.

    Unfinished games count nothing. A bye counts as a win because its
    result is fixed at creation.
    """
    score = LOSS_SCORE
    for pairing in pairings:
        if pairing.result is not None and pairing.involves(competitor_id):
            score += pairing.points_for(competitor_id)
    return score


def recompute_scores(
    competitors: Iterable[Competitor], pairings: Iterable[Pairing]
) -> ScoreTable:
    """Recompute and store the score of every competitor.

    Returns:
        Mapping of competitor ID to its new score
    """
    all_pairings = list(pairings)
    scores: ScoreTable = {}
    for competitor in competitors:
        new_score = recompute_score(competitor.id, all_pairings)
        if new_score != competitor.score:
            logger.debug(
                "Score for %s: %s -> %s", competitor.name, competitor.score, new_score
            )
        competitor.score = new_score
        scores[competitor.id] = new_score
    return scores


@dataclass
class StandingRow:
    """One line of the public standings table."""

    rank: int
    competitor_id: str
    name: str
    rating: int
    score: float
    games_played: int
    is_active: bool


def standings_table(
    competitors: Iterable[Competitor], rounds: Sequence[RoundData]
) -> List[StandingRow]:
    """Build the standings table, absent competitors included.

    ``games_played`` counts every pairing the competitor appears in,
    byes and unfinished games included.
    """
    games: Dict[str, int] = {}
    for round_data in rounds:
        for pairing in round_data.pairings:
            games[pairing.white_id] = games.get(pairing.white_id, 0) + 1
            if pairing.black_id is not None:
                games[pairing.black_id] = games.get(pairing.black_id, 0) + 1

    return [
        StandingRow(
            rank=position,
            competitor_id=competitor.id,
            name=competitor.name,
            rating=competitor.rating,
            score=competitor.score,
            games_played=games.get(competitor.id, 0),
            is_active=competitor.is_active,
        )
        for position, competitor in enumerate(rank_standings(competitors), start=1)
    ]
