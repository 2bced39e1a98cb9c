"""Greedy Swiss Pairing System Implementation.

A single left-to-right sweep over the ranked competitors. Each unpaired
competitor takes the first later competitor on the same score it has not
met yet; failing that, the not-yet-met competitor with the closest score
(first one wins ties). When every remaining competitor is a rematch, the
next unpaired competitor is taken anyway. A competitor with nobody left
after it gets the round's single bye.

The result depends only on the arguments: no randomness, no shared state.
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

from typing import List, Optional, Sequence, Set, Tuple

from swissround.constants import MIN_COMPETITORS
from swissround.exceptions import (
    InsufficientCompetitorsException,
    InternalConsistencyException,
)
from swissround.models.player import Competitor
from swissround.models.tournament import Pairing
from swissround.type_hints import HistorySet
from swissround.utils import setup_logger

logger = setup_logger(__name__)


def _have_played(
    first: Competitor, second: Competitor, previous_matches: HistorySet
) -> bool:
    return frozenset({first.id, second.id}) in previous_matches


def _find_best_opponent(
    ranked: Sequence[Competitor],
    index: int,
    used: Set[int],
    previous_matches: HistorySet,
) -> Optional[int]:
    """Return the position of the best fresh opponent for ``ranked[index]``.

    An exact score match stops the scan at once. Otherwise the smallest
    score difference wins, earliest position first.
    """
    current = ranked[index]
    best_index: Optional[int] = None
    min_score_diff = float("inf")

    for j in range(index + 1, len(ranked)):
        if j in used:
            continue
        candidate = ranked[j]
        if _have_played(current, candidate, previous_matches):
            continue

        score_diff = abs(current.score - candidate.score)
        if score_diff == 0:
            return j
        if best_index is None or score_diff < min_score_diff:
            min_score_diff = score_diff
            best_index = j

    return best_index


def _find_fallback_opponent(
    ranked: Sequence[Competitor], index: int, used: Set[int]
) -> Optional[int]:
    """Return the next unused position after ``index``, history ignored."""
    for j in range(index + 1, len(ranked)):
        if j not in used:
            return j
    return None


def create_greedy_swiss_pairings(
    ranked_competitors: Sequence[Competitor],
    round_number: int,
    previous_matches: HistorySet,
) -> List[Pairing]:
    """Generate the pairings for one round.

    Args:
        ranked_competitors: Active competitors, already ranked for pairing
            (see ``swissround.standings.rank_for_pairing``)
        round_number: Sequence number of the round being paired. Allocating
            it is the caller's job and it is not checked here.
        previous_matches: Unordered pairs of competitor IDs that have met
            in any earlier round

    Returns:
        Pairings in the order they were made. The higher-ranked competitor
        of each game is first (white). A bye, if any, comes last.

    Raises:
        InsufficientCompetitorsException: Fewer than two competitors given
        InternalConsistencyException: A competitor was left without an
            opponent after the round's bye had already been issued
    """
    ranked = list(ranked_competitors)
    if len(ranked) < MIN_COMPETITORS:
        logger.warning(
            "Refusing to pair round %s with %d competitors", round_number, len(ranked)
        )
        raise InsufficientCompetitorsException(len(ranked), MIN_COMPETITORS)

    logger.info(
        "Pairing round %s for %d competitors (%d previous matches)",
        round_number,
        len(ranked),
        len(previous_matches),
    )

    pairings: List[Pairing] = []
    used: Set[int] = set()
    bye_given = False

    for i, current in enumerate(ranked):
        if i in used:
            continue

        opponent_index = _find_best_opponent(ranked, i, used, previous_matches)
        if opponent_index is None:
            opponent_index = _find_fallback_opponent(ranked, i, used)
            if opponent_index is not None:
                logger.warning(
                    "Round %s: forced rematch %s vs %s",
                    round_number,
                    current.name,
                    ranked[opponent_index].name,
                )

        if opponent_index is not None:
            opponent = ranked[opponent_index]
            pairings.append(
                Pairing.game(
                    round_number=round_number,
                    white_id=current.id,
                    white_name=current.name,
                    black_id=opponent.id,
                    black_name=opponent.name,
                )
            )
            used.add(i)
            used.add(opponent_index)
            logger.debug(
                "Round %s: %s (%s) vs %s (%s)",
                round_number,
                current.name,
                current.score,
                opponent.name,
                opponent.score,
            )
            continue

        if not bye_given:
            pairings.append(Pairing.bye(round_number, current.id, current.name))
            used.add(i)
            bye_given = True
            logger.info("Round %s: bye for %s", round_number, current.name)
            continue

        logger.error(
            "Round %s: %s has no opponent and the bye is already taken",
            round_number,
            current.name,
        )
        raise InternalConsistencyException(current.id, round_number)

    return pairings


def pairing_ids(pairings: Sequence[Pairing]) -> List[Tuple[str, Optional[str]]]:
    """(white_id, black_id) tuples for a round, handy for logging and tests."""
    return [(p.white_id, p.black_id) for p in pairings]
