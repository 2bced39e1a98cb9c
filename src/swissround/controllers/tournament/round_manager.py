"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
round progression, and round deletion.
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

from typing import List, Optional

from swissround.models.tournament import Pairing, PairingHistory, RoundData
from swissround.notifications import ROUND_CREATED, ROUND_DELETED, TournamentNotifier
from swissround.pairing import create_greedy_swiss_pairings
from swissround.standings import rank_for_pairing, recompute_scores
from swissround.storage import TournamentStore
from swissround.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Allocating the next round number under the tournament lock
    - Ranking active competitors and handing them to the pairing engine
    - Persisting the new round and notifying viewers
    - Deleting rounds and recomputing scores afterwards
    """

    def __init__(
        self, store: TournamentStore, notifier: Optional[TournamentNotifier] = None
    ):
        self.store = store
        self.notifier = notifier

    def current_round(self, tournament_id: str) -> Optional[RoundData]:
        """The most recently generated round, or None before round 1."""
        rounds = self.store.list_history(tournament_id)
        return rounds[-1] if rounds else None

    def preview_next_round(self, tournament_id: str) -> List[Pairing]:
        """Compute the next round's pairings without storing them."""
        with self.store.lock(tournament_id):
            round_number = self.store.next_round_number(tournament_id)
            return self._pair(tournament_id, round_number)

    def create_next_round(self, tournament_id: str) -> RoundData:
        """Generate, store and announce the next round.

        Raises:
            NoRoundNumberAvailableException: The tournament is at max rounds
            InsufficientCompetitorsException: Fewer than two active competitors
            InternalConsistencyException: The engine could not pair everyone
        """
        with self.store.lock(tournament_id):
            round_number = self.store.next_round_number(tournament_id)
            pairings = self._pair(tournament_id, round_number)
            round_data = self.store.save_round(
                tournament_id, RoundData(round_number=round_number, pairings=pairings)
            )
            # a bye carries a result from the start
            self._recompute(tournament_id)

        logger.info(
            "Created round %d for tournament %s with %d pairing(s)",
            round_number,
            tournament_id,
            len(pairings),
        )
        self._notify(tournament_id, ROUND_CREATED, round_number)
        return round_data

    def delete_round(self, tournament_id: str, round_number: int) -> RoundData:
        """Delete a round with its pairings, then recompute every score.

        Raises:
            RoundNotFoundException: No such round
        """
        with self.store.lock(tournament_id):
            round_data = self.store.delete_round(tournament_id, round_number)
            self._recompute(tournament_id)

        logger.info("Deleted round %d of tournament %s", round_number, tournament_id)
        self._notify(tournament_id, ROUND_DELETED, round_number)
        return round_data

    def _pair(self, tournament_id: str, round_number: int) -> List[Pairing]:
        # stored scores may be stale, e.g. after loading a saved tournament
        self._recompute(tournament_id)
        ranked =rank_for_pairing(self.store.list_competitors(tournament_id))
        history = PairingHistory.from_rounds(self.store.list_history(tournament_id))
        return create_greedy_swiss_pairings(
            ranked, round_number, history.previous_matches
        )

    def _recompute(self, tournament_id: str) -> None:
        pairings = [
            p for r in self.store.list_history(tournament_id) for p in r.pairings
        ]
        recompute_scores(self.store.list_competitors(tournament_id), pairings)

    def _notify(self, tournament_id: str, kind: str, round_number: int) -> None:
        if self.notifier is not None:
            self.notifier.publish(tournament_id, kind, {"round_number": round_number})
