"""In-memory tournament storage.

Used by the simulator, the test CLI and the test suite. A production
deployment would put a database behind the same interface.
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

import threading
from typing import Dict, List, Optional

from swissround.exceptions import (
    CompetitorNotFoundException,
    NoRoundNumberAvailableException,
    PairingNotFoundException,
    RoundNotFoundException,
    TournamentNotFoundException,
)
from swissround.models.player import Competitor
from swissround.models.tournament import Pairing, RoundData, Tournament, TournamentConfig
from swissround.storage.base import TournamentStore
from swissround.utils import setup_logger

logger = setup_logger(__name__)


class InMemoryTournamentStore(TournamentStore):
    """Keeps tournaments in a dictionary, one re-entrant lock per tournament."""

    def __init__(self) -> None:
        self._tournaments: Dict[str, Tournament] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    # ========== Tournaments ==========

    def create_tournament(self, config: TournamentConfig) -> Tournament:
        tournament = Tournament(config)
        self.add_tournament(tournament)
        return tournament

    def add_tournament(self, tournament: Tournament) -> Tournament:
        """Store an existing Tournament object, e.g. one loaded from JSON."""
        with self._registry_lock:
            self._tournaments[tournament.id] = tournament
            self._locks.setdefault(tournament.id, threading.RLock())
        logger.info("Stored tournament %s (%s)", tournament.name, tournament.id)
        return tournament

    def get_tournament(self, tournament_id: str) -> Tournament:
        tournament = self._tournaments.get(tournament_id)
        if tournament is None:
            raise TournamentNotFoundException(f"Tournament not found: {tournament_id}")
        return tournament

    def list_tournaments(self) -> List[Tournament]:
        return list(self._tournaments.values())

    def delete_tournament(self, tournament_id: str) -> None:
        with self._registry_lock:
            if self._tournaments.pop(tournament_id, None) is None:
                raise TournamentNotFoundException(
                    f"Tournament not found: {tournament_id}"
                )
            self._locks.pop(tournament_id, None)
        logger.info("Deleted tournament %s", tournament_id)

    def lock(self, tournament_id: str) -> threading.RLock:
        self.get_tournament(tournament_id)
        with self._registry_lock:
            return self._locks.setdefault(tournament_id, threading.RLock())

    # ========== Competitors ==========

    def add_competitor(self, tournament_id: str, competitor: Competitor) -> Competitor:
        tournament = self.get_tournament(tournament_id)
        tournament.competitors[competitor.id] = competitor
        return competitor

    def get_competitor(self, tournament_id: str, competitor_id: str) -> Competitor:
        competitor = self.get_tournament(tournament_id).competitors.get(competitor_id)
        if competitor is None:
            raise CompetitorNotFoundException(f"Competitor not found: {competitor_id}")
        return competitor

    def list_competitors(self, tournament_id: str) -> List[Competitor]:
        return list(self.get_tournament(tournament_id).competitors.values())

    def delete_competitor(self, tournament_id: str, competitor_id: str) -> Competitor:
        tournament = self.get_tournament(tournament_id)
        competitor = tournament.competitors.pop(competitor_id, None)
        if competitor is None:
            raise CompetitorNotFoundException(f"Competitor not found: {competitor_id}")

        removed = 0
        for round_data in tournament.rounds:
            kept = [p for p in round_data.pairings if not p.involves(competitor_id)]
            removed += len(round_data.pairings) - len(kept)
            round_data.pairings = kept

        logger.info(
            "Deleted competitor %s and %d pairing(s) referencing them",
            competitor.name,
            removed,
        )
        return competitor

    # ========== Rounds ==========

    def list_history(self, tournament_id: str) -> List[RoundData]:
        return list(self.get_tournament(tournament_id).rounds)

    def next_round_number(self, tournament_id: str) -> int:
        tournament = self.get_tournament(tournament_id)
        if tournament.round_count >= tournament.config.max_rounds:
            raise NoRoundNumberAvailableException(tournament.config.max_rounds)
        return tournament.round_count + 1

    def save_round(self, tournament_id: str, round_data: RoundData) -> RoundData:
        tournament = self.get_tournament(tournament_id)
        expected = tournament.round_count + 1
        if round_data.round_number != expected:
            raise ValueError(
                f"Round {round_data.round_number} out of sequence, expected {expected}"
            )
        tournament.rounds.append(round_data)
        return round_data

    def delete_round(self, tournament_id: str, round_number: int) -> RoundData:
        """Delete a round and renumber the later ones so numbering stays gapless."""
        tournament = self.get_tournament(tournament_id)
        round_data = tournament.get_round(round_number)
        if round_data is None:
            raise RoundNotFoundException(f"Round {round_number} does not exist")

        tournament.rounds.remove(round_data)
        for later in tournament.rounds:
            if later.round_number > round_number:
                later.round_number -= 1
                for pairing in later.pairings:
                    pairing.round_number = later.round_number
        return round_data

    # ========== Pairings ==========

    def find_pairing(self, tournament_id: str, pairing_id: str) -> Optional[Pairing]:
        return self.get_tournament(tournament_id).find_pairing(pairing_id)

    def set_pairing_result(
        self, tournament_id: str, pairing_id: str, result: Optional[str]
    ) -> Pairing:
        pairing = self.find_pairing(tournament_id, pairing_id)
        if pairing is None:
            raise PairingNotFoundException(f"Pairing not found: {pairing_id}")
        pairing.result = result
        return pairing
