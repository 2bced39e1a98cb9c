"""Storage backend interface for tournaments.

Round generation and result entry read and write tournaments through this
interface. Implementations must make ``lock`` exclusive per tournament so
that two "pair next round" requests, or a result write and the score
recomputation that follows it, cannot interleave.
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

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import List, Optional

from swissround.models.player import Competitor
from swissround.models.tournament import Pairing, RoundData, Tournament, TournamentConfig


class TournamentStore(ABC):
    """Create/read/update/delete operations keyed by tournament ID."""

    # ========== Tournaments ==========

    @abstractmethod
    def create_tournament(self, config: TournamentConfig) -> Tournament:
        """Create and store a new, empty tournament."""

    @abstractmethod
    def get_tournament(self, tournament_id: str) -> Tournament:
        """Return a tournament or raise TournamentNotFoundException."""

    @abstractmethod
    def list_tournaments(self) -> List[Tournament]:
        """Return every stored tournament."""

    @abstractmethod
    def delete_tournament(self, tournament_id: str) -> None:
        """Delete a tournament and everything it owns."""

    @abstractmethod
    def lock(self, tournament_id: str) -> AbstractContextManager:
        """Exclusive, re-entrant lock scoped to one tournament."""

    # ========== Competitors ==========

    @abstractmethod
    def add_competitor(self, tournament_id: str, competitor: Competitor) -> Competitor:
        """Register a competitor."""

    @abstractmethod
    def get_competitor(self, tournament_id: str, competitor_id: str) -> Competitor:
        """Return a competitor or raise CompetitorNotFoundException."""

    @abstractmethod
    def list_competitors(self, tournament_id: str) -> List[Competitor]:
        """Return every competitor in registration order."""

    @abstractmethod
    def delete_competitor(self, tournament_id: str, competitor_id: str) -> Competitor:
        """Delete a competitor and every pairing that references it."""

    # ========== Rounds ==========

    @abstractmethod
    def list_history(self, tournament_id: str) -> List[RoundData]:
        """Return every round in sequence order."""

    @abstractmethod
    def next_round_number(self, tournament_id: str) -> int:
        """Return the next unused round number.

        Raises NoRoundNumberAvailableException once ``max_rounds`` is reached.
        """

    @abstractmethod
    def save_round(self, tournament_id: str, round_data: RoundData) -> RoundData:
        """Persist a freshly generated round."""

    @abstractmethod
    def delete_round(self, tournament_id: str, round_number: int) -> RoundData:
        """Delete a round together with its pairings."""

    # ========== Pairings ==========

    @abstractmethod
    def find_pairing(self, tournament_id: str, pairing_id: str) -> Optional[Pairing]:
        """Return a pairing by ID, or None."""

    @abstractmethod
    def set_pairing_result(
        self, tournament_id: str, pairing_id: str, result: Optional[str]
    ) -> Pairing:
        """Store a pairing's result (None clears it)."""
