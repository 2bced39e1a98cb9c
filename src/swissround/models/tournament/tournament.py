"""Tournament aggregate: configuration, competitors and rounds.

The Tournament holds state only. Round generation, result entry and score
bookkeeping live in the controllers, which work against a storage backend.
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

from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from dateutil.parser import isoparse

from swissround.models.player import Competitor
from swissround.models.tournament.pairing import Pairing
from swissround.models.tournament.pairing_history import PairingHistory
from swissround.models.tournament.round_data import RoundData
from swissround.models.tournament.tournament_config import TournamentConfig
from swissround.utils import generate_id


class Tournament:
    """A Swiss tournament's full state.

    Attributes:
        id: Unique tournament identifier
        config: Name, maximum rounds and time control
        competitors: Competitors keyed by ID, in registration order
        rounds: Rounds in sequence order
        created_at: Creation timestamp (UTC)
    """

    def __init__(
        self,
        config: TournamentConfig,
        tournament_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> None:
        self.id: str = tournament_id or generate_id("tournament")
        self.config = config
        self.competitors: Dict[str, Competitor] = {}
        self.rounds: List[RoundData] = []
        self.created_at: datetime = created_at or datetime.now(timezone.utc)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def round_count(self) -> int:
        return len(self.rounds)

    @property
    def is_finished(self) -> bool:
        return len(self.rounds) >= self.config.max_rounds

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round, or None if it does not exist."""
        for round_data in self.rounds:
            if round_data.round_number == round_number:
                return round_data
        return None

    def iter_pairings(self) -> Iterator[Pairing]:
        """Yield every pairing of every round in order."""
        for round_data in self.rounds:
            yield from round_data.pairings

    def find_pairing(self, pairing_id: str) -> Optional[Pairing]:
        for pairing in self.iter_pairings():
            if pairing.id == pairing_id:
                return pairing
        return None

    def pairing_history(self) -> PairingHistory:
        return PairingHistory.from_rounds(self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the tournament to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "competitors": [c.to_dict() for c in self.competitors.values()],
            "rounds": [r.to_dict() for r in self.rounds],
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize a tournament saved with ``to_dict``."""
        created_at = data.get("created_at")
        tournament = cls(
            config=TournamentConfig.from_dict(data.get("config", {})),
            tournament_id=data.get("id"),
            created_at=isoparse(created_at) if created_at else None,
        )
        for competitor_data in data.get("competitors", []):
            competitor = Competitor.from_dict(competitor_data)
            tournament.competitors[competitor.id] = competitor
        tournament.rounds = sorted(
            (RoundData.from_dict(r) for r in data.get("rounds", [])),
            key=lambda r: r.round_number,
        )
        return tournament

    def __repr__(self) -> str:
        return (
            f"Tournament(name='{self.name}', competitors={len(self.competitors)}, "
            f"rounds={len(self.rounds)}/{self.config.max_rounds})"
        )
