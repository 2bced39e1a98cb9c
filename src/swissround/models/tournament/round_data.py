"""Data models for tournament round."""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from swissround.models.tournament.pairing import Pairing
from swissround.utils import generate_id


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : list of Pairing
        Pairings in the order the engine produced them.
    id : str
        Unique round identifier.
    created_at : datetime
        When the round was generated (UTC).
    """

    round_number: int
    pairings: List[Pairing] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("round"))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_completed(self) -> bool:
        """True once every pairing in the round has a result."""
        return bool(self.pairings) and all(
            p.result is not None for p in self.pairings
        )

    @property
    def bye(self) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.is_bye:
                return pairing
        return None

    def get_pairing(self, pairing_id: str) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.id == pairing_id:
                return pairing
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "pairings": [p.to_dict() for p in self.pairings],
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        round_data = cls(
            round_number=data["round_number"],
            pairings=[Pairing.from_dict(p) for p in data.get("pairings", [])],
        )
        if data.get("id"):
            round_data.id = data["id"]
        if data.get("created_at"):
            round_data.created_at = isoparse(data["created_at"])
        return round_data
