"""Data models for pairing history."""

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
from typing import Any, Dict, Iterable, Set

from swissround.models.tournament.round_data import RoundData


@dataclass
class PairingHistory:
    """Tracks which competitors have already met.

    Attributes
    ----------
    previous_matches : set of frozenset
        Unordered pairs of competitor IDs that have played each other in any
        round. Byes are not recorded.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    @classmethod
    def from_rounds(cls, rounds: Iterable[RoundData]) -> "PairingHistory":
        """Build the history set from every prior round's pairings."""
        history = cls()
        for round_data in rounds:
            for pairing in round_data.pairings:
                if not pairing.is_bye:
                    history.add_pairing(pairing.white_id, pairing.black_id)
        return history

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two competitors have been paired."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two competitors have previously played each other."""
        return frozenset({player1_id, player2_id}) in self.previous_matches

    def __len__(self) -> int:
        return len(self.previous_matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "previous_matches": sorted(sorted(pair) for pair in self.previous_matches),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingHistory":
        """Deserialize pairing history from dictionary."""
        return cls(
            previous_matches=set(
                frozenset(map(str, pair)) for pair in data.get("previous_matches", [])
            ),
        )
