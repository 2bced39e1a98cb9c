"""Pairing data class."""

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
from typing import Any, Dict, Optional

from swissround.constants import (
    BYE_NAME,
    BYE_RESULT,
    BYE_SCORE,
    LOSS_SCORE,
    RESULT_POINTS,
)
from swissround.type_hints import MaybeResult
from swissround.utils import generate_id


@dataclass
class Pairing:
    """A single board in a round, or a bye.

    Attributes
    ----------
    id : str
        Unique pairing identifier.
    round_number : int
        Round this pairing belongs to (1-indexed).
    white_id : str
        ID of the first competitor (the side with the move).
    black_id : str or None
        ID of the second competitor, or None for a bye.
    white_name : str
        First competitor's name at the time the round was generated.
    black_name : str
        Second competitor's name at generation time, ``"BYE"`` for a bye.
    result : str or None
        "1-0", "0.5-0.5", "0-1", or None while the game is unfinished.
    """

    id: str
    round_number: int
    white_id: str
    black_id: Optional[str]
    white_name: str
    black_name: str
    result: MaybeResult = None

    @classmethod
    def game(
        cls,
        round_number: int,
        white_id: str,
        white_name: str,
        black_id: str,
        black_name: str,
    ) -> "Pairing":
        """Create an unplayed game between two competitors."""
        return cls(
            id=generate_id("pairing"),
            round_number=round_number,
            white_id=white_id,
            black_id=black_id,
            white_name=white_name,
            black_name=black_name,
        )

    @classmethod
    def bye(cls, round_number: int, competitor_id: str, name: str) -> "Pairing":
        """Create a bye; its result is fixed to a first-competitor win."""
        return cls(
            id=generate_id("bye"),
            round_number=round_number,
            white_id=competitor_id,
            black_id=None,
            white_name=name,
            black_name=BYE_NAME,
            result=BYE_RESULT,
        )

    @property
    def is_bye(self) -> bool:
        return self.black_id is None

    def involves(self, competitor_id: str) -> bool:
        """Check whether a competitor plays in this pairing."""
        return competitor_id in (self.white_id, self.black_id)

    def points_for(self, competitor_id: str) -> float:
        """Points this pairing contributes to a competitor's score."""
        if self.is_bye:
            return BYE_SCORE if competitor_id == self.white_id else LOSS_SCORE
        if self.result is None or self.result not in RESULT_POINTS:
            return LOSS_SCORE
        white_points, black_points = RESULT_POINTS[self.result]
        if competitor_id == self.white_id:
            return white_points
        if self.black_id is not None and competitor_id == self.black_id:
            return black_points
        return LOSS_SCORE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "white_id": self.white_id,
            "black_id": self.black_id,
            "white_name": self.white_name,
            "black_name": self.black_name,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        return cls(
            id=data["id"],
            round_number=data["round_number"],
            white_id=data["white_id"],
            black_id=data.get("black_id"),
            white_name=data.get("white_name", ""),
            black_name=data.get("black_name", BYE_NAME),
            result=data.get("result"),
        )
