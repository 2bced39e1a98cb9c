"""A competitor registered in a tournament."""

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

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

from swissround.constants import DEFAULT_RATING
from swissround.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class Competitor:
    """Represents a competitor in the tournament.

    Attributes:
        id: Unique identifier within the tournament
        name: Display name
        rating: Rating (integer >= 0)
        score: Cumulative score, a non-negative multiple of 0.5
        is_active: False when the competitor sits out the next round
        email: Optional contact address
        created_at: Registration timestamp (UTC)
    """

    def __init__(
        self,
        name: str,
        rating: Optional[int] = None,
        email: Optional[str] = None,
        competitor_id: Optional[str] = None,
        score: float = 0.0,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
    ) -> None:
        self.id: str = competitor_id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.rating: int = rating if rating is not None else DEFAULT_RATING
        self.email: Optional[str] = email
        self.score: float = score
        self.is_active: bool = is_active
        self.created_at: datetime = created_at or datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competitor data to dictionary format."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "email": self.email,
            "score": self.score,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        """Create a Competitor from serialized dictionary data.

        Accepts the legacy ``disabled`` flag in place of ``is_active``.
        """
        if "is_active" in data:
            is_active = bool(data["is_active"])
        else:
            is_active = not data.get("disabled", False)

        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = isoparse(created_at)

        return cls(
            name=data["name"],
            rating=data.get("rating"),
            email=data.get("email"),
            competitor_id=data.get("id"),
            score=float(data.get("score", 0.0)),
            is_active=is_active,
            created_at=created_at,
        )

    def __repr__(self) -> str:
        return (
            f"Competitor(name='{self.name}', rating={self.rating}, "
            f"score={self.score}, id='{self.id}')"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.rating})"
