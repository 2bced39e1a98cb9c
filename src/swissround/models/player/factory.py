"""Factory for creating Competitor objects with validation.

This module provides a single point of entry for creating competitors with
proper validation and error handling.
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

from typing import Any, Dict, List, Optional

from swissround.exceptions import InvalidCompetitorDataException
from swissround.models.player.competitor import Competitor
from swissround.utils import setup_logger
from swissround.utils.validation import validate_name, validate_rating

logger = setup_logger(__name__)


class CompetitorFactory:
    """Factory for creating Competitor instances.

    Example:
        >>> factory = CompetitorFactory()
        >>> competitor = factory.create_competitor(name="Ada Lovelace", rating=1800)
    """

    def __init__(self, validate: bool = True, strict: bool = True):
        """Initialize the CompetitorFactory.

        Args:
            validate: Whether to validate input data
            strict: Whether to raise exceptions on validation errors
        """
        self.validate = validate
        self.strict = strict

    def create_competitor(
        self,
        name: str,
        rating: Optional[Any] = None,
        email: Optional[str] = None,
    ) -> Competitor:
        """Create a Competitor, normalising name and rating.

        Raises:
            InvalidCompetitorDataException: If validation fails and strict=True
        """
        if self.validate:
            name_result = validate_name(name)
            rating_result = (
                validate_rating(rating) if rating is not None else None
            )

            errors = []
            if not name_result:
                errors.append(name_result.error_message)
            else:
                name = name_result.sanitized_value
            if rating_result is not None:
                if not rating_result:
                    errors.append(rating_result.error_message)
                    rating = None
                else:
                    rating = rating_result.sanitized_value

            if errors:
                error_msg = "; ".join(errors)
                if self.strict:
                    raise InvalidCompetitorDataException(
                        f"Invalid competitor data: {error_msg}"
                    )
                logger.warning("Creating competitor with invalid data: %s", error_msg)

        return Competitor(name=name, rating=rating, email=email)

    def create_batch(self, entries: List[Dict[str, Any]]) -> List[Competitor]:
        """Create competitors from a list of dictionaries with name/rating/email."""
        competitors: List[Competitor] = []
        for entry in entries:
            if "name" not in entry:
                raise InvalidCompetitorDataException("Competitor name is required")
            competitors.append(
                self.create_competitor(
                    name=entry["name"],
                    rating=entry.get("rating"),
                    email=entry.get("email"),
                )
            )
        return competitors


def create_competitor(name: str, rating: Optional[Any] = None, **kwargs) -> Competitor:
    """Convenience wrapper around a strict CompetitorFactory."""
    return CompetitorFactory().create_competitor(name=name, rating=rating, **kwargs)
