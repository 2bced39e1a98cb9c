"""Competitor controller: registration, edits, absence and removal."""

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

from swissround.constants import DEFAULT_RATING
from swissround.exceptions import (
    InvalidCompetitorDataException,
    NameValidationException,
    RatingValidationException,
)
from swissround.models.player import Competitor, CompetitorFactory
from swissround.notifications import COMPETITORS_CHANGED, TournamentNotifier
from swissround.standings import StandingRow, recompute_scores, standings_table
from swissround.storage import TournamentStore
from swissround.utils import setup_logger
from swissround.utils.roster import parse_roster
from swissround.utils.validation import validate_name, validate_rating

logger = setup_logger(__name__)


class CompetitorManager:
    """Registers and edits the competitors of stored tournaments."""

    def __init__(
        self,
        store: TournamentStore,
        notifier: Optional[TournamentNotifier] = None,
        factory: Optional[CompetitorFactory] = None,
    ):
        self.store = store
        self.notifier = notifier
        self.factory = factory or CompetitorFactory()

    def add_competitor(
        self,
        tournament_id: str,
        name: str,
        rating: Optional[int] = None,
        email: Optional[str] = None,
    ) -> Competitor:
        """Register a new competitor with a score of zero."""
        competitor = self.factory.create_competitor(
            name=name, rating=rating, email=email
        )
        with self.store.lock(tournament_id):
            self.store.add_competitor(tournament_id, competitor)
        logger.info("Added competitor: %s (%s)", competitor.name, competitor.id)
        self._notify(tournament_id)
        return competitor

    def import_roster(
        self, tournament_id: str, text: str, default_rating: int = DEFAULT_RATING
    ) -> List[Competitor]:
        """Register every ``First Last`` line of a pasted roster.

        Raises:
            InvalidCompetitorDataException: No usable line in the text
        """
        entries = parse_roster(text, default_rating)
        if not entries:
            raise InvalidCompetitorDataException(
                "No valid competitors found. Format: FirstName LastName (one per line)"
            )

        competitors = self.factory.create_batch(
            [{"name": name, "rating": rating} for name, rating in entries]
        )
        with self.store.lock(tournament_id):
            for competitor in competitors:
                self.store.add_competitor(tournament_id, competitor)
        logger.info("Imported %d competitors", len(competitors))
        self._notify(tournament_id)
        return competitors

    def update_competitor(
        self,
        tournament_id: str,
        competitor_id: str,
        name: Optional[str] = None,
        rating: Optional[int] = None,
    ) -> Competitor:
        """Change a competitor's name and/or rating.

        Pairings already generated keep the name they were created with.
        Nothing is changed unless both values are valid.

        Raises:
            NameValidationException: Empty or overlong name
            RatingValidationException: Rating outside 0-4000 or not an integer
        """
        if name is not None:
            name_result = validate_name(name)
            if not name_result:
                raise NameValidationException(name_result.error_message)
            name = name_result.sanitized_value
        if rating is not None:
            rating_result = validate_rating(rating)
            if not rating_result:
                raise RatingValidationException(rating_result.error_message)
            rating = rating_result.sanitized_value

        with self.store.lock(tournament_id):
            competitor = self.store.get_competitor(tournament_id, competitor_id)
            if name is not None:
                competitor.name = name
            if rating is not None:
                competitor.rating = rating
        self._notify(tournament_id)
        return competitor

    def set_active(
        self, tournament_id: str, competitor_id: str, is_active: bool
    ) -> Competitor:
        """Mark a competitor present (True) or absent (False) for pairing."""
        with self.store.lock(tournament_id):
            competitor = self.store.get_competitor(tournament_id, competitor_id)
            competitor.is_active = is_active
        logger.info(
            "Marked %s as %s", competitor.name, "present" if is_active else "absent"
        )
        self._notify(tournament_id)
        return competitor

    def remove_competitor(self, tournament_id: str, competitor_id: str) -> Competitor:
        """Delete a competitor and their pairings, then recompute every score."""
        with self.store.lock(tournament_id):
            competitor = self.store.delete_competitor(tournament_id, competitor_id)
            pairings = [
                p for r in self.store.list_history(tournament_id) for p in r.pairings
            ]
            recompute_scores(self.store.list_competitors(tournament_id), pairings)
        self._notify(tournament_id)
        return competitor

    def standings(self, tournament_id: str) -> List[StandingRow]:
        """Public standings, absent competitors included."""
        with self.store.lock(tournament_id):
            return standings_table(
                self.store.list_competitors(tournament_id),
                self.store.list_history(tournament_id),
            )

    def _notify(self, tournament_id: str) -> None:
        if self.notifier is not None:
            self.notifier.publish(tournament_id, COMPETITORS_CHANGED)
