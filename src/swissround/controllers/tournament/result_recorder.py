"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and keeps
every competitor's score in step with the recorded results.
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

from typing import Dict, Optional

from swissround.exceptions import (
    ByeResultImmutableException,
    InvalidResultException,
    PairingNotFoundException,
    RoundNotFoundException,
)
from swissround.models.tournament import Pairing
from swissround.notifications import RESULT_UPDATED, TournamentNotifier
from swissround.standings import recompute_scores
from swissround.storage import TournamentStore
from swissround.utils import setup_logger
from swissround.utils.validation import validate_result

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating results against the closed set "1-0", "0.5-0.5", "0-1"
    - Refusing edits to bye pairings
    - Recomputing all scores in the same locked section as the write
    """

    def __init__(
        self, store: TournamentStore, notifier: Optional[TournamentNotifier] = None
    ):
        self.store = store
        self.notifier = notifier

    def record_result(
        self, tournament_id: str, pairing_id: str, result: Optional[str]
    ) -> Pairing:
        """Record (or with None, clear) the result of one pairing.

        Raises:
            InvalidResultException: Result outside the closed set
            PairingNotFoundException: No such pairing in the tournament
            ByeResultImmutableException: The pairing is a bye
        """
        validation = validate_result(result)
        if not validation:
            logger.warning(
                "Rejected result for %s: %s", pairing_id, validation.error_message
            )
            raise InvalidResultException(result)
        result = validation.sanitized_value

        with self.store.lock(tournament_id):
            self._writable_pairing(tournament_id, pairing_id)
            pairing = self.store.set_pairing_result(tournament_id, pairing_id, result)
            self.recompute_scores(tournament_id)

        logger.info(
            "Round %d: %s vs %s -> %s",
            pairing.round_number,
            pairing.white_name,
            pairing.black_name,
            result,
        )
        self._notify(tournament_id, pairing)
        return pairing

    def clear_result(self, tournament_id: str, pairing_id: str) -> Pairing:
        return self.record_result(tournament_id, pairing_id, None)

    def record_round_results(
        self, tournament_id: str, round_number: int, results: Dict[str, Optional[str]]
    ) -> int:
        """Record several results of one round as a single unit.

        Every entry is validated before anything is written, so a bad entry
        leaves the round untouched.

        Args:
            tournament_id: Tournament ID
            round_number: Round the pairings belong to
            results: Mapping of pairing ID to result

        Returns:
            Number of results written
        """
        cleaned: Dict[str, Optional[str]] = {}
        for pairing_id, result in results.items():
            validation = validate_result(result)
            if not validation:
                raise InvalidResultException(result)
            cleaned[pairing_id] = validation.sanitized_value

        with self.store.lock(tournament_id):
            round_pairings = None
            for round_data in self.store.list_history(tournament_id):
                if round_data.round_number == round_number:
                    round_pairings = {p.id for p in round_data.pairings}
                    break
            if round_pairings is None:
                raise RoundNotFoundException(f"Round {round_number} does not exist")

            for pairing_id in cleaned:
                if pairing_id not in round_pairings:
                    raise PairingNotFoundException(
                        f"Pairing {pairing_id} is not in round {round_number}"
                    )
                self._writable_pairing(tournament_id, pairing_id)

            for pairing_id, result in cleaned.items():
                self.store.set_pairing_result(tournament_id, pairing_id, result)
            self.recompute_scores(tournament_id)

        logger.info(
            "Recorded %d result(s) for round %d of tournament %s",
            len(cleaned),
            round_number,
            tournament_id,
        )
        if self.notifier is not None:
            self.notifier.publish(
                tournament_id,
                RESULT_UPDATED,
                {"round_number": round_number, "count": len(cleaned)},
            )
        return len(cleaned)

    def recompute_scores(self, tournament_id: str) -> Dict[str, float]:
        """Recompute every competitor's score from the full round history."""
        with self.store.lock(tournament_id):
            pairings = [
                p for r in self.store.list_history(tournament_id) for p in r.pairings
            ]
            return recompute_scores(self.store.list_competitors(tournament_id), pairings)

    def _writable_pairing(self, tournament_id: str, pairing_id: str) -> Pairing:
        pairing = self.store.find_pairing(tournament_id, pairing_id)
        if pairing is None:
            raise PairingNotFoundException(f"Pairing not found: {pairing_id}")
        if pairing.is_bye:
            logger.warning("Refusing to edit bye result for %s", pairing.white_name)
            raise ByeResultImmutableException(
                f"The result of {pairing.white_name}'s bye cannot be changed"
            )
        return pairing

    def _notify(self, tournament_id: str, pairing: Pairing) -> None:
        if self.notifier is not None:
            self.notifier.publish(
                tournament_id,
                RESULT_UPDATED,
                {"pairing_id": pairing.id, "result": pairing.result},
            )
