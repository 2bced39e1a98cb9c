"""Per-tournament change notifications.

Viewers of a tournament subscribe with a callback and are told that
something changed so they can refetch. Delivery is synchronous, in
subscription order.
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
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from swissround.utils import setup_logger

logger = setup_logger(__name__)

# Event names
ROUND_CREATED = "round_created"
ROUND_DELETED = "round_deleted"
RESULT_UPDATED = "result_updated"
COMPETITORS_CHANGED = "competitors_changed"


@dataclass
class TournamentEvent:
    """A "tournament changed, refetch" message."""

    tournament_id: str
    kind: str
    payload: Dict[str, Any] = field(default_factory=dict)


Subscriber = Callable[[TournamentEvent], None]


class TournamentNotifier:
    """Publish/subscribe hub keyed by tournament ID."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Subscriber]] = {}
        self._lock = threading.Lock()

    def subscribe(self, tournament_id: str, callback: Subscriber) -> None:
        with self._lock:
            self._subscribers.setdefault(tournament_id, []).append(callback)

    def unsubscribe(self, tournament_id: str, callback: Subscriber) -> bool:
        """Remove a callback. Returns False if it was not subscribed."""
        with self._lock:
            callbacks = self._subscribers.get(tournament_id, [])
            if callback not in callbacks:
                return False
            callbacks.remove(callback)
            if not callbacks:
                del self._subscribers[tournament_id]
            return True

    def subscriber_count(self, tournament_id: str) -> int:
        return len(self._subscribers.get(tournament_id, []))

    def publish(
        self, tournament_id: str, kind: str, payload: Optional[Dict[str, Any]] = None
    ) -> int:
        """Deliver an event to every subscriber of the tournament.

        A subscriber that raises is logged and skipped.

        Returns:
            Number of subscribers that received the event without error
        """
        event = TournamentEvent(tournament_id, kind, payload or {})
        with self._lock:
            callbacks = list(self._subscribers.get(tournament_id, []))

        delivered = 0
        for callback in callbacks:
            try:
                callback(event)
            except Exception:
                logger.exception(
                    "Subscriber %r failed on %s for tournament %s",
                    callback,
                    kind,
                    tournament_id,
                )
                continue
            delivered += 1

        logger.debug(
            "Published %s for tournament %s to %d subscriber(s)",
            kind,
            tournament_id,
            delivered,
        )
        return delivered
