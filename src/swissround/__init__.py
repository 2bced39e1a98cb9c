"""Swiss Round: greedy Swiss-system pairing for club tournaments.

The two pure building blocks are ``rank_for_pairing`` and
``create_greedy_swiss_pairings``. The controllers wire them to a storage
backend and a change notifier.
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

from swissround.controllers import CompetitorManager, ResultRecorder, RoundManager
from swissround.exceptions import (
    InsufficientCompetitorsException,
    InternalConsistencyException,
    NoRoundNumberAvailableException,
    SwissRoundException,
)
from swissround.models.player import Competitor
from swissround.models.tournament import (
    Pairing,
    PairingHistory,
    RoundData,
    Tournament,
    TournamentConfig,
)
from swissround.notifications import TournamentNotifier
from swissround.pairing import create_greedy_swiss_pairings
from swissround.standings import (
    rank_for_pairing,
    rank_standings,
    recompute_score,
    recompute_scores,
    standings_table,
)
from swissround.storage import InMemoryTournamentStore, TournamentStore

__version__ = "0.1.0"

__all__ = [
    "Competitor",
    "CompetitorManager",
    "InMemoryTournamentStore",
    "InsufficientCompetitorsException",
    "InternalConsistencyException",
    "NoRoundNumberAvailableException",
    "Pairing",
    "PairingHistory",
    "ResultRecorder",
    "RoundData",
    "RoundManager",
    "SwissRoundException",
    "Tournament",
    "TournamentConfig",
    "TournamentNotifier",
    "TournamentStore",
    "create_greedy_swiss_pairings",
    "rank_for_pairing",
    "rank_standings",
    "recompute_score",
    "recompute_scores",
    "standings_table",
]
