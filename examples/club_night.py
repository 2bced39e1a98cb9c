"""Example script running a small club night through the Swiss Round controllers.

This script shows the round lifecycle used by a tournament front end: register
a roster, pair rounds, enter results and watch the change notifications.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from swissround import (
    CompetitorManager,
    InMemoryTournamentStore,
    ResultRecorder,
    RoundManager,
    TournamentConfig,
    TournamentNotifier,
)
from swissround.exceptions import NoRoundNumberAvailableException

ROSTER = """
Ada Lovelace
Alan Turing
Grace Hopper
Edsger Dijkstra
Barbara Liskov
"""


def example_club_night():
    """Example: Three rounds for five competitors, one sitting out round 2."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Club Night")
    print("=" * 70 + "\n")

    store = InMemoryTournamentStore()
    notifier = TournamentNotifier()
    competitors = CompetitorManager(store, notifier)
    rounds = RoundManager(store, notifier)
    results = ResultRecorder(store, notifier)

    tournament = store.create_tournament(TournamentConfig(name="Club Night", max_rounds=3))
    notifier.subscribe(
        tournament.id, lambda event: print(f"  [event] {event.kind} {event.payload}")
    )

    roster = competitors.import_roster(tournament.id, ROSTER)
    for competitor, rating in zip(roster, [1850, 1720, 1610, 1540, 1400]):
        competitors.update_competitor(tournament.id, competitor.id, rating=rating)

    for round_number in range(1, 4):
        # Edsger cannot make it on the second evening
        competitors.set_active(tournament.id, roster[3].id, round_number != 2)

        round_data = rounds.create_next_round(tournament.id)
        print(f"\nRound {round_data.round_number}")
        for pairing in round_data.pairings:
            print(f"  {pairing.white_name:<18} vs {pairing.black_name}")

        # higher rated competitor wins every game
        entered = {}
        for pairing in round_data.pairings:
            if pairing.is_bye:
                continue
            white = tournament.competitors[pairing.white_id]
            black = tournament.competitors[pairing.black_id]
            entered[pairing.id] = "1-0" if white.rating >= black.rating else "0-1"
        results.record_round_results(tournament.id, round_data.round_number, entered)

    try:
        rounds.create_next_round(tournament.id)
    except NoRoundNumberAvailableException as e:
        print(f"\n{e}")

    print("\nFinal standings")
    for row in competitors.standings(tournament.id):
        print(f"  {row.rank}. {row.name:<18} {row.score:.1f} ({row.games_played} games)")
    print("=" * 70 + "\n")


def example_cli_usage():
    """Example: Show CLI usage examples."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Command-Line Interface Usage")
    print("=" * 70 + "\n")

    print("After installing the package with pip install -e ., you can use:")
    print("\n1. Simulate a 12 player, 5 round event and save it:")
    print("   $ swissround-test simulate --players 12 --rounds 5 --output club.json")
    print("\n2. Preview the next round of a saved event:")
    print("   $ swissround-test pair --file club.json")
    print("\n3. Store it:")
    print("   $ swissround-test pair --file club.json --write")
    print("\n4. Enter a result (or 'none' to clear it):")
    print("   $ swissround-test result --file club.json --pairing <id> --result 0.5-0.5")
    print("\n5. Interactive shell with autocompletion:")
    print("   $ swissround-test")
    print("\n" + "=" * 70 + "\n")


if __name__ == "__main__":
    example_club_night()
    example_cli_usage()
