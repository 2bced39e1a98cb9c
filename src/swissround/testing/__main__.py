"""Command line tools for Swiss Round.

``swissround-test simulate`` plays random tournaments through the engine,
``pair``, ``result`` and ``standings`` work on a tournament saved as JSON.
Run without arguments for an interactive shell with autocompletion.
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

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swissround.controllers import CompetitorManager, ResultRecorder, RoundManager
from swissround.exceptions import SwissRoundException
from swissround.models.tournament import Pairing, Tournament
from swissround.standings import StandingRow
from swissround.storage import InMemoryTournamentStore
from swissround.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "simulate": {
        "description": "Play random tournaments through the pairing engine",
        "options": {
            "--players": "Number of competitors (default: 12)",
            "--rounds": "Number of rounds (default: 5)",
            "--distribution": "Rating distribution (uniform/normal/club/school)",
            "--pattern": "Result pattern (realistic/predictable/random)",
            "--absence-rate": "Chance a competitor sits out a round (default: 0)",
            "--seed": "Random seed for reproducibility",
            "--output": "Write the final tournament to this JSON file",
        },
    },
    "pair": {
        "description": "Pair the next round of a saved tournament",
        "options": {
            "--file": "Tournament JSON file",
            "--write": "Store the new round back into the file",
        },
    },
    "result": {
        "description": "Record a result in a saved tournament",
        "options": {
            "--file": "Tournament JSON file",
            "--pairing": "Pairing ID",
            "--result": "1-0, 0.5-0.5, 0-1 or none",
        },
    },
    "standings": {
        "description": "Print the standings of a saved tournament",
        "options": {"--file": "Tournament JSON file"},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")
    for option, description in cmd_info["options"].items():
        print(f"  {option:20} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        completions[cmd] = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
    return NestedCompleter.from_nested_dict(completions)


# ========== Formatting ==========


def format_pairings(pairings: Sequence[Pairing]) -> List[str]:
    """One line per board, byes last as produced by the engine."""
    lines = []
    for board, pairing in enumerate(pairings, start=1):
        result = pairing.result or "-"
        lines.append(
            f"{board:>3}. {pairing.white_name:<24} {result:^9} "
            f"{pairing.black_name:<24} [{pairing.id}]"
        )
    return lines


def format_standings(rows: Sequence[StandingRow]) -> List[str]:
    lines = [f"{'#':>3}  {'Name':<24} {'Rating':>6} {'Score':>5} {'Games':>5}"]
    for row in rows:
        absent = "" if row.is_active else "  (absent)"
        lines.append(
            f"{row.rank:>3}  {row.name:<24} {row.rating:>6} {row.score:>5.1f} "
            f"{row.games_played:>5}{absent}"
        )
    return lines


# ========== Tournament files ==========


def load_tournament(path: Path) -> Tournament:
    with open(path, "r", encoding="utf-8") as f:
        return Tournament.from_dict(json.load(f))


def save_tournament(tournament: Tournament, path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(tournament.to_dict(), f, indent=2)


def _open_store(path: Path):
    store = InMemoryTournamentStore()
    tournament = store.add_tournament(load_tournament(path))
    return store, tournament


# ========== Commands ==========


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate (RTG) command."""
    from swissround.testing.rtg import (
        RandomTournamentGenerator,
        RatingDistribution,
        ResultPattern,
        RTGConfig,
    )

    config = RTGConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        rating_distribution=RatingDistribution[args.distribution.upper()],
        result_pattern=ResultPattern[args.pattern.upper()],
        absence_rate=args.absence_rate,
        seed=args.seed,
    )
    tournament_data = RandomTournamentGenerator(config).generate_complete_tournament()
    tournament = tournament_data["tournament"]

    for round_data in tournament_data["rounds"]:
        print(f"\n{Colors.BOLD}Round {round_data.round_number}{Colors.ENDC}")
        print("\n".join(format_pairings(round_data.pairings)))

    print(f"\n{Colors.BOLD}Final standings{Colors.ENDC}")
    print("\n".join(format_standings(tournament_data["standings"])))

    if args.output:
        save_tournament(tournament, Path(args.output))
        print(f"{Colors.OKGREEN}Tournament saved to: {args.output}{Colors.ENDC}")
    return 0


def run_pair_command(args: argparse.Namespace) -> int:
    """Pair the next round of a tournament file."""
    path = Path(args.file)
    store, tournament = _open_store(path)
    round_manager = RoundManager(store)

    if args.write:
        round_data = round_manager.create_next_round(tournament.id)
        pairings = round_data.pairings
        save_tournament(tournament, path)
    else:
        pairings = round_manager.preview_next_round(tournament.id)

    round_number = pairings[0].round_number if pairings else tournament.round_count + 1
    print(f"\n{Colors.BOLD}Round {round_number}{Colors.ENDC}")
    print("\n".join(format_pairings(pairings)))
    if not args.write:
        print(f"{Colors.WARNING}Preview only, use --write to store{Colors.ENDC}")
    return 0


def run_result_command(args: argparse.Namespace) -> int:
    """Record one result in a tournament file."""
    path = Path(args.file)
    store, tournament = _open_store(path)
    result = None if args.result.lower() == "none" else args.result
    pairing = ResultRecorder(store).record_result(tournament.id, args.pairing, result)
    save_tournament(tournament, path)
    print("\n".join(format_pairings([pairing])))
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    store, tournament = _open_store(Path(args.file))
    rows = CompetitorManager(store).standings(tournament.id)
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print("\n".join(format_standings(rows)))
    return 0


# ========== Parsers ==========


def _add_simulate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--players", type=int, default=12, help="Number of competitors")
    parser.add_argument("--rounds", type=int, default=5, help="Number of rounds")
    parser.add_argument(
        "--distribution",
        choices=["uniform", "normal", "club", "school"],
        default="normal",
    )
    parser.add_argument(
        "--pattern", choices=["realistic", "predictable", "random"], default="realistic"
    )
    parser.add_argument("--absence-rate", type=float, default=0.0)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--output", help="Write the final tournament to JSON")


def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file", required=True, help="Tournament JSON file")


def _add_pair_arguments(parser: argparse.ArgumentParser) -> None:
    _add_file_argument(parser)
    parser.add_argument("--write", action="store_true", help="Store the new round")


def _add_result_arguments(parser: argparse.ArgumentParser) -> None:
    _add_file_argument(parser)
    parser.add_argument("--pairing", required=True, help="Pairing ID")
    parser.add_argument(
        "--result", required=True, help="1-0, 0.5-0.5, 0-1, or none to clear"
    )


SUBCOMMANDS = {
    "simulate": (_add_simulate_arguments, run_simulate_command),
    "pair": (_add_pair_arguments, run_pair_command),
    "result": (_add_result_arguments, run_result_command),
    "standings": (_add_file_argument, run_standings_command),
}


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swissround-test",
        description="Simulation and file tools for Swiss Round",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  swissround-test

  # Simulate a tournament
  swissround-test simulate --players 11 --rounds 5 --seed 7

  # Preview, then store, the next round of a saved tournament
  swissround-test pair --file club.json
  swissround-test pair --file club.json --write
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for name, (add_arguments, func) in SUBCOMMANDS.items():
        sub_parser = subparsers.add_parser(name, help=COMMANDS[name]["description"])
        add_arguments(sub_parser)
        sub_parser.set_defaults(func=func)
    return parser


def run_command(command: str, args_list: List[str]) -> int:
    """Parse and run one subcommand, reporting Swiss Round errors."""
    add_arguments, func = SUBCOMMANDS[command]
    parser = argparse.ArgumentParser(prog=command)
    add_arguments(parser)
    args = parser.parse_args(args_list)
    try:
        return func(args)
    except SwissRoundException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print(f"{Colors.OKBLUE}Swiss Round test shell{Colors.ENDC}")
    print(
        f"Type {Colors.BOLD}help{Colors.ENDC} for commands, "
        f"{Colors.BOLD}exit{Colors.ENDC} to leave"
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            user_input = session.prompt("swissround> ").strip()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            break

        if not user_input:
            continue
        parts = user_input.split()
        command = parts[0].lstrip("/")

        if command in ("exit", "quit", "q"):
            break
        if command in ("help", "?"):
            if len(parts) > 1:
                print_command_help(parts[1].lstrip("/"))
            else:
                print_commands_list()
            continue
        if command not in SUBCOMMANDS:
            print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
            continue

        try:
            run_command(command, parts[1:])
        except SystemExit:
            # argparse exits on bad arguments
            continue

    print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the swissround-test CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv or "--interactive" in argv or "-i" in argv:
        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        return args.func(args)
    except SwissRoundException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
