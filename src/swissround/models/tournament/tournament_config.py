"""Tournament configuration."""

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
from typing import Any, Dict

from swissround.constants import DEFAULT_MAX_ROUNDS, DEFAULT_TIME_CONTROL
from swissround.exceptions import InvalidConfigurationException
from swissround.utils.validation import validate_max_rounds, validate_name


@dataclass
class TournamentConfig:
    """Configuration settings for a tournament.

    Attributes:
        name: Tournament name
        max_rounds: Number of rounds after which no further round is paired
        time_control: Free-text time control, e.g. "G/30"
    """

    name: str
    max_rounds: int = DEFAULT_MAX_ROUNDS
    time_control: str = DEFAULT_TIME_CONTROL

    def __post_init__(self) -> None:
        name_result = validate_name(self.name)
        if not name_result:
            raise InvalidConfigurationException(name_result.error_message)
        rounds_result = validate_max_rounds(self.max_rounds)
        if not rounds_result:
            raise InvalidConfigurationException(rounds_result.error_message)
        self.name = name_result.sanitized_value
        self.max_rounds = rounds_result.sanitized_value

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "max_rounds": self.max_rounds,
            "time_control": self.time_control,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            max_rounds=data.get("max_rounds", DEFAULT_MAX_ROUNDS),
            time_control=data.get("time_control", DEFAULT_TIME_CONTROL),
        )
