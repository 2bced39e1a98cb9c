"""Exceptions for use in Swiss Round"""

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

from typing import Optional


# ========== Base Application Exception ==========


class SwissRoundException(Exception):
    """Base exception for all Swiss Round errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissRoundException):
    """Base exception for pairing-related errors."""

    pass


class InsufficientCompetitorsException(PairingException):
    """Raised when fewer than two active competitors are available for a round."""

    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Need at least {minimum} active competitors to pair a round, got {count}"
        )


class InternalConsistencyException(PairingException):
    """Raised when a competitor is left unpaired after the round's bye was used.

    This cannot happen when the history and scores handed to the engine are
    consistent, so it points at an upstream bookkeeping bug.
    """

    def __init__(self, competitor_id: str, round_number: int):
        self.competitor_id = competitor_id
        self.round_number = round_number
        super().__init__(
            f"Competitor {competitor_id} left unpaired in round {round_number} "
            "after the bye was already issued"
        )


# ========== Tournament Exceptions ==========


class TournamentException(SwissRoundException):
    """Base exception for tournament-related errors."""

    pass


class TournamentNotFoundException(TournamentException):
    """Raised when a requested tournament does not exist."""

    pass


class NoRoundNumberAvailableException(TournamentException):
    """Raised when the tournament has already played its maximum number of rounds."""

    def __init__(self, max_rounds: int):
        self.max_rounds = max_rounds
        super().__init__(f"Tournament has reached maximum rounds ({max_rounds})")


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissRoundException):
    """Base exception for competitor-related errors."""

    pass


class CompetitorNotFoundException(PlayerException):
    """Raised when a requested competitor cannot be found."""

    pass


class InvalidCompetitorDataException(PlayerException):
    """Raised when competitor data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissRoundException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is not one of "1-0", "0.5-0.5" or "0-1"."""

    def __init__(self, result: Optional[str]):
        self.result = result
        super().__init__(f"Invalid result: {result!r}")


class ByeResultImmutableException(ResultException):
    """Raised when attempting to change the fixed result of a bye."""

    pass


class PairingNotFoundException(ResultException):
    """Raised when a requested pairing cannot be found."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(SwissRoundException):
    """Base exception for validation errors."""

    pass


class NameValidationException(ValidationException):
    """Raised when a competitor name is invalid."""

    pass


class RatingValidationException(ValidationException):
    """Raised when a rating value is invalid."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissRoundException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
