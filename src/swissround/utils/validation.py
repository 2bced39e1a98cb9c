"""Validation utilities for Swiss Round.

This module provides reusable validation functions with consistent error handling.
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

from typing import Any, Optional

from swissround.constants import MAX_RATING, MIN_RATING, VALID_RESULTS


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a competitor's display name.

    Surrounding whitespace is stripped and inner runs of whitespace are
    collapsed to one space.

    Example:
        >>> validate_name("  Ada   Lovelace ").sanitized_value
        'Ada Lovelace'
    """
    if name is None or not str(name).strip():
        return ValidationResult(is_valid=False, error_message="Name is required")

    cleaned = " ".join(str(name).split())
    if len(cleaned) > 255:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name too long: {len(cleaned)} characters (max 255)",
        )
    return ValidationResult(is_valid=True, sanitized_value=cleaned)


# ========== Rating Validation ==========


def validate_rating(rating: Any) -> ValidationResult:
    """Validate a rating value.

    Accepts integers and integer-like strings in the range 0..4000.
    """
    if rating is None or (isinstance(rating, str) and not rating.strip()):
        return ValidationResult(is_valid=False, error_message="Rating is required")

    if isinstance(rating, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Rating must be a number: {rating!r}"
        )

    try:
        value = int(str(rating).strip())
    except ValueError:
        return ValidationResult(
            is_valid=False, error_message=f"Rating must be a whole number: {rating!r}"
        )

    if not (MIN_RATING <= value <= MAX_RATING):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating {value} out of range ({MIN_RATING}-{MAX_RATING})",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


# ========== Result Validation ==========


def validate_result(result: Optional[str], allow_none: bool = True) -> ValidationResult:
    """Validate a pairing result string.

    Args:
        result: One of "1-0", "0.5-0.5", "0-1", or None to clear a result
        allow_none: Whether clearing (None) is acceptable
    """
    if result is None:
        if allow_none:
            return ValidationResult(is_valid=True, sanitized_value=None)
        return ValidationResult(is_valid=False, error_message="Result is required")

    cleaned = str(result).strip()
    if cleaned in VALID_RESULTS:
        return ValidationResult(is_valid=True, sanitized_value=cleaned)
    return ValidationResult(
        is_valid=False,
        error_message=f"Unknown result {result!r}; expected one of {', '.join(VALID_RESULTS)}",
    )


# ========== Tournament Validation ==========


def validate_max_rounds(max_rounds: Any) -> ValidationResult:
    """Validate the maximum number of rounds for a tournament."""
    if isinstance(max_rounds, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Max rounds must be a number: {max_rounds!r}"
        )
    try:
        value = int(max_rounds)
    except (TypeError, ValueError):
        return ValidationResult(
            is_valid=False, error_message=f"Max rounds must be a number: {max_rounds!r}"
        )
    if value < 1:
        return ValidationResult(
            is_valid=False, error_message=f"Max rounds must be at least 1, got {value}"
        )
    return ValidationResult(is_valid=True, sanitized_value=value)
