"""Bulk roster import: turn pasted text into competitor entries."""

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

import re
from typing import List, Tuple

from swissround.constants import DEFAULT_RATING
from swissround.utils import setup_logger

logger = setup_logger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


def parse_roster(text: str, default_rating: int = DEFAULT_RATING) -> List[Tuple[str, int]]:
    """Parse one competitor per line in ``First Last`` form.

    Names may be separated by commas or whitespace. Only the first two
    tokens are used; lines with fewer than two tokens are skipped.

    Args:
        text: Pasted roster, one competitor per line
        default_rating: Rating given to every imported competitor

    Returns:
        List of (name, rating) tuples in input order
    """
    entries: List[Tuple[str, int]] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = [part for part in _SEPARATORS.split(line.strip()) if part]
        if not parts:
            continue
        if len(parts) < 2:
            logger.warning("Skipping roster line %d: %r", line_number, line)
            continue
        entries.append((f"{parts[0]} {parts[1]}", default_rating))

    logger.debug("Parsed %d roster entries", len(entries))
    return entries
