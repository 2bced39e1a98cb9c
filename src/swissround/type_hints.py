"""Type hints used in Swiss Round."""

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

from typing import Dict, FrozenSet, Literal, Optional, Set

# Result type literals, from the first competitor's side
Result = Literal["1-0", "0.5-0.5", "0-1"]
MaybeResult = Optional[Result]

# Unordered pair of competitor ids that have met
MatchKey = FrozenSet[str]
# Every pair that has ever met in a tournament
HistorySet = Set[MatchKey]

# Competitor id -> cumulative score
ScoreTable = Dict[str, float]
