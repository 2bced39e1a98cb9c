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

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# A bye always counts as a full point
BYE_SCORE = WIN_SCORE

# Result strings, written from the first (white) competitor's side
RESULT_WHITE_WIN = "1-0"
RESULT_DRAW = "0.5-0.5"
RESULT_BLACK_WIN = "0-1"

VALID_RESULTS = (RESULT_WHITE_WIN, RESULT_DRAW, RESULT_BLACK_WIN)

# Points awarded to (white, black) for each recorded result
RESULT_POINTS = {
    RESULT_WHITE_WIN: (WIN_SCORE, LOSS_SCORE),
    RESULT_DRAW: (DRAW_SCORE, DRAW_SCORE),
    RESULT_BLACK_WIN: (LOSS_SCORE, WIN_SCORE),
}

# Bye pairings
BYE_NAME = "BYE"
BYE_RESULT = RESULT_WHITE_WIN

# Competitor defaults
DEFAULT_RATING = 1200
MIN_RATING = 0
MAX_RATING = 4000

# Tournament defaults
DEFAULT_MAX_ROUNDS = 5
DEFAULT_TIME_CONTROL = "G/30"
MIN_COMPETITORS = 2

# Logging
LOG_LEVEL_ENV_VAR = "SWISSROUND_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
