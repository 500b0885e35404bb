# Swiss Manager
# Copyright (C) 2025  Swiss Manager developers
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

# --- Constants ---

# Match points per outcome
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0
BYE_POINTS = WIN_POINTS  # A bye is scored exactly like a win

# Outcome values (for serialization)
RESULT_WIN = "win"
RESULT_LOSS = "loss"
RESULT_DRAW = "draw"

# Head-to-head lookups
H2H_A = "a"
H2H_B = "b"
H2H_TIE = "tie"

# Strength of schedule differences below this are treated as equal
SOS_EPSILON = 0.01

# Tournament length
DEFAULT_MAX_ROUNDS = 4
MIN_ROUNDS = 3
MAX_ROUNDS = 8
ALLOWED_ROUND_COUNTS = tuple(range(MIN_ROUNDS, MAX_ROUNDS + 1))

# Tie-break chain, in the order it is applied
TB_POINTS = "points"
TB_WIN_PERCENTAGE = "win_percentage"
TB_STRENGTH_OF_SCHEDULE = "sos"
TB_HEAD_TO_HEAD = "h2h"
TB_TOTAL_GAMES = "total_games"
TB_NAME = "name"

TIEBREAK_ORDER = [
    TB_POINTS,
    TB_WIN_PERCENTAGE,
    TB_STRENGTH_OF_SCHEDULE,
    TB_HEAD_TO_HEAD,
    TB_TOTAL_GAMES,
    TB_NAME,
]

TIEBREAK_NAMES = {
    TB_POINTS: "Points",
    TB_WIN_PERCENTAGE: "Win %",
    TB_STRENGTH_OF_SCHEDULE: "Strength of Schedule",
    TB_HEAD_TO_HEAD: "Head-to-Head",
    TB_TOTAL_GAMES: "Games Played",
    TB_NAME: "Name",
}

# Snapshot file naming (used by the persistence collaborator)
SAVE_FILE_EXTENSION = ".json"
SAVE_FILE_PREFIX = "swiss-manager"

# Environment variable controlling the package log level
LOG_LEVEL_ENV_VAR = "SWISSMANAGER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
