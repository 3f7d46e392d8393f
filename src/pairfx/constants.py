# PairFX
# Copyright (C) 2025  PairFX developers
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
SAVE_FILE_EXTENSION = ".json"
STORAGE_PREFIX = "pairfx_tournament_"
TOURNAMENT_LIST_KEY = "pairfx_tournament_list"
LOG_FILE_NAME = "pairfx.log"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Result tokens (for display and serialization), None means the game is active
RESULT_WHITE_WIN = "1-0"
RESULT_BLACK_WIN = "0-1"
RESULT_DRAW = "1/2-1/2"
VALID_RESULTS = (RESULT_WHITE_WIN, RESULT_BLACK_WIN, RESULT_DRAW)

# (white score, black score) for each finished result
RESULT_SCORES = {
    RESULT_WHITE_WIN: (WIN_SCORE, LOSS_SCORE),
    RESULT_BLACK_WIN: (LOSS_SCORE, WIN_SCORE),
    RESULT_DRAW: (DRAW_SCORE, DRAW_SCORE),
}

# Colour preferences, strongest first
SHOULD_BE_WHITE = "should_be_white"
SHOULD_BE_BLACK = "should_be_black"
PREFERS_WHITE = "prefers_white"
PREFERS_BLACK = "prefers_black"
NEUTRAL = "neutral"

# White/black imbalance at which a colour becomes mandatory
ABSOLUTE_COLOUR_IMBALANCE = 2

# Batch id namespaces
AUTOMATIC_BATCH_PREFIX = "batch_"
MANUAL_BATCH_PREFIX = "manual_"

# Tournament format and display modes
FORMAT_RUN_THROUGH = "run-through"
DISPLAY_POINTS = "points"
DISPLAY_PERCENTAGE = "percentage"
DISPLAY_MODES = (DISPLAY_POINTS, DISPLAY_PERCENTAGE)

# Default settings for a new tournament
DEFAULT_CONSTRAINT_X = 3  # recent opponent window, in matches
DEFAULT_CONSTRAINT_Y = 3.0  # allowed score gap
DEFAULT_AVOID_SAME_CLASS = False
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# CSV header aliases (lower case)
CSV_FIRST_NAME_HEADERS = ("voornaam", "firstname", "first name", "first")
CSV_LAST_NAME_HEADERS = ("naam", "lastname", "last name", "surname")
CSV_GENERIC_NAME_HEADER = "name"
CSV_CLASS_HEADERS = ("klas", "class", "grade")
