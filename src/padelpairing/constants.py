# Padel Pairing
# Copyright (C) 2025  Padel Pairing developers
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
APP_NAME = "Padel Pairing"
PLAYERS_PER_TEAM = 2
PLAYERS_PER_COURT = 4

# Slot timing
DEFAULT_SLOT_MINUTES = 20
TIME_LABEL_FORMAT = "%H:%M"

# Attempt budgets
DEFAULT_MAX_ATTEMPTS = 1000
DEFAULT_MAX_RESTARTS = 5

# Pairing weights
PARTNER_REPEAT_WEIGHT = 100
OPPONENT_REPEAT_WEIGHT = 50
BALANCE_BONUS_WEIGHT = 20
STREAK_PENALTY_WEIGHT = 100
STREAK_THRESHOLD = 2

DEFAULT_WEIGHTS = {
    "partner_repeat": PARTNER_REPEAT_WEIGHT,
    "opponent_repeat": OPPONENT_REPEAT_WEIGHT,
    "balance_bonus": BALANCE_BONUS_WEIGHT,
    "streak_penalty": STREAK_PENALTY_WEIGHT,
    "streak_threshold": STREAK_THRESHOLD,
    "partner_step_threshold": None,
}

# Small sessions play the same few people all evening, so partner history
# only counts once a pair has already been together twice.
SMALL_SESSION_WEIGHTS = {
    "partner_repeat": PARTNER_REPEAT_WEIGHT,
    "opponent_repeat": 5,
    "balance_bonus": 0,
    "streak_penalty": 0,
    "streak_threshold": STREAK_THRESHOLD,
    "partner_step_threshold": 2,
}

# Session presets keyed by roster size
SESSION_PRESETS = {
    12: {
        "slot_count": 9,
        "courts_per_slot": 2,
        "matches_per_player": 6,
        "rests_per_player": 3,
        "weights": SMALL_SESSION_WEIGHTS,
        "emergency_from_slot": None,
    },
    24: {
        "slot_count": 6,
        "courts_per_slot": 4,
        "matches_per_player": 4,
        "rests_per_player": 2,
        "weights": DEFAULT_WEIGHTS,
        "emergency_from_slot": None,
    },
    30: {
        "slot_count": 9,
        "courts_per_slot": 5,
        "matches_per_player": 6,
        "rests_per_player": 3,
        "weights": DEFAULT_WEIGHTS,
        # Last three slots are filled with random legal splits
        "emergency_from_slot": 6,
    },
}
SUPPORTED_ROSTER_SIZES = sorted(SESSION_PRESETS)

# Export labels
CSV_PERIOD_HEADER = "Time Period"
CSV_COURT_HEADER = "Court {court}"
CSV_RESTING_HEADER = "Resting Players"
TEAM_SEPARATOR = " + "
VERSUS_LABEL = "VS"
RESTING_SEPARATOR = " | "
