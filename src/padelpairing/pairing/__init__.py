"""Resting-set selection and doubles court pairing."""

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

from padelpairing.pairing.doubles import (
    create_court_pairings,
    create_emergency_pairings,
    pair_slot,
    playing_pool,
    score_split,
)
from padelpairing.pairing.resting import select_resting_players

__all__ = [
    "create_court_pairings",
    "create_emergency_pairings",
    "pair_slot",
    "playing_pool",
    "score_split",
    "select_resting_players",
]
