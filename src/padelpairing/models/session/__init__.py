"""Session data models."""

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

from padelpairing.models.session.ledger import LedgerEntry, PlayerLedger
from padelpairing.models.session.schedule import Match, Schedule, Slot
from padelpairing.models.session.session_config import PairingWeights, SessionConfig

__all__ = [
    "LedgerEntry",
    "Match",
    "PairingWeights",
    "PlayerLedger",
    "Schedule",
    "SessionConfig",
    "Slot",
]
