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

from typing import Callable, List, Optional, Sequence, Tuple

# Players are identified by their display name
PlayerId = str
# Ordered list of unique player names
Roster = Sequence[PlayerId]
# Two players sharing a side of the court
Team = Tuple[PlayerId, PlayerId]
# Both teams of one court
TeamSplit = Tuple[Team, Team]
# Players sitting out a slot
RestingSet = List[PlayerId]
# Cancellation hook checked between slot attempts
CancelCheck = Optional[Callable[[], bool]]

#  LocalWords:  TeamSplit RestingSet
