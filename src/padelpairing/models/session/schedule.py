"""Data models for matches, slots and finished schedules."""

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

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

from padelpairing.type_hints import PlayerId, Team


@dataclass(frozen=True)
class Match:
    """One 2v2 match on a court.

    Attributes
    ----------
    court : int
        Court number, starting at 1.
    team1 : tuple of str
        The two players on the first side.
    team2 : tuple of str
        The two players on the second side.
    """

    court: int
    team1: Team
    team2: Team

    @property
    def players(self) -> Tuple[PlayerId, PlayerId, PlayerId, PlayerId]:
        return (self.team1[0], self.team1[1], self.team2[0], self.team2[1])

    def teammate_of(self, player: PlayerId) -> PlayerId:
        """Return the partner of ``player`` in this match."""
        for team in (self.team1, self.team2):
            if player == team[0]:
                return team[1]
            if player == team[1]:
                return team[0]
        raise KeyError(f"{player} is not playing on court {self.court}")

    def opponents_of(self, player: PlayerId) -> Team:
        """Return the two players across the net from ``player``."""
        if player in self.team1:
            return self.team2
        if player in self.team2:
            return self.team1
        raise KeyError(f"{player} is not playing on court {self.court}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "court": self.court,
            "team1": list(self.team1),
            "team2": list(self.team2),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            court=data["court"],
            team1=tuple(data["team1"]),
            team2=tuple(data["team2"]),
        )


@dataclass(frozen=True)
class Slot:
    """All matches played at the same time plus the players sitting out.

    Attributes
    ----------
    index : int
        0-based position of the slot in the session.
    period : str
        Display label of the time period.
    matches : tuple of Match
        One match per court, ordered by court number.
    resting_players : tuple of str
        Players sitting out this slot, in roster order.
    """

    index: int
    period: str
    matches: Tuple[Match, ...]
    resting_players: Tuple[PlayerId, ...]

    @property
    def playing_players(self) -> List[PlayerId]:
        return [player for match in self.matches for player in match.players]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize slot to dictionary."""
        return {
            "index": self.index,
            "period": self.period,
            "matches": [m.to_dict() for m in self.matches],
            "resting_players": list(self.resting_players),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Slot":
        """Deserialize slot from dictionary."""
        return cls(
            index=data["index"],
            period=data["period"],
            matches=tuple(Match.from_dict(m) for m in data.get("matches", [])),
            resting_players=tuple(data.get("resting_players", [])),
        )


@dataclass(frozen=True)
class Schedule:
    """A finished session schedule. Never mutated once returned.

    Attributes
    ----------
    roster : tuple of str
        Player names in the order they were supplied.
    slots : tuple of Slot
        Every slot of the session in play order.
    """

    roster: Tuple[PlayerId, ...]
    slots: Tuple[Slot, ...]

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    @property
    def courts_per_slot(self) -> int:
        return max((len(slot.matches) for slot in self.slots), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize schedule to dictionary."""
        return {
            "roster": list(self.roster),
            "slots": [s.to_dict() for s in self.slots],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Schedule":
        """Deserialize schedule from dictionary."""
        return cls(
            roster=tuple(data.get("roster", [])),
            slots=tuple(Slot.from_dict(s) for s in data.get("slots", [])),
        )
