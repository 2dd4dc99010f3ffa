"""Per-player running statistics kept while a schedule is generated."""

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

from dataclasses import dataclass, field
from typing import Dict, Iterable

from padelpairing.models.session.schedule import Match
from padelpairing.type_hints import PlayerId, Roster


@dataclass
class LedgerEntry:
    """
    Running statistics of a single player.

    Attributes
    ----------
    matches_played : int
        Matches played so far.
    matches_resting : int
        Slots sat out so far.
    consecutive_matches : int
        Length of the current playing streak; 0 right after a rest.
    consecutive_rests : int
        Length of the current resting streak; 0 right after a match.
    partner_counts : dict of str to int
        Times this player has been teamed with each other player.
    opponent_counts : dict of str to int
        Times this player has faced each other player.
    """

    matches_played: int = 0
    matches_resting: int = 0
    consecutive_matches: int = 0
    consecutive_rests: int = 0
    partner_counts: Dict[PlayerId, int] = field(default_factory=dict)
    opponent_counts: Dict[PlayerId, int] = field(default_factory=dict)


class PlayerLedger:
    """Statistics of every player in the roster.

    The ledger is owned by one generation run and only changes when a
    whole slot is committed.
    """

    def __init__(self, roster: Roster):
        self.entries: Dict[PlayerId, LedgerEntry] = {
            player: LedgerEntry() for player in roster
        }

    def __getitem__(self, player: PlayerId) -> LedgerEntry:
        return self.entries[player]

    def __contains__(self, player: PlayerId) -> bool:
        return player in self.entries

    def partner_count(self, player: PlayerId, partner: PlayerId) -> int:
        return self.entries[player].partner_counts.get(partner, 0)

    def opponent_count(self, player: PlayerId, opponent: PlayerId) -> int:
        return self.entries[player].opponent_counts.get(opponent, 0)

    def record_played(self, matches: Iterable[Match]) -> None:
        """Record a committed slot's matches for every playing player."""
        for match in matches:
            for player in match.players:
                entry = self.entries[player]
                entry.matches_played += 1
                entry.consecutive_matches += 1
                entry.consecutive_rests = 0

                teammate = match.teammate_of(player)
                entry.partner_counts[teammate] = (
                    entry.partner_counts.get(teammate, 0) + 1
                )
                for opponent in match.opponents_of(player):
                    entry.opponent_counts[opponent] = (
                        entry.opponent_counts.get(opponent, 0) + 1
                    )

    def record_rested(self, resting_players: Iterable[PlayerId]) -> None:
        """Record a committed slot's resting set."""
        for player in resting_players:
            entry = self.entries[player]
            entry.matches_resting += 1
            entry.consecutive_rests += 1
            entry.consecutive_matches = 0
