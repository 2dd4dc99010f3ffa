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


from typing import List, Optional

from padelpairing.models.session import Match, Schedule, Slot
from padelpairing.validation.schedule_checker import FairnessSummary


class SchedulePrintUtils:
    """Plain-text rendering of schedules for terminals and log files."""

    @staticmethod
    def format_match(match: Match) -> str:
        """
        Format one court.

        Returns:
            e.g. ``"Court 1: Ana/Ben vs Cleo/Dan"``
        """
        return (
            f"Court {match.court}: {match.team1[0]}/{match.team1[1]}"
            f" vs {match.team2[0]}/{match.team2[1]}"
        )

    @staticmethod
    def format_slot(slot: Slot) -> List[str]:
        """
        Format one slot as lines of text.

        Returns:
            Period line, resting line and one line per court
        """
        lines = [f"Time Slot: {slot.period}"]
        lines.append(f"Resting: {', '.join(slot.resting_players) or '-'}")
        lines.extend(SchedulePrintUtils.format_match(m) for m in slot.matches)
        return lines

    @staticmethod
    def format_fairness(summary: FairnessSummary) -> List[str]:
        return [
            "Fairness:",
            f"  Distinct partnerships: {summary.distinct_partnerships}",
            f"  Repeated partnerships: {summary.repeated_partnerships}"
            f" (max {summary.max_partner_repeats} times together)",
            f"  Repeated opponent pairs: {summary.repeated_opponent_pairs}",
            f"  Longest playing streak: {summary.longest_playing_streak} slots",
        ]


def format_schedule(
    schedule: Schedule, summary: Optional[FairnessSummary] = None
) -> str:
    """Render a whole schedule, slots separated by blank lines."""
    blocks = ["\n".join(SchedulePrintUtils.format_slot(s)) for s in schedule.slots]
    if summary is not None:
        blocks.append("\n".join(SchedulePrintUtils.format_fairness(summary)))
    return "\n\n".join(blocks) + "\n"
