"""Schedule Checker - post-generation invariant validation.

Every check here should hold by construction. A failure means the
scheduling engine has a defect, so callers raise instead of recovering.
"""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Set

from padelpairing.exceptions import ScheduleInvariantViolation
from padelpairing.models.session import Schedule, SessionConfig, Slot
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Violation:
    """A single broken invariant."""

    check: str
    message: str
    slot_index: int = -1

    def __str__(self) -> str:
        if self.slot_index >= 0:
            return f"[{self.check}] slot {self.slot_index + 1}: {self.message}"
        return f"[{self.check}] {self.message}"


@dataclass
class ValidationReport:
    """Outcome of checking a whole schedule."""

    checked_slots: int
    violations: List[Violation] = field(default_factory=list)
    match_counts: Dict[str, int] = field(default_factory=dict)
    rest_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> List[str]:
        return [str(v) for v in self.violations]


@dataclass
class FairnessSummary:
    """How evenly partners and opponents were spread."""

    distinct_partnerships: int
    repeated_partnerships: int
    max_partner_repeats: int
    repeated_opponent_pairs: int
    longest_playing_streak: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "distinct_partnerships": self.distinct_partnerships,
            "repeated_partnerships": self.repeated_partnerships,
            "max_partner_repeats": self.max_partner_repeats,
            "repeated_opponent_pairs": self.repeated_opponent_pairs,
            "longest_playing_streak": self.longest_playing_streak,
        }


class ScheduleChecker:
    """Checks the hard invariants of a generated schedule."""

    def __init__(self, config: SessionConfig):
        self.config = config

    def check(self, schedule: Schedule) -> ValidationReport:
        """Run every check and collect all violations."""
        report = ValidationReport(checked_slots=len(schedule.slots))
        roster = list(schedule.roster)
        roster_set = set(roster)
        match_counts = Counter({p: 0 for p in roster})
        rest_counts = Counter({p: 0 for p in roster})

        if len(schedule.slots) != self.config.slot_count:
            report.violations.append(
                Violation(
                    "slot_count",
                    f"{len(schedule.slots)} slots, expected {self.config.slot_count}",
                )
            )

        previous_resting: FrozenSet[str] = frozenset()
        for index, slot in enumerate(schedule.slots):
            self._check_slot(slot, index, roster_set, report)

            resting = frozenset(slot.resting_players)
            for player in sorted(resting & previous_resting):
                report.violations.append(
                    Violation(
                        "consecutive_rest",
                        f"{player} rested in slots {index} and {index + 1}",
                        index,
                    )
                )
            previous_resting = resting

            match_counts.update(p for p in slot.playing_players if p in roster_set)
            rest_counts.update(p for p in slot.resting_players if p in roster_set)

        for player in roster:
            if match_counts[player] != self.config.matches_per_player:
                report.violations.append(
                    Violation(
                        "match_quota",
                        f"{player} has {match_counts[player]} matches,"
                        f" expected {self.config.matches_per_player}",
                    )
                )
            if rest_counts[player] != self.config.rests_per_player:
                report.violations.append(
                    Violation(
                        "rest_quota",
                        f"{player} has {rest_counts[player]} rests,"
                        f" expected {self.config.rests_per_player}",
                    )
                )

        report.match_counts = dict(match_counts)
        report.rest_counts = dict(rest_counts)
        return report

    def _check_slot(
        self, slot: Slot, index: int, roster_set: Set[str], report: ValidationReport
    ) -> None:
        def add(check: str, message: str) -> None:
            report.violations.append(Violation(check, message, index))

        courts = self.config.courts_per_slot
        if len(slot.matches) != courts:
            add("court_count", f"{len(slot.matches)} courts, expected {courts}")

        court_numbers = [m.court for m in slot.matches]
        if sorted(court_numbers) != list(range(1, len(slot.matches) + 1)):
            add("court_numbers", f"courts numbered {court_numbers}")

        playing = slot.playing_players
        expected_playing = self.config.playing_per_slot
        if len(playing) != expected_playing:
            add(
                "playing_count",
                f"{len(playing)} playing players, expected {expected_playing}",
            )
        duplicates = sorted(p for p, n in Counter(playing).items() if n > 1)
        if duplicates:
            add("duplicate_player", f"playing twice: {', '.join(duplicates)}")

        resting = list(slot.resting_players)
        expected_resting = self.config.resting_per_slot
        if len(resting) != expected_resting:
            add(
                "resting_count",
                f"{len(resting)} resting players, expected {expected_resting}",
            )

        both = sorted(set(playing) & set(resting))
        if both:
            add("play_and_rest", f"playing and resting: {', '.join(both)}")

        seen = set(playing) | set(resting)
        unknown = sorted(seen - roster_set)
        if unknown:
            add("unknown_player", f"not in roster: {', '.join(unknown)}")
        missing = sorted(roster_set - seen)
        if missing:
            add("missing_player", f"neither playing nor resting: {', '.join(missing)}")


def validate_schedule(schedule: Schedule, config: SessionConfig) -> ValidationReport:
    """Check a schedule and raise if any invariant is broken.

    Raises:
        ScheduleInvariantViolation: If the schedule is invalid
    """
    report = ScheduleChecker(config).check(schedule)
    if not report.is_valid:
        for message in report.messages:
            logger.error(message)
        raise ScheduleInvariantViolation(report.messages)
    logger.info(f"Schedule validated: {report.checked_slots} slots, no violations")
    return report


def summarize_fairness(schedule: Schedule) -> FairnessSummary:
    """Count repeated partnerships and opponent pairings across a schedule."""
    partners: Counter = Counter()
    opponents: Counter = Counter()
    streaks = {p: 0 for p in schedule.roster}
    longest = 0

    for slot in schedule.slots:
        for match in slot.matches:
            partners[frozenset(match.team1)] += 1
            partners[frozenset(match.team2)] += 1
            for a in match.team1:
                for b in match.team2:
                    opponents[frozenset((a, b))] += 1
        for player in slot.playing_players:
            streaks[player] = streaks.get(player, 0) + 1
            longest = max(longest, streaks[player])
        for player in slot.resting_players:
            streaks[player] = 0

    return FairnessSummary(
        distinct_partnerships=len(partners),
        repeated_partnerships=sum(1 for n in partners.values() if n > 1),
        max_partner_repeats=max(partners.values(), default=0),
        repeated_opponent_pairs=sum(1 for n in opponents.values() if n > 1),
        longest_playing_streak=longest,
    )
