"""SessionConfig and PairingWeights data classes."""

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
from typing import Any, Dict, List, Mapping, Optional

from padelpairing.constants import (
    BALANCE_BONUS_WEIGHT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_RESTARTS,
    DEFAULT_SLOT_MINUTES,
    OPPONENT_REPEAT_WEIGHT,
    PARTNER_REPEAT_WEIGHT,
    PLAYERS_PER_COURT,
    STREAK_PENALTY_WEIGHT,
    STREAK_THRESHOLD,
)
from padelpairing.exceptions import InvalidConfigurationException


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class PairingWeights:
    """Penalty weights used when scoring a 2v2 split.

    Attributes
    ----------
    partner_repeat : int
        Weight per repeated partnership inside either team.
    opponent_repeat : int
        Weight per repeated opponent pairing across the net.
    balance_bonus : int
        Reward per match a player still has to play.
    streak_penalty : int
        Penalty per player already on a playing streak.
    streak_threshold : int
        Streak length at which ``streak_penalty`` applies.
    partner_step_threshold : int or None
        When set, a team scores one partner repeat only if the pair has
        already been together at least this many times.
    """

    partner_repeat: int = PARTNER_REPEAT_WEIGHT
    opponent_repeat: int = OPPONENT_REPEAT_WEIGHT
    balance_bonus: int = BALANCE_BONUS_WEIGHT
    streak_penalty: int = STREAK_PENALTY_WEIGHT
    streak_threshold: int = STREAK_THRESHOLD
    partner_step_threshold: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize weights to dictionary."""
        return {
            "partner_repeat": self.partner_repeat,
            "opponent_repeat": self.opponent_repeat,
            "balance_bonus": self.balance_bonus,
            "streak_penalty": self.streak_penalty,
            "streak_threshold": self.streak_threshold,
            "partner_step_threshold": self.partner_step_threshold,
        }

    def collect_errors(self) -> List[str]:
        """Describe every inconsistent weight; empty when the weights are usable."""
        errors = []
        for name in (
            "partner_repeat",
            "opponent_repeat",
            "balance_bonus",
            "streak_penalty",
        ):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                errors.append(
                    f"weight {name} must be a non-negative integer, got {value!r}"
                )
        if not _is_int(self.streak_threshold) or self.streak_threshold < 1:
            errors.append(
                f"streak_threshold must be at least 1, got {self.streak_threshold!r}"
            )
        step = self.partner_step_threshold
        if step is not None and (not _is_int(step) or step < 1):
            errors.append(f"partner_step_threshold must be at least 1, got {step!r}")
        return errors

    def validate(self) -> None:
        """Check the weights.

        Raises:
            InvalidConfigurationException: If any weight is unusable
        """
        errors = self.collect_errors()
        if errors:
            raise InvalidConfigurationException(
                "Invalid pairing weights: " + "; ".join(errors)
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PairingWeights":
        """Deserialize weights from dictionary."""
        if not isinstance(data, Mapping):
            raise InvalidConfigurationException(
                f"Pairing weights must be an object, got {type(data).__name__}"
            )
        return cls(
            partner_repeat=data.get("partner_repeat", PARTNER_REPEAT_WEIGHT),
            opponent_repeat=data.get("opponent_repeat", OPPONENT_REPEAT_WEIGHT),
            balance_bonus=data.get("balance_bonus", BALANCE_BONUS_WEIGHT),
            streak_penalty=data.get("streak_penalty", STREAK_PENALTY_WEIGHT),
            streak_threshold=data.get("streak_threshold", STREAK_THRESHOLD),
            partner_step_threshold=data.get("partner_step_threshold"),
        )


@dataclass
class SessionConfig:
    """Resolved configuration of one playing session.

    Attributes
    ----------
    total_players : int
        Roster size.
    slot_count : int
        Number of time slots in the session.
    courts_per_slot : int
        Courts played simultaneously in every slot.
    matches_per_player : int
        Exact number of matches each player plays.
    rests_per_player : int
        Exact number of slots each player sits out.
    slot_minutes : int
        Length of one slot, used for period labels.
    start_time : str or None
        Clock time of the first slot. Labels are relative minute ranges
        when unset.
    max_attempts : int
        Attempt budget for a single slot.
    max_restarts : int
        Full-schedule restarts allowed after a slot exhausts its budget.
    emergency_from_slot : int or None
        0-based slot index from which teams are drawn at random instead of
        scored.
    weights : PairingWeights
        Pairing penalty weights.
    """

    total_players: int
    slot_count: int
    courts_per_slot: int
    matches_per_player: int
    rests_per_player: int
    slot_minutes: int = DEFAULT_SLOT_MINUTES
    start_time: Optional[str] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_restarts: int = DEFAULT_MAX_RESTARTS
    emergency_from_slot: Optional[int] = None
    weights: PairingWeights = field(default_factory=PairingWeights)

    @property
    def playing_per_slot(self) -> int:
        return PLAYERS_PER_COURT * self.courts_per_slot

    @property
    def resting_per_slot(self) -> int:
        return self.total_players - self.playing_per_slot

    def uses_emergency_pairing(self, slot_index: int) -> bool:
        """Check whether teams for this slot are drawn without scoring."""
        return (
            self.emergency_from_slot is not None
            and slot_index >= self.emergency_from_slot
        )

    def validate(self) -> None:
        """Check that the quotas describe a session that can exist.

        Raises:
            InvalidConfigurationException: If any quota is inconsistent
        """
        not_numbers = [
            name
            for name in (
                "total_players",
                "slot_count",
                "courts_per_slot",
                "matches_per_player",
                "rests_per_player",
                "slot_minutes",
                "max_attempts",
                "max_restarts",
            )
            if not _is_int(getattr(self, name))
        ]
        if self.emergency_from_slot is not None and not _is_int(
            self.emergency_from_slot
        ):
            not_numbers.append("emergency_from_slot")
        if not_numbers:
            raise InvalidConfigurationException(
                "Invalid session configuration: not an integer: "
                + ", ".join(not_numbers)
            )

        errors = []
        if self.courts_per_slot < 1:
            errors.append("at least one court is required")
        if self.slot_count < 1:
            errors.append("at least one slot is required")
        if self.playing_per_slot > self.total_players:
            errors.append(
                f"{self.courts_per_slot} courts need {self.playing_per_slot} players,"
                f" only {self.total_players} available"
            )
        if self.matches_per_player < 0 or self.rests_per_player < 0:
            errors.append("quotas must not be negative")
        if self.matches_per_player + self.rests_per_player != self.slot_count:
            errors.append(
                f"matches ({self.matches_per_player}) + rests ({self.rests_per_player})"
                f" must equal slots ({self.slot_count})"
            )
        if (
            self.total_players * self.matches_per_player
            != self.slot_count * self.playing_per_slot
        ):
            errors.append(
                f"{self.total_players} players x {self.matches_per_player} matches"
                f" does not fill {self.slot_count} slots x {self.playing_per_slot}"
                " playing places"
            )
        if (
            self.total_players * self.rests_per_player
            != self.slot_count * self.resting_per_slot
        ):
            errors.append(
                f"{self.total_players} players x {self.rests_per_player} rests"
                f" does not fill {self.slot_count} slots x {self.resting_per_slot}"
                " resting places"
            )
        if self.slot_minutes < 1:
            errors.append("slot length must be at least one minute")
        if self.max_attempts < 1:
            errors.append("attempt budget must be at least 1")
        if self.max_restarts < 0:
            errors.append("restart budget must not be negative")
        if self.emergency_from_slot is not None and self.emergency_from_slot < 0:
            errors.append("emergency slot index must not be negative")
        errors.extend(self.weights.collect_errors())

        if errors:
            raise InvalidConfigurationException(
                "Invalid session configuration: " + "; ".join(errors)
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "total_players": self.total_players,
            "slot_count": self.slot_count,
            "courts_per_slot": self.courts_per_slot,
            "matches_per_player": self.matches_per_player,
            "rests_per_player": self.rests_per_player,
            "slot_minutes": self.slot_minutes,
            "start_time": self.start_time,
            "max_attempts": self.max_attempts,
            "max_restarts": self.max_restarts,
            "emergency_from_slot": self.emergency_from_slot,
            "weights": self.weights.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary."""
        if not isinstance(data, Mapping):
            raise InvalidConfigurationException(
                f"Session configuration must be an object, got {type(data).__name__}"
            )
        try:
            return cls(
                total_players=data["total_players"],
                slot_count=data["slot_count"],
                courts_per_slot=data["courts_per_slot"],
                matches_per_player=data["matches_per_player"],
                rests_per_player=data["rests_per_player"],
                slot_minutes=data.get("slot_minutes", DEFAULT_SLOT_MINUTES),
                start_time=data.get("start_time"),
                max_attempts=data.get("max_attempts", DEFAULT_MAX_ATTEMPTS),
                max_restarts=data.get("max_restarts", DEFAULT_MAX_RESTARTS),
                emergency_from_slot=data.get("emergency_from_slot"),
                weights=PairingWeights.from_dict(data.get("weights", {})),
            )
        except KeyError as e:
            raise InvalidConfigurationException(
                f"Missing configuration field: {e.args[0]}"
            ) from e
