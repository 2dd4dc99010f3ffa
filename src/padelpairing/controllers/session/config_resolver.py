"""Resolve and validate the session configuration for a roster."""

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
from dataclasses import fields
from typing import Any, Dict, Optional

from padelpairing.constants import SESSION_PRESETS, SUPPORTED_ROSTER_SIZES
from padelpairing.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
    UnsupportedRosterSizeException,
)
from padelpairing.models.session import PairingWeights, SessionConfig
from padelpairing.type_hints import Roster
from padelpairing.utils import setup_logger
from padelpairing.utils.labels import parse_start_time

logger = setup_logger(__name__)

PRESET_OVERRIDE_FIELDS = frozenset(
    f.name for f in fields(SessionConfig) if f.name != "total_players"
)


def check_roster(roster: Roster) -> None:
    """Reject rosters with repeated names.

    Names are compared exactly; ``"Ana"`` and ``"ana"`` are different players.

    Raises:
        DuplicatePlayerException: If any name occurs more than once
    """
    counts = Counter(roster)
    duplicates = [name for name, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicatePlayerException(duplicates)


def preset_config(roster_size: int, **overrides: Any) -> SessionConfig:
    """Build the preset configuration for a roster size.

    Args:
        roster_size: Number of players
        **overrides: SessionConfig fields replacing the preset values; an
            explicit None is kept, e.g. ``emergency_from_slot=None`` turns
            the emergency strategy off

    Returns:
        A new SessionConfig

    Raises:
        UnsupportedRosterSizeException: If there is no preset for the size
        InvalidConfigurationException: If an override is not a session field
    """
    preset: Optional[Dict[str, Any]] = SESSION_PRESETS.get(roster_size)
    if preset is None:
        raise UnsupportedRosterSizeException(roster_size, SUPPORTED_ROSTER_SIZES)

    values = dict(preset)
    values["weights"] = PairingWeights.from_dict(preset["weights"])
    unknown = sorted(set(overrides) - PRESET_OVERRIDE_FIELDS)
    if unknown:
        raise InvalidConfigurationException(
            f"Unknown session configuration fields: {', '.join(unknown)}"
        )
    values.update(overrides)
    return SessionConfig(total_players=roster_size, **values)


def resolve_config(
    roster: Roster, config: Optional[SessionConfig] = None
) -> SessionConfig:
    """Validate a roster and return the configuration to schedule it with.

    Args:
        roster: Ordered, unique player names
        config: Explicit configuration; the preset for the roster size is
            used when omitted

    Returns:
        A validated SessionConfig

    Raises:
        DuplicatePlayerException: If the roster repeats a name
        UnsupportedRosterSizeException: If no configuration fits the roster
        InvalidConfigurationException: If the configuration is inconsistent
            or the start time cannot be parsed
    """
    check_roster(roster)

    if config is None:
        config = preset_config(len(roster))
    elif config.total_players != len(roster):
        raise UnsupportedRosterSizeException(len(roster), [config.total_players])

    config.validate()
    if config.start_time:
        parse_start_time(config.start_time)

    logger.info(
        f"Resolved session for {config.total_players} players:"
        f" {config.slot_count} slots, {config.courts_per_slot} courts,"
        f" {config.matches_per_player} matches and {config.rests_per_player}"
        " rests per player"
    )
    return config
