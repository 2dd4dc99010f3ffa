"""Choose which players sit out a slot."""

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

import math
import random
from typing import Collection, List, Optional

from padelpairing.models.session import PlayerLedger, SessionConfig
from padelpairing.type_hints import PlayerId, RestingSet, Roster
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


def _max_rests(slots: int) -> int:
    """Most rests that fit in ``slots`` consecutive slots without two in a row."""
    return max(0, (slots + 1) // 2)


def rest_need(ledger: PlayerLedger, player: PlayerId, config: SessionConfig) -> int:
    """Rests the player still has to take before the session ends."""
    return config.rests_per_player - ledger[player].matches_resting


def pace_cap(slot_index: int, config: SessionConfig) -> int:
    """Rests a player may have taken by the end of this slot without running ahead."""
    return math.ceil(config.rests_per_player * (slot_index + 1) / config.slot_count)


def must_rest_now(need: int, remaining_slots: int) -> bool:
    """
    A player who skips this slot can still fit ``_max_rests(remaining - 1)``
    rests; anything beyond that has to start now.
    """
    return need > 0 and need > _max_rests(remaining_slots - 1)


def _is_stranded(need: int, remaining_slots: int, rested_last_slot: bool) -> bool:
    """True when the player's remaining rests can no longer be scheduled."""
    if rested_last_slot:
        return need > _max_rests(remaining_slots - 1)
    # Rest now, skip the next slot, then alternate
    return need > 1 + _max_rests(remaining_slots - 2)


def select_resting_players(
    roster: Roster,
    ledger: PlayerLedger,
    config: SessionConfig,
    slot_index: int,
    previous_resting: Collection[PlayerId],
    rng: random.Random,
) -> Optional[RestingSet]:
    """Pick exactly ``config.resting_per_slot`` players to sit out a slot.

    Nobody who rested in the previous slot is picked. Candidates are taken in
    three passes:

    1. Forced rests: players who would otherwise run out of slots to take
       their remaining rests. More of them than resting places fails the
       attempt.
    2. Fairness rests: players still owing rests and below the pacing cap for
       this point of the session, largest need first.
    3. Fallback rests: any other player still owing rests.

    Ties in passes 2 and 3 are broken by shuffling with ``rng`` before the
    stable sort, so retries explore different resting sets.

    Args:
        roster: Ordered player names
        ledger: Statistics of all committed slots
        config: Session configuration
        slot_index: 0-based index of the slot being built
        previous_resting: Resting set of the previous slot
        rng: Injected random source

    Returns:
        Resting players in roster order, or None when no valid set exists
        for this attempt
    """
    required = config.resting_per_slot
    remaining_slots = config.slot_count - slot_index
    excluded = set(previous_resting)

    for player in roster:
        need = rest_need(ledger, player, config)
        if _is_stranded(need, remaining_slots, player in excluded):
            logger.debug(
                f"Slot {slot_index + 1}: {player} can no longer take {need} rests"
                f" in {remaining_slots} slots"
            )
            return None

    selected: List[PlayerId] = []

    # 1. Forced rests
    forced = [
        p
        for p in roster
        if p not in excluded
        and must_rest_now(rest_need(ledger, p, config), remaining_slots)
    ]
    if len(forced) > required:
        logger.debug(
            f"Slot {slot_index + 1}: {len(forced)} players must rest,"
            f" only {required} places"
        )
        return None
    selected.extend(forced)

    # 2. Fairness-priority rests
    if len(selected) < required:
        cap = pace_cap(slot_index, config)
        candidates = [
            p
            for p in roster
            if p not in selected
            and p not in excluded
            and rest_need(ledger, p, config) > 0
            and ledger[p].matches_resting < cap
        ]
        rng.shuffle(candidates)
        candidates.sort(key=lambda p: rest_need(ledger, p, config), reverse=True)
        selected.extend(candidates[: required - len(selected)])

    # 3. Fallback rests
    if len(selected) < required:
        fallback = [
            p
            for p in roster
            if p not in selected
            and p not in excluded
            and rest_need(ledger, p, config) > 0
        ]
        rng.shuffle(fallback)
        selected.extend(fallback[: required - len(selected)])

    if len(selected) < required:
        logger.debug(
            f"Slot {slot_index + 1}: only {len(selected)} of {required}"
            " eligible resting players"
        )
        return None

    chosen = set(selected)
    return [p for p in roster if p in chosen]
