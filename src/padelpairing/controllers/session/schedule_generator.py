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

import random
from typing import List, Optional, Sequence

from padelpairing.controllers.session.config_resolver import resolve_config
from padelpairing.exceptions import (
    GenerationCancelledException,
    GenerationExhaustedException,
)
from padelpairing.models.session import PlayerLedger, Schedule, SessionConfig, Slot
from padelpairing.pairing.doubles import pair_slot, playing_pool
from padelpairing.pairing.resting import select_resting_players
from padelpairing.type_hints import CancelCheck, PlayerId, Roster
from padelpairing.utils import setup_logger
from padelpairing.utils.labels import period_label
from padelpairing.validation.schedule_checker import validate_schedule

logger = setup_logger(__name__)


class ScheduleGenerator:
    """Builds a full session schedule one slot at a time.

    This class is responsible for:
    - Running the bounded attempt loop for every slot
    - Committing a slot to the ledger only once it is complete
    - Restarting the whole schedule when a slot cannot be built
    - Validating the finished schedule before returning it
    """

    def __init__(
        self,
        roster: Roster,
        config: SessionConfig,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the generator.

        Args:
            roster: Ordered, unique player names (already resolved)
            config: Validated session configuration
            rng: Random source for tie-breaking; an unseeded one is created
                when omitted
        """
        self.roster: List[PlayerId] = list(roster)
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.restarts = 0

    def generate(self, should_cancel: CancelCheck = None) -> Schedule:
        """Generate and validate a complete schedule.

        Args:
            should_cancel: Optional callable checked before every slot
                attempt; generation stops when it returns True

        Returns:
            The finished Schedule

        Raises:
            GenerationExhaustedException: If a slot could not be built after
                every restart
            GenerationCancelledException: If ``should_cancel`` returned True
            ScheduleInvariantViolation: If the finished schedule is invalid
        """
        logger.info(
            f"Generating schedule for {len(self.roster)} players over"
            f" {self.config.slot_count} slots"
        )
        self.restarts = 0
        while True:
            try:
                slots = self._generate_slots(should_cancel)
                break
            except GenerationExhaustedException as e:
                if self.restarts >= self.config.max_restarts:
                    logger.error(f"{e}; giving up after {self.restarts} restarts")
                    raise GenerationExhaustedException(
                        e.slot_index, e.attempts, self.restarts
                    ) from e
                self.restarts += 1
                logger.warning(
                    f"Slot {e.slot_index + 1} exhausted {e.attempts} attempts,"
                    f" restarting schedule ({self.restarts}/{self.config.max_restarts})"
                )

        schedule = Schedule(roster=tuple(self.roster), slots=tuple(slots))
        validate_schedule(schedule, self.config)
        logger.info(f"Schedule complete after {self.restarts} restarts")
        return schedule

    def _generate_slots(self, should_cancel: CancelCheck) -> List[Slot]:
        """Build every slot against a fresh ledger."""
        ledger = PlayerLedger(self.roster)
        slots: List[Slot] = []
        previous_resting: Sequence[PlayerId] = ()

        for slot_index in range(self.config.slot_count):
            slot = self._build_slot(slot_index, ledger, previous_resting, should_cancel)
            ledger.record_played(slot.matches)
            ledger.record_rested(slot.resting_players)
            slots.append(slot)
            previous_resting = slot.resting_players
            if self.config.uses_emergency_pairing(slot_index):
                logger.warning(
                    f"Slot {slot_index + 1} paired at random, partner history ignored"
                )
            logger.info(
                f"Committed slot {slot_index + 1} ({slot.period}):"
                f" {len(slot.matches)} courts, {len(slot.resting_players)} resting"
            )
        return slots

    def _build_slot(
        self,
        slot_index: int,
        ledger: PlayerLedger,
        previous_resting: Sequence[PlayerId],
        should_cancel: CancelCheck,
    ) -> Slot:
        """Run the attempt loop for one slot.

        Nothing in the ledger changes here; the caller commits the result.

        Raises:
            GenerationExhaustedException: If the attempt budget runs out
        """
        for attempt in range(1, self.config.max_attempts + 1):
            if should_cancel is not None and should_cancel():
                raise GenerationCancelledException(slot_index)

            slot = self._try_slot(slot_index, ledger, previous_resting)
            if slot is not None:
                if attempt > 1:
                    logger.debug(f"Slot {slot_index + 1} built on attempt {attempt}")
                return slot

        raise GenerationExhaustedException(slot_index, self.config.max_attempts)

    def _try_slot(
        self,
        slot_index: int,
        ledger: PlayerLedger,
        previous_resting: Sequence[PlayerId],
    ) -> Optional[Slot]:
        """One attempt: choose a resting set, then fill every court."""
        resting = select_resting_players(
            self.roster,
            ledger,
            self.config,
            slot_index,
            previous_resting,
            self.rng,
        )
        if resting is None:
            return None

        pool = playing_pool(self.roster, ledger, resting, self.config)
        if len(pool) != self.config.playing_per_slot:
            logger.debug(
                f"Slot {slot_index + 1}: {len(pool)} players available for"
                f" {self.config.playing_per_slot} places"
            )
            return None

        matches = pair_slot(pool, ledger, self.config, slot_index, self.rng)
        if matches is None:
            return None

        return Slot(
            index=slot_index,
            period=period_label(
                slot_index, self.config.slot_minutes, self.config.start_time
            ),
            matches=tuple(matches),
            resting_players=tuple(resting),
        )


def generate_schedule(
    roster: Roster,
    config: Optional[SessionConfig] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    should_cancel: CancelCheck = None,
) -> Schedule:
    """Resolve the configuration for ``roster`` and generate its schedule.

    Args:
        roster: Ordered, unique player names
        config: Explicit configuration; the roster-size preset when omitted
        seed: Seed for a new random source (ignored when ``rng`` is given)
        rng: Random source to draw tie-breaks from
        should_cancel: Optional cancellation hook, see ScheduleGenerator.generate

    Returns:
        The finished Schedule

    Raises:
        DuplicatePlayerException: If the roster repeats a name
        UnsupportedRosterSizeException: If no configuration fits the roster
        InvalidConfigurationException: If the configuration is inconsistent
        GenerationExhaustedException: If the attempt budget ran out
    """
    resolved = resolve_config(roster, config)
    if rng is None:
        rng = random.Random(seed)
    generator = ScheduleGenerator(roster, resolved, rng)
    return generator.generate(should_cancel)
