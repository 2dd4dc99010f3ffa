"""Doubles court pairing: split the playing players into 2v2 matches."""

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
from itertools import combinations
from typing import Collection, Dict, Iterator, List, Optional, Sequence, Tuple

from padelpairing.constants import PLAYERS_PER_COURT
from padelpairing.models.session import (
    Match,
    PairingWeights,
    PlayerLedger,
    SessionConfig,
)
from padelpairing.type_hints import PlayerId, Roster, Team, TeamSplit
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


def _team_splits(quad: Sequence[PlayerId]) -> Iterator[TeamSplit]:
    """The three distinct ways to split four players into two teams."""
    a, b, c, d = quad
    yield (a, b), (c, d)
    yield (a, c), (b, d)
    yield (a, d), (b, c)


def _partner_term(team: Team, ledger: PlayerLedger, weights: PairingWeights) -> int:
    count = ledger.partner_count(team[0], team[1])
    if weights.partner_step_threshold is None:
        return count
    return 1 if count >= weights.partner_step_threshold else 0


def score_split(
    team1: Team,
    team2: Team,
    ledger: PlayerLedger,
    weights: PairingWeights,
    matches_quota: int,
) -> int:
    """
    Penalty of playing ``team1`` against ``team2``; lower is better.

    score = partner_repeat  * partner repeats within both teams
          + opponent_repeat * opponent repeats across the net
          - balance_bonus   * matches still owed by the four players
          + streak_penalty  * players already on a playing streak
    """
    partner_repeats = _partner_term(team1, ledger, weights) + _partner_term(
        team2, ledger, weights
    )
    opponent_repeats = sum(
        ledger.opponent_count(player, opponent)
        for player in team1
        for opponent in team2
    )
    players = team1 + team2
    matches_left = sum(matches_quota - ledger[p].matches_played for p in players)
    on_streak = sum(
        1 for p in players if ledger[p].consecutive_matches >= weights.streak_threshold
    )

    return (
        weights.partner_repeat * partner_repeats
        + weights.opponent_repeat * opponent_repeats
        - weights.balance_bonus * matches_left
        + weights.streak_penalty * on_streak
    )


def playing_pool(
    roster: Roster,
    ledger: PlayerLedger,
    resting: Collection[PlayerId],
    config: SessionConfig,
) -> List[PlayerId]:
    """Players available for courts: not resting and below their match quota."""
    resting_set = set(resting)
    return [
        p
        for p in roster
        if p not in resting_set and ledger[p].matches_played < config.matches_per_player
    ]


def _order_team(team: Team, position: Dict[PlayerId, int]) -> Team:
    return tuple(sorted(team, key=position.__getitem__))


def best_court_split(
    pool: Sequence[PlayerId],
    ledger: PlayerLedger,
    weights: PairingWeights,
    matches_quota: int,
) -> Optional[Tuple[TeamSplit, int]]:
    """Search every 2v2 split of every four players in ``pool``.

    The first split with the lowest score wins, in ``itertools.combinations``
    order over ``pool``.

    Returns:
        ((team1, team2), score), or None if fewer than four players remain
    """
    best: Optional[TeamSplit] = None
    best_score = 0
    for quad in combinations(pool, PLAYERS_PER_COURT):
        for team1, team2 in _team_splits(quad):
            score = score_split(team1, team2, ledger, weights, matches_quota)
            if best is None or score < best_score:
                best = (team1, team2)
                best_score = score
    if best is None:
        return None
    return best, best_score


def create_court_pairings(
    pool: Sequence[PlayerId],
    ledger: PlayerLedger,
    config: SessionConfig,
) -> Optional[List[Match]]:
    """Greedily fill every court with the lowest-penalty split.

    Courts are filled one at a time; each chosen split removes its four
    players from the pool for the following courts.

    Args:
        pool: Players available for this slot, in roster order
        ledger: Statistics of all committed slots (read only)
        config: Session configuration

    Returns:
        One Match per court, or None if a court cannot be filled
    """
    position = {p: i for i, p in enumerate(pool)}
    remaining = list(pool)
    matches: List[Match] = []

    for court in range(1, config.courts_per_slot + 1):
        result = best_court_split(
            remaining, ledger, config.weights, config.matches_per_player
        )
        if result is None:
            logger.debug(
                f"No players left for court {court}: {len(remaining)} available"
            )
            return None

        (team1, team2), score = result
        logger.debug(f"Court {court}: {team1} vs {team2} (score {score})")
        matches.append(
            Match(
                court=court,
                team1=_order_team(team1, position),
                team2=_order_team(team2, position),
            )
        )
        taken = set(team1 + team2)
        remaining = [p for p in remaining if p not in taken]

    return matches


def create_emergency_pairings(
    pool: Sequence[PlayerId],
    config: SessionConfig,
    rng: random.Random,
) -> Optional[List[Match]]:
    """Fill every court with a random legal split, ignoring history.

    Returns:
        One Match per court, or None if the pool is too small
    """
    if len(pool) < config.playing_per_slot:
        return None

    position = {p: i for i, p in enumerate(pool)}
    shuffled = list(pool)
    rng.shuffle(shuffled)

    matches: List[Match] = []
    for court in range(1, config.courts_per_slot + 1):
        start = (court - 1) * PLAYERS_PER_COURT
        a, b, c, d = shuffled[start : start + PLAYERS_PER_COURT]
        matches.append(
            Match(
                court=court,
                team1=_order_team((a, b), position),
                team2=_order_team((c, d), position),
            )
        )
    return matches


def pair_slot(
    pool: Sequence[PlayerId],
    ledger: PlayerLedger,
    config: SessionConfig,
    slot_index: int,
    rng: random.Random,
) -> Optional[List[Match]]:
    """Pair a slot with the strategy configured for its position."""
    if config.uses_emergency_pairing(slot_index):
        logger.debug(f"Slot {slot_index + 1}: using emergency pairing")
        return create_emergency_pairings(pool, config, rng)
    return create_court_pairings(pool, ledger, config)
