import random

import pytest

from padelpairing.controllers.session import (
    ScheduleGenerator,
    generate_schedule,
    preset_config,
)
from padelpairing.controllers.session import schedule_generator
from padelpairing.exceptions import (
    GenerationCancelledException,
    GenerationExhaustedException,
    SchedulingException,
)
from padelpairing.models.session import PairingWeights, SessionConfig
from padelpairing.validation import ScheduleChecker

from conftest import make_roster


def _counts(schedule):
    matches = {p: 0 for p in schedule.roster}
    rests = {p: 0 for p in schedule.roster}
    for slot in schedule:
        for player in slot.playing_players:
            matches[player] += 1
        for player in slot.resting_players:
            rests[player] += 1
    return matches, rests


@pytest.mark.parametrize("size", [12, 24, 30])
def test_presets_generate_valid_schedules(size):
    roster = make_roster(size)
    config = preset_config(size)

    schedule = generate_schedule(roster, seed=11)

    assert len(schedule) == config.slot_count
    assert ScheduleChecker(config).check(schedule).is_valid
    matches, rests = _counts(schedule)
    assert set(matches.values()) == {config.matches_per_player}
    assert set(rests.values()) == {config.rests_per_player}


@pytest.mark.parametrize("size", [12, 24, 30])
def test_every_slot_uses_every_player_once(size):
    roster = make_roster(size)
    config = preset_config(size)
    schedule = generate_schedule(roster, seed=3)

    for slot in schedule:
        assert [m.court for m in slot.matches] == list(
            range(1, config.courts_per_slot + 1)
        )
        assert len(slot.resting_players) == config.resting_per_slot
        everyone = slot.playing_players + list(slot.resting_players)
        assert sorted(everyone) == sorted(roster)


def test_nobody_rests_twice_in_a_row():
    schedule = generate_schedule(make_roster(30), seed=5)

    for previous, current in zip(schedule.slots, schedule.slots[1:]):
        assert not set(previous.resting_players) & set(current.resting_players)


def test_resting_players_keep_roster_order(roster12):
    schedule = generate_schedule(roster12, seed=8)
    position = {p: i for i, p in enumerate(roster12)}

    for slot in schedule:
        indices = [position[p] for p in slot.resting_players]
        assert indices == sorted(indices)


def test_same_seed_same_schedule(roster12):
    first = generate_schedule(roster12, seed=42)
    second = generate_schedule(roster12, seed=42)

    assert first.to_dict() == second.to_dict()


def test_injected_rng_is_used(roster12):
    first = generate_schedule(roster12, rng=random.Random(9))
    second = generate_schedule(roster12, seed=1234, rng=random.Random(9))

    assert first.to_dict() == second.to_dict()


def test_custom_configuration():
    roster = make_roster(16)
    config = SessionConfig(
        total_players=16,
        slot_count=8,
        courts_per_slot=3,
        matches_per_player=6,
        rests_per_player=2,
    )

    schedule = generate_schedule(roster, config, seed=2)

    assert len(schedule) == 8
    matches, rests = _counts(schedule)
    assert set(matches.values()) == {6}
    assert set(rests.values()) == {2}


def test_period_labels_use_start_time(roster12):
    config = preset_config(12, start_time="18:00")

    schedule = generate_schedule(roster12, config, seed=1)

    assert schedule.slots[0].period == "18:00 - 18:20"
    assert schedule.slots[1].period == "18:20 - 18:40"
    assert schedule.slots[-1].period == "20:40 - 21:00"


def test_relative_period_labels_by_default(roster12):
    schedule = generate_schedule(roster12, seed=1)

    assert [s.period for s in schedule.slots[:2]] == ["1-20 minutes", "21-40 minutes"]


def test_cancellation_stops_generation(roster12, config12):
    generator = ScheduleGenerator(roster12, config12, random.Random(1))

    with pytest.raises(GenerationCancelledException) as exc_info:
        generator.generate(should_cancel=lambda: True)

    assert exc_info.value.slot_index == 0
    assert isinstance(exc_info.value, SchedulingException)


def test_cancellation_mid_session(roster12, config12):
    calls = []

    def cancel_after_three():
        calls.append(1)
        return len(calls) > 3

    generator = ScheduleGenerator(roster12, config12, random.Random(1))
    with pytest.raises(GenerationCancelledException):
        generator.generate(should_cancel=cancel_after_three)
    assert len(calls) == 4


def test_exhausted_after_every_restart(monkeypatch, roster12):
    monkeypatch.setattr(
        schedule_generator, "select_resting_players", lambda *args: None
    )
    config = preset_config(12, max_attempts=3, max_restarts=2)

    generator = ScheduleGenerator(roster12, config, random.Random(1))
    with pytest.raises(GenerationExhaustedException) as exc_info:
        generator.generate()

    assert exc_info.value.slot_index == 0
    assert exc_info.value.attempts == 3
    assert exc_info.value.restarts == 2
    assert generator.restarts == 2


def test_failed_attempts_leave_ledger_untouched(monkeypatch, roster12, config12):
    real_pair_slot = schedule_generator.pair_slot
    failures = []

    def flaky_pair_slot(pool, ledger, config, slot_index, rng):
        if slot_index == 2 and len(failures) < 5:
            failures.append(slot_index)
            return None
        return real_pair_slot(pool, ledger, config, slot_index, rng)

    monkeypatch.setattr(schedule_generator, "pair_slot", flaky_pair_slot)

    schedule = generate_schedule(roster12, config12, seed=4)

    assert len(failures) == 5
    assert ScheduleChecker(config12).check(schedule).is_valid


def test_restart_recovers_from_a_dead_end(monkeypatch, roster12):
    real_select = schedule_generator.select_resting_players
    calls = []

    def dead_end_once(roster, ledger, config, slot_index, previous, rng):
        calls.append(slot_index)
        if slot_index == 4 and calls.count(4) <= config.max_attempts:
            return None
        return real_select(roster, ledger, config, slot_index, previous, rng)

    monkeypatch.setattr(schedule_generator, "select_resting_players", dead_end_once)
    config = preset_config(12, max_attempts=2)

    generator = ScheduleGenerator(roster12, config, random.Random(6))
    schedule = generator.generate()

    assert generator.restarts == 1
    assert len(schedule) == config.slot_count


def test_small_session_weights_in_preset():
    config = preset_config(12)
    assert config.weights == PairingWeights(
        partner_repeat=100,
        opponent_repeat=5,
        balance_bonus=0,
        streak_penalty=0,
        streak_threshold=2,
        partner_step_threshold=2,
    )


def test_twelve_players_either_complete_or_exhausted(roster12, config12):
    try:
        schedule = generate_schedule(roster12, config12, rng=random.Random(77))
    except GenerationExhaustedException as e:
        assert e.attempts == config12.max_attempts
    else:
        assert len(schedule) == 9
        assert ScheduleChecker(config12).check(schedule).is_valid
