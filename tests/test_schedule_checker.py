import pytest

from padelpairing.exceptions import ScheduleInvariantViolation
from padelpairing.models.session import Match, Schedule, SessionConfig, Slot
from padelpairing.validation import (
    ScheduleChecker,
    summarize_fairness,
    validate_schedule,
)

ROSTER = ("Ana", "Ben", "Cleo", "Dan", "Eva")

CONFIG = SessionConfig(
    total_players=5,
    slot_count=5,
    courts_per_slot=1,
    matches_per_player=4,
    rests_per_player=1,
)


def _slot(index, resting, team1, team2):
    return Slot(
        index=index,
        period=f"slot {index + 1}",
        matches=(Match(court=1, team1=team1, team2=team2),),
        resting_players=(resting,),
    )


def _rotation():
    """Each player sits out exactly once, in roster order."""
    slots = []
    for index, resting in enumerate(ROSTER):
        a, b, c, d = [p for p in ROSTER if p != resting]
        slots.append(_slot(index, resting, (a, b), (c, d)))
    return slots


def test_valid_schedule_passes():
    schedule = Schedule(roster=ROSTER, slots=tuple(_rotation()))

    report = ScheduleChecker(CONFIG).check(schedule)

    assert report.is_valid
    assert report.checked_slots == 5
    assert report.match_counts == {p: 4 for p in ROSTER}
    assert report.rest_counts == {p: 1 for p in ROSTER}
    assert validate_schedule(schedule, CONFIG).is_valid


def test_consecutive_rest_and_quotas_are_reported():
    slots = _rotation()
    # Ana sits out again in slot 2 instead of Ben
    slots[1] = _slot(1, "Ana", ("Ben", "Cleo"), ("Dan", "Eva"))
    schedule = Schedule(roster=ROSTER, slots=tuple(slots))

    report = ScheduleChecker(CONFIG).check(schedule)
    checks = {v.check for v in report.violations}

    assert "consecutive_rest" in checks
    assert "match_quota" in checks
    assert "rest_quota" in checks
    assert any("Ana rested in slots 1 and 2" in m for m in report.messages)


def test_player_on_two_sides_is_reported():
    slots = _rotation()
    slots[0] = _slot(0, "Ana", ("Ben", "Cleo"), ("Ben", "Eva"))
    schedule = Schedule(roster=ROSTER, slots=tuple(slots))

    report = ScheduleChecker(CONFIG).check(schedule)
    checks = {v.check for v in report.violations}

    assert "duplicate_player" in checks
    assert "missing_player" in checks
    assert all(v.slot_index == 0 for v in report.violations if v.check != "match_quota")


def test_unknown_player_and_slot_count():
    slots = _rotation()[:4]
    slots[0] = _slot(0, "Ana", ("Ben", "Cleo"), ("Dan", "Zoe"))
    schedule = Schedule(roster=ROSTER, slots=tuple(slots))

    report = ScheduleChecker(CONFIG).check(schedule)
    checks = {v.check for v in report.violations}

    assert {"unknown_player", "missing_player", "slot_count"} <= checks


def test_validate_schedule_raises_with_every_message():
    slots = _rotation()
    slots[1] = _slot(1, "Ana", ("Ben", "Cleo"), ("Dan", "Eva"))
    schedule = Schedule(roster=ROSTER, slots=tuple(slots))

    with pytest.raises(ScheduleInvariantViolation) as exc_info:
        validate_schedule(schedule, CONFIG)

    assert len(exc_info.value.violations) >= 3
    assert "consecutive_rest" in str(exc_info.value)


def test_fairness_summary():
    schedule = Schedule(roster=ROSTER, slots=tuple(_rotation()))

    summary = summarize_fairness(schedule)

    # Dan and Eva share a side in the first three slots
    assert summary.repeated_partnerships >= 1
    assert summary.max_partner_repeats == 3
    assert summary.longest_playing_streak == 4
    assert summary.to_dict()["distinct_partnerships"] == summary.distinct_partnerships
