import csv
import io

import pytest

from padelpairing.exceptions import ScheduleExportException
from padelpairing.export import (
    export_schedule_csv,
    format_match_cell,
    schedule_rows,
    schedule_to_csv,
)
from padelpairing.models.session import Match, Schedule, Slot


@pytest.fixture
def schedule():
    slots = (
        Slot(
            index=0,
            period="1-20 minutes",
            matches=(
                Match(1, ("Ana", "Ben"), ("Cleo", "Dan")),
                Match(2, ("Eva", "Finn"), ("Gus", "Hana")),
            ),
            resting_players=("Ivo", "Jo"),
        ),
        Slot(
            index=1,
            period="21-40 minutes",
            matches=(
                Match(1, ("Ana", "Ivo"), ("Eva", "Jo")),
                Match(2, ("Cleo", "Gus"), ("Dan", "Hana")),
            ),
            resting_players=("Ben", "Finn"),
        ),
    )
    roster = ("Ana", "Ben", "Cleo", "Dan", "Eva", "Finn", "Gus", "Hana", "Ivo", "Jo")
    return Schedule(roster=roster, slots=slots)


def test_match_cell_stacks_teams():
    match = Match(1, ("Ana", "Ben"), ("Cleo", "Dan"))
    assert format_match_cell(match) == "Ana + Ben\nVS\nCleo + Dan"


def test_rows(schedule):
    rows = schedule_rows(schedule)

    assert rows[0] == ["Time Period", "Court 1", "Court 2", "Resting Players"]
    assert rows[1][0] == "1-20 minutes"
    assert rows[1][2] == "Eva + Finn\nVS\nGus + Hana"
    assert rows[1][3] == "Ivo | Jo"
    assert len(rows) == 3


def test_csv_quotes_every_field(schedule):
    text = schedule_to_csv(schedule)

    assert text.startswith('"Time Period","Court 1","Court 2","Resting Players"')
    parsed = list(csv.reader(io.StringIO(text)))
    assert parsed == schedule_rows(schedule)


def test_export_adds_csv_suffix(schedule, tmp_path):
    written = export_schedule_csv(schedule, tmp_path / "evening")

    assert written == tmp_path / "evening.csv"
    with open(written, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[2][1] == "Ana + Ivo\nVS\nEva + Jo"


def test_export_reports_unwritable_path(schedule, tmp_path):
    with pytest.raises(ScheduleExportException):
        export_schedule_csv(schedule, tmp_path / "missing" / "evening.csv")


def test_export_warns_when_renaming(schedule, tmp_path, caplog):
    with caplog.at_level("WARNING", logger="padelpairing"):
        written = export_schedule_csv(schedule, tmp_path / "plan.txt")

    assert written == tmp_path / "plan.csv"
    assert written.exists()
    assert "plan.csv" in caplog.text
