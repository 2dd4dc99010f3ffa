import csv
import json

from padelpairing import cli
from padelpairing.exceptions import GenerationExhaustedException


def test_numbered_roster_text_output(capsys):
    assert cli.main(["--players", "12", "--seed", "1"]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "Time Slot: 1-20 minutes" in out
    assert "Court 2:" in out
    assert "Fairness:" in out


def test_unsupported_size_is_a_configuration_error():
    assert cli.main(["--players", "13"]) == cli.EXIT_CONFIG_ERROR


def test_duplicate_roster_names(tmp_path):
    roster = tmp_path / "roster.txt"
    names = [f"Player {i}" for i in range(1, 12)] + ["Player 1"]
    roster.write_text("\n".join(names) + "\n", encoding="utf-8")

    assert cli.main(["--roster", str(roster)]) == cli.EXIT_CONFIG_ERROR


def test_roster_file_skips_blank_lines(tmp_path):
    roster = tmp_path / "roster.txt"
    roster.write_text("  Ana \n\nBen\n", encoding="utf-8")

    assert cli.load_roster(roster) == ["Ana", "Ben"]


def test_csv_file_output(tmp_path):
    target = tmp_path / "session.csv"

    code = cli.main(
        ["--players", "24", "--seed", "2", "--format", "csv", "--output", str(target)]
    )

    assert code == cli.EXIT_OK
    with open(target, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == [
        "Time Period",
        "Court 1",
        "Court 2",
        "Court 3",
        "Court 4",
        "Resting Players",
    ]
    assert len(rows) == 7


def test_json_output_with_start_time(capsys):
    code = cli.main(
        ["--players", "12", "--seed", "3", "--format", "json", "--start-time", "18:00"]
    )

    assert code == cli.EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert len(data["roster"]) == 12
    assert data["slots"][0]["period"] == "18:00 - 18:20"
    assert "longest_playing_streak" in data["fairness"]


def test_config_file(tmp_path, capsys):
    config = tmp_path / "session.json"
    config.write_text(
        json.dumps(
            {
                "total_players": 16,
                "slot_count": 8,
                "courts_per_slot": 3,
                "matches_per_player": 6,
                "rests_per_player": 2,
                "slot_minutes": 15,
            }
        ),
        encoding="utf-8",
    )

    code = cli.main(["--players", "16", "--config", str(config), "--seed", "4"])

    assert code == cli.EXIT_OK
    assert "Time Slot: 16-30 minutes" in capsys.readouterr().out


def test_broken_config_file(tmp_path):
    config = tmp_path / "session.json"
    config.write_text("{not json", encoding="utf-8")

    assert (
        cli.main(["--players", "12", "--config", str(config)])
        == cli.EXIT_CONFIG_ERROR
    )


def test_exhausted_generation_exit_code(monkeypatch):
    def exhausted(*args, **kwargs):
        raise GenerationExhaustedException(0, 1)

    monkeypatch.setattr(cli, "generate_schedule", exhausted)

    assert cli.main(["--players", "12"]) == cli.EXIT_EXHAUSTED


def test_interrupt_exit_code(monkeypatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "generate_schedule", interrupted)

    assert cli.main(["--players", "12"]) == cli.EXIT_INTERRUPTED


def _write_config(path, **changes):
    data = {
        "total_players": 12,
        "slot_count": 9,
        "courts_per_slot": 2,
        "matches_per_player": 6,
        "rests_per_player": 3,
    }
    data.update(changes)
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_null_weights_in_config_file(tmp_path):
    config = _write_config(tmp_path / "session.json", weights=None)

    assert cli.main(["--players", "12", "--config", config]) == cli.EXIT_CONFIG_ERROR


def test_invalid_weights_in_config_file(tmp_path):
    config = _write_config(
        tmp_path / "session.json",
        weights={"partner_step_threshold": 0, "streak_threshold": -3},
    )

    assert cli.main(["--players", "12", "--config", config]) == cli.EXIT_CONFIG_ERROR


def test_config_file_must_hold_an_object(tmp_path):
    config = tmp_path / "session.json"
    config.write_text("[12, 9]", encoding="utf-8")

    assert (
        cli.main(["--players", "12", "--config", str(config)])
        == cli.EXIT_CONFIG_ERROR
    )


def test_emergency_pairing_switch(monkeypatch):
    seen = []

    def capture(roster, config, seed=None):
        seen.append(config)
        raise GenerationExhaustedException(0, 1)

    monkeypatch.setattr(cli, "generate_schedule", capture)

    cli.main(["--players", "30"])
    cli.main(["--players", "30", "--no-emergency-pairing"])

    assert seen[0].emergency_from_slot == 6
    assert seen[1].emergency_from_slot is None
