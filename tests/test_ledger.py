from padelpairing.models.session import Match, PlayerLedger


def _ledger():
    return PlayerLedger(["Ana", "Ben", "Cleo", "Dan", "Eva"])


def test_new_ledger_is_empty():
    ledger = _ledger()
    entry = ledger["Ana"]
    assert entry.matches_played == 0
    assert entry.matches_resting == 0
    assert entry.partner_counts == {}
    assert "Eva" in ledger
    assert "Zoe" not in ledger


def test_record_played_updates_partners_and_opponents():
    ledger = _ledger()
    ledger.record_played([Match(court=1, team1=("Ana", "Ben"), team2=("Cleo", "Dan"))])

    for player in ("Ana", "Ben", "Cleo", "Dan"):
        assert ledger[player].matches_played == 1
        assert ledger[player].consecutive_matches == 1
    assert ledger.partner_count("Ana", "Ben") == 1
    assert ledger.partner_count("Ben", "Ana") == 1
    assert ledger.partner_count("Ana", "Cleo") == 0
    assert ledger.opponent_count("Ana", "Cleo") == 1
    assert ledger.opponent_count("Dan", "Ben") == 1
    assert ledger.opponent_count("Ana", "Ben") == 0
    assert ledger["Eva"].matches_played == 0


def test_record_rested_resets_playing_streak():
    ledger = _ledger()
    match = Match(court=1, team1=("Ana", "Ben"), team2=("Cleo", "Dan"))
    ledger.record_played([match])
    ledger.record_played([match])
    assert ledger["Ana"].consecutive_matches == 2

    ledger.record_rested(["Ana"])
    entry = ledger["Ana"]
    assert entry.matches_resting == 1
    assert entry.consecutive_rests == 1
    assert entry.consecutive_matches == 0


def test_streak_restarts_at_one_after_a_rest():
    ledger = _ledger()
    ledger.record_rested(["Eva"])
    ledger.record_rested(["Eva"])
    assert ledger["Eva"].consecutive_rests == 2

    ledger.record_played([Match(court=1, team1=("Eva", "Ben"), team2=("Cleo", "Dan"))])
    assert ledger["Eva"].consecutive_matches == 1
    assert ledger["Eva"].consecutive_rests == 0
    assert ledger.partner_count("Eva", "Ben") == 1


def test_match_helpers():
    match = Match(court=2, team1=("Ana", "Ben"), team2=("Cleo", "Dan"))
    assert match.players == ("Ana", "Ben", "Cleo", "Dan")
    assert match.teammate_of("Dan") == "Cleo"
    assert match.opponents_of("Ben") == ("Cleo", "Dan")
