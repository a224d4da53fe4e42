import pytest

from quadrix.leaderboard import (
    Leaderboard,
    LeaderboardEntry,
    LeaderboardError,
    compare_entries,
    sort_key,
)


def _entry(name, score, level=0):
    return LeaderboardEntry(name, score, level, "2024-01-01")


def test_ordering_score_then_level_then_name():
    entries = [
        _entry("bob", 100, 1),
        _entry("Alice", 100, 1),
        _entry("carl", 100, 2),
        _entry("dave", 250, 0),
        _entry("eve", 10, 9),
    ]
    ordered = sorted(entries, key=sort_key)
    assert [e.name for e in ordered] == ["dave", "carl", "Alice", "bob", "eve"]


def test_name_comparison_ignores_case():
    assert compare_entries(_entry("abc", 5), _entry("ABC", 5)) == 0
    assert compare_entries(_entry("Zed", 5), _entry("amy", 5)) > 0
    assert compare_entries(_entry("x", 6), _entry("x", 5)) < 0


def test_board_is_capped_at_ten():
    board = Leaderboard()
    for score in range(12):
        board.add(_entry(f"p{score}", score * 10))
    assert len(board) == 10
    assert board.entries[0].score == 110
    assert board.entries[-1].score == 20


def test_add_returns_rank_or_none():
    board = Leaderboard([_entry(f"p{i}", 100 + i) for i in range(10)])
    assert board.add(_entry("low", 5)) is None
    assert not board.qualifies(_entry("low", 5))
    assert board.add(_entry("top", 1000)) == 0
    assert board.add(_entry("mid", 105)) == 5
    assert len(board) == 10


def test_tie_with_last_place_does_not_qualify():
    board = Leaderboard([_entry(f"p{i}", 100) for i in range(10)])
    last = board.entries[-1]
    assert not board.qualifies(_entry(last.name, 100))


def test_save_and_load(tmp_path):
    path = tmp_path / "scores.json"
    board = Leaderboard([_entry("ann", 40, 2), _entry("ben", 80, 1)])
    board.save(path)
    loaded = Leaderboard.load(path)
    assert loaded.entries == board.entries
    assert loaded.entries[0].name == "ben"


def test_load_missing_file_gives_empty_board(tmp_path):
    assert len(Leaderboard.load(tmp_path / "nope.json")) == 0


@pytest.mark.parametrize("content", ["not json", '[{"name": "x"}]', '{"a": 1}'])
def test_load_malformed_file_raises(tmp_path, content):
    path = tmp_path / "scores.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(LeaderboardError):
        Leaderboard.load(path)


def test_entry_date_defaults_to_today():
    entry = LeaderboardEntry("x", 1, 0)
    assert len(entry.date) == 10
