from typing import List

import pytest

from quadrix.game import Action, Block, GameConfig, TetrominoType
from quadrix.leaderboard import Leaderboard
from quadrix.session import Session, SessionConfig, SessionStatus, Timer


class FakeTimer(Timer):
    def __init__(self) -> None:
        self.log: List[str] = []

    def start(self, interval_ms: int) -> None:
        self.log.append(f"start {interval_ms}")

    def cancel(self) -> None:
        self.log.append("cancel")


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


def _session(timer, level=0, leaderboard=None, **kwargs) -> Session:
    config = SessionConfig(game=GameConfig(random_seed=42, starting_level=level), **kwargs)
    return Session(timer, config, leaderboard)


def test_new_game_starts_timer_at_level_rate(timer):
    session = _session(timer, level=2)
    game = session.new_game()
    assert session.status is SessionStatus.RUNNING
    assert game.current_block is not None
    assert timer.log == ["start 640"]


def test_new_game_replaces_game_and_stops_old_timer_first(timer):
    session = _session(timer)
    first = session.new_game()
    second = session.new_game()
    assert first is not second
    assert timer.log == ["start 800", "cancel", "start 800"]


def test_pause_and_resume(timer):
    session = _session(timer)
    session.new_game()
    session.pause()
    assert session.status is SessionStatus.PAUSED
    before = list(session.game.current_block.coords)
    session.tick()
    session.handle_action(Action.LEFT)
    assert session.game.current_block.coords == before
    session.resume()
    assert session.status is SessionStatus.RUNNING
    assert timer.log == ["start 800", "cancel", "start 800"]


def test_toggle_cycles_through_states(timer):
    session = _session(timer)
    session.toggle()
    assert session.status is SessionStatus.RUNNING
    session.toggle()
    assert session.status is SessionStatus.PAUSED
    session.toggle()
    assert session.status is SessionStatus.RUNNING


def test_tick_lowers_block_while_running(timer):
    session = _session(timer)
    session.new_game()
    before = [c.y for c in session.game.current_block.coords]
    session.tick()
    assert [c.y for c in session.game.current_block.coords] == [y + 1 for y in before]


def test_level_up_restarts_timer_at_new_rate(timer):
    session = _session(timer)
    game = session.new_game()
    game.total_lines_cleared = 7
    game.grid.grid[20, :] = int(TetrominoType.Z)
    game.grid.grid[20, 3:7] = 0
    game.current_block = Block(TetrominoType.I)
    session.handle_action(Action.DROP)
    assert game.level == 1
    assert timer.log == ["start 800", "cancel", "start 720"]
    assert session.tick_rate == 720


def test_game_over_stops_timer_and_records_score(timer, tmp_path):
    path = tmp_path / "scores.json"
    board = Leaderboard()
    session = _session(timer, player_name="ada", leaderboard_path=path, leaderboard=board)
    game = session.new_game()
    game.grid.grid[1, 0] = int(TetrominoType.O)
    session.handle_action(Action.DROP)
    assert game.game_over
    assert session.status is SessionStatus.STOPPED
    assert timer.log == ["start 800", "cancel"]
    assert session.last_rank == 0
    stored = Leaderboard.load(path)
    assert [(e.name, e.score, e.level) for e in stored.entries] == [("ada", 0, 0)]

    session.tick()
    assert timer.log == ["start 800", "cancel"]


def test_game_over_without_player_name_records_nothing(timer, tmp_path):
    board = Leaderboard()
    session = _session(timer, leaderboard=board, leaderboard_path=tmp_path / "scores.json")
    game = session.new_game()
    game.grid.grid[1, 0] = int(TetrominoType.O)
    session.handle_action(Action.DROP)
    assert session.status is SessionStatus.STOPPED
    assert len(board) == 0
    assert not (tmp_path / "scores.json").exists()


def test_timer_without_cancel_cannot_be_built():
    class StartOnly(Timer):
        def start(self, interval_ms: int) -> None:
            pass

    with pytest.raises(TypeError):
        StartOnly()
