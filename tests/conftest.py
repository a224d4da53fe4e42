from __future__ import annotations

from typing import List, Tuple

import pytest

from quadrix.game import Game, GameCallbacks, GameConfig


class RecordingCallbacks(GameCallbacks):
    def __init__(self) -> None:
        self.game_overs: List[Tuple[int, int]] = []
        self.scores: List[int] = []
        self.levels: List[int] = []
        self.tetrises = 0

    def on_game_over(self, score: int, level: int) -> None:
        self.game_overs.append((score, level))

    def on_score_update(self, score: int) -> None:
        self.scores.append(score)

    def on_level_update(self, level: int) -> None:
        self.levels.append(level)

    def on_tetris(self) -> None:
        self.tetrises += 1


@pytest.fixture
def recorder() -> RecordingCallbacks:
    return RecordingCallbacks()


@pytest.fixture
def game(recorder: RecordingCallbacks) -> Game:
    g = Game(GameConfig(random_seed=1234), callbacks=recorder)
    g.spawn_block()
    return g
