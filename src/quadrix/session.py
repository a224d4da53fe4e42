from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from quadrix.game import Action, Game, GameCallbacks, GameConfig, tick_rate_ms
from quadrix.leaderboard import Leaderboard, LeaderboardEntry

logger = logging.getLogger(__name__)


class Timer(ABC):
    """Periodic tick source driving a session."""

    @abstractmethod
    def start(self, interval_ms: int) -> None:
        ...

    @abstractmethod
    def cancel(self) -> None:
        ...


class SessionStatus(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class SessionConfig:
    game: GameConfig = field(default_factory=GameConfig)
    player_name: Optional[str] = None
    leaderboard_path: Optional[Path] = None


class Session(GameCallbacks):
    """Owns one Game and the timer that ticks it.

    The session is the game's callback receiver: level ups reschedule the
    timer, game over stops it and records the result on the leaderboard.
    """

    def __init__(
        self,
        timer: Timer,
        config: Optional[SessionConfig] = None,
        leaderboard: Optional[Leaderboard] = None,
    ) -> None:
        self.timer = timer
        self.config = config or SessionConfig()
        self.leaderboard = leaderboard
        self.game: Optional[Game] = None
        self.status = SessionStatus.STOPPED
        self.tick_rate = tick_rate_ms(self.config.game.starting_level)
        self.last_rank: Optional[int] = None
        self._timer_running = False

    def _start_timer(self, interval_ms: int) -> None:
        self._stop_timer()
        self.tick_rate = interval_ms
        self.timer.start(interval_ms)
        self._timer_running = True

    def _stop_timer(self) -> None:
        if self._timer_running:
            self.timer.cancel()
            self._timer_running = False

    def new_game(self) -> Game:
        self._stop_timer()
        self.last_rank = None
        self.game = Game(self.config.game, callbacks=self)
        self.game.spawn_block()
        self.status = SessionStatus.RUNNING
        self._start_timer(tick_rate_ms(self.game.level))
        logger.info("new game at level %d", self.game.level)
        return self.game

    def pause(self) -> None:
        if self.status is not SessionStatus.RUNNING:
            return
        self._stop_timer()
        self.status = SessionStatus.PAUSED
        logger.info("paused")

    def resume(self) -> None:
        if self.status is not SessionStatus.PAUSED:
            return
        self._start_timer(tick_rate_ms(self.game.level))
        self.status = SessionStatus.RUNNING
        logger.info("resumed")

    def toggle(self) -> None:
        if self.status is SessionStatus.STOPPED:
            self.new_game()
        elif self.status is SessionStatus.RUNNING:
            self.pause()
        else:
            self.resume()

    def tick(self) -> None:
        if self.status is SessionStatus.RUNNING:
            self.game.tick()

    def handle_action(self, action: Action) -> None:
        if self.status is SessionStatus.RUNNING:
            self.game.step(action)

    def on_level_update(self, level: int) -> None:
        self._start_timer(tick_rate_ms(level))
        logger.info("level %d, tick every %d ms", level, self.tick_rate)

    def on_game_over(self, score: int, level: int) -> None:
        self._stop_timer()
        self.status = SessionStatus.STOPPED
        logger.info("game over: score %d, level %d", score, level)
        self._record(score, level)

    def _record(self, score: int, level: int) -> None:
        if self.leaderboard is None or not self.config.player_name:
            return
        self.last_rank = self.leaderboard.add(LeaderboardEntry(self.config.player_name, score, level))
        if self.last_rank is not None and self.config.leaderboard_path is not None:
            self.leaderboard.save(self.config.leaderboard_path)
