from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from quadrix.game import Action, GameConfig
from quadrix.leaderboard import Leaderboard, LeaderboardError, default_scores_path
from quadrix.session import Session, SessionConfig, SessionStatus, Timer
from .renderer import Renderer

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_SPACE: Action.DROP,
}


class PygameTimer(Timer):
    """Posts TICK_EVENT on the pygame event queue every interval."""

    def __init__(self, event_type: int = TICK_EVENT) -> None:
        self.event_type = event_type

    def start(self, interval_ms: int) -> None:
        pygame.time.set_timer(self.event_type, interval_ms)

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)


def _status_message(session: Session) -> Optional[str]:
    if session.status is SessionStatus.PAUSED:
        return "Paused - P to resume"
    if session.status is SessionStatus.STOPPED:
        if session.game is None:
            return "Press Enter to start"
        return "Game Over - Enter for a new game"
    return None


def load_leaderboard(path: Path) -> Leaderboard:
    try:
        return Leaderboard.load(path)
    except LeaderboardError as e:
        logger.warning("ignoring unreadable scores file %s: %s", path, e)
        return Leaderboard()


def handle_key(session: Session, key: int) -> bool:
    """Apply one key press to the session. Returns False when the player quits."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_p and session.status is not SessionStatus.STOPPED:
        session.toggle()
    elif key == pygame.K_RETURN and session.status is SessionStatus.STOPPED:
        session.new_game()
    else:
        action = KEY_TO_ACTION.get(key)
        if action is not None:
            session.handle_action(action)
    return True


def print_leaderboard(board: Leaderboard) -> None:
    print("=== High scores ===")
    for rank, e in enumerate(board.entries, start=1):
        print(f"{rank:2d}. {e.name:<16} {e.score:>7d}  level {e.level:<3d} {e.date}")


def run(config: SessionConfig, cell_size: int = 28) -> None:
    leaderboard = load_leaderboard(config.leaderboard_path) if config.leaderboard_path else None
    pygame.init()
    try:
        clock = pygame.time.Clock()
        session = Session(PygameTimer(), config, leaderboard)
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(config.game.height, config.game.width))
        pygame.display.set_caption("Quadrix")
        session.new_game()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    session.tick()
                elif event.type == pygame.KEYDOWN:
                    if not handle_key(session, event.key):
                        running = False

            if session.game is not None:
                renderer.draw(screen, session.game, _status_message(session))
            clock.tick(60)
    finally:
        pygame.quit()
    if leaderboard is not None:
        print_leaderboard(leaderboard)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Quadrix")
    p.add_argument("--level", type=int, default=0, help="Starting level")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--name", type=str, default=None, help="Player name for the high-score table")
    p.add_argument("--scores", type=Path, default=default_scores_path())
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = SessionConfig(
        game=GameConfig(starting_level=args.level, random_seed=args.seed),
        player_name=args.name,
        leaderboard_path=args.scores,
    )
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
