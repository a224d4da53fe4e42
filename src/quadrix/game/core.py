from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .coord import Coord
from .grid import GameGrid
from .pieces import ROTATIONS, SPAWN_OFFSET, Block, TetrominoType, bounding_box
from .rules import ScoringRules

logger = logging.getLogger(__name__)

# First visible row; anything settled here at spawn time ends the game
GAME_OVER_ROW = 1

DOWN = Coord(1, 0)

# Smallest grid every rotation-0 block fits into once shifted to its spawn position
_SPAWN_CELLS = [c + SPAWN_OFFSET for states in ROTATIONS.values() for c in states[0]]
MIN_HEIGHT = max(GAME_OVER_ROW, *(c.y for c in _SPAWN_CELLS)) + 1
MIN_WIDTH = max(c.x for c in _SPAWN_CELLS) + 1


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE = 3
    DROP = 4
    NONE = 5


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


_SHIFTS = {
    Direction.LEFT: Coord(0, -1),
    Direction.RIGHT: Coord(0, 1),
}


@dataclass
class GameConfig:
    height: int = 21
    width: int = 10
    starting_level: int = 0
    random_seed: Optional[int] = None


class GameCallbacks:
    """Receiver for game events. Every hook is called synchronously."""

    def on_game_over(self, score: int, level: int) -> None:
        pass

    def on_score_update(self, score: int) -> None:
        pass

    def on_level_update(self, level: int) -> None:
        pass

    def on_tetris(self) -> None:
        pass


class Game:
    """One play session: settled grid, the falling block and progression.

    Create a new instance for every session and call ``spawn_block`` to
    start it; there is no in-place reset.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        callbacks: Optional[GameCallbacks] = None,
        rules: Optional[ScoringRules] = None,
    ) -> None:
        self.config = config or GameConfig()
        if self.config.height < MIN_HEIGHT or self.config.width < MIN_WIDTH:
            raise ValueError(
                f"grid {self.config.height}x{self.config.width} is too small to spawn into, "
                f"need at least {MIN_HEIGHT}x{MIN_WIDTH}"
            )
        self.callbacks = callbacks or GameCallbacks()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.height, self.config.width)
        self.current_block: Optional[Block] = None
        self.next_block_type: Optional[TetrominoType] = None
        self.level = self.config.starting_level
        self.score = 0
        self.total_lines_cleared = 0
        self.game_over = False

    @property
    def active(self) -> bool:
        return self.current_block is not None and not self.game_over

    @property
    def next_block_size(self) -> Optional[Tuple[int, int]]:
        if self.next_block_type is None:
            return None
        return bounding_box(self.next_block_type)

    def _random_type(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def spawn_block(self) -> None:
        if self.grid.row_occupied(GAME_OVER_ROW):
            self.game_over = True
            logger.debug("game over: score=%d level=%d", self.score, self.level)
            self.callbacks.on_game_over(self.score, self.level)
            return
        kind = self.next_block_type if self.next_block_type is not None else self._random_type()
        self.current_block = Block(kind)
        self.next_block_type = self._random_type()
        logger.debug("spawned %s, next %s", kind.name, self.next_block_type.name)

    def check_collision(self, coords: Sequence[Coord]) -> bool:
        """True when every cell is inside the walls, above the floor and free.

        Cells above row 0 are not checked: spawn templates start at row 0
        and blocks only ever move down.
        """
        for c in coords:
            if c.x < 0 or c.x >= self.grid.width:
                return False
            if c.y > self.grid.height - 1:
                return False
            if not self.grid.is_empty(c):
                return False
        return True

    def get_levels(self) -> List[int]:
        assert self.current_block is not None
        return [self.grid.drop_distance(c) for c in self.current_block.coords]

    def _lock_block(self) -> None:
        block = self.current_block
        assert block is not None
        self.grid.fill(block.coords, int(block.kind))
        logger.debug("locked %s at rows %d..%d", block.kind.name, *block.rows())
        self.pack_grid()
        self.spawn_block()

    def lower_block(self) -> None:
        if not self.active:
            return
        if min(self.get_levels()) > 0:
            self.current_block.coords = self.current_block.translated(DOWN)
        else:
            self._lock_block()

    def tick(self) -> None:
        self.lower_block()

    def user_drop_block(self) -> None:
        if not self.active:
            return
        distance = min(self.get_levels())
        self.current_block.coords = self.current_block.translated(Coord(distance, 0))
        self._lock_block()

    def user_move_block(self, direction: Union[Direction, str]) -> bool:
        """Shift the block sideways or lower it.

        Returns False only when a sideways move is rejected or the game is
        not running; lowering always changes state (moves or locks).
        """
        direction = Direction(direction)
        if not self.active:
            return False
        if direction is Direction.DOWN:
            self.lower_block()
            return True
        candidate = self.current_block.translated(_SHIFTS[direction])
        if not self.check_collision(candidate):
            return False
        self.current_block.coords = candidate
        return True

    def user_rotate_block(self) -> bool:
        if not self.active:
            return False
        coords, rotation = self.current_block.get_next_rotation()
        if not self.check_collision(coords):
            return False
        self.current_block.coords = coords
        self.current_block.rotation = rotation
        return True

    def pack_grid(self) -> int:
        """Clear the full rows spanned by the block that was just locked."""
        assert self.current_block is not None
        min_y, max_y = self.current_block.rows()
        cleared = self.grid.clear_full_rows(min_y, max_y)
        if cleared == 4:
            self.callbacks.on_tetris()
        if cleared > 0:
            self.update_score(cleared)
        return cleared

    def update_score(self, lines_cleared: int) -> None:
        self.score += self.rules.score_for_lines(lines_cleared, self.level)
        self.callbacks.on_score_update(self.score)

        for _ in range(self.rules.level_ups(self.total_lines_cleared, lines_cleared)):
            self.level += 1
            logger.debug("level up: %d", self.level)
            self.callbacks.on_level_update(self.level)
        self.total_lines_cleared += lines_cleared

    def step(self, action: Action) -> Tuple[np.ndarray, int, bool, dict]:
        if self.game_over:
            return self.get_state(), 0, True, {}

        score_before = self.score
        if action == Action.LEFT:
            self.user_move_block(Direction.LEFT)
        elif action == Action.RIGHT:
            self.user_move_block(Direction.RIGHT)
        elif action == Action.DOWN:
            self.user_move_block(Direction.DOWN)
        elif action == Action.ROTATE:
            self.user_rotate_block()
        elif action == Action.DROP:
            self.user_drop_block()
        elif action == Action.NONE:
            pass

        info = {
            "score": self.score,
            "level": self.level,
            "lines_cleared_total": self.total_lines_cleared,
        }
        return self.get_state(), self.score - score_before, self.game_over, info

    def get_state(self) -> np.ndarray:
        # Overlay current block on a copy of the grid; negative marks the falling block
        state = self.grid.clone_state()
        if self.active:
            for c in self.current_block.coords:
                if self.grid.is_inside(c):
                    state[c.y, c.x] = -int(self.current_block.kind)
        return state
