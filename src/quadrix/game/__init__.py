"""Game engine for Quadrix.

Exports the core game engine and supporting classes:
- Coord: Immutable (y, x) grid coordinate
- GameGrid: Settled cells and line clearing
- Block: Falling tetromino with naive rotation
- TetrominoType: Enum of the seven block types
- ScoringRules: Line-clear points and level progression
- Game: Spawning, movement, locking and scoring for one session
"""

from .coord import Coord
from .grid import GameGrid
from .pieces import Block, TetrominoType, ROTATIONS, bounding_box, num_rotations
from .rules import ScoringRules, tick_rate_ms
from .core import Action, Direction, Game, GameCallbacks, GameConfig

__all__ = [
    "Coord",
    "GameGrid",
    "Block",
    "TetrominoType",
    "ROTATIONS",
    "bounding_box",
    "num_rotations",
    "ScoringRules",
    "tick_rate_ms",
    "Action",
    "Direction",
    "Game",
    "GameCallbacks",
    "GameConfig",
]
