from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple

from .coord import Coord


class TetrominoType(IntEnum):
    # 0 is the empty grid cell
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


def _coords(*pairs: Tuple[int, int]) -> Tuple[Coord, ...]:
    return tuple(Coord(y, x) for y, x in pairs)


# Rotation states per type, unshifted. Each state lists exactly 4 (y, x) cells.
ROTATIONS: Dict[TetrominoType, Tuple[Tuple[Coord, ...], ...]] = {
    TetrominoType.I: (
        _coords((2, 0), (2, 1), (2, 2), (2, 3)),
        _coords((0, 2), (1, 2), (2, 2), (3, 2)),
    ),
    TetrominoType.J: (
        _coords((1, 0), (1, 1), (1, 2), (2, 2)),
        _coords((0, 1), (0, 2), (1, 1), (2, 1)),
        _coords((0, 0), (1, 0), (1, 1), (1, 2)),
        _coords((0, 1), (1, 1), (2, 0), (2, 1)),
    ),
    TetrominoType.L: (
        _coords((1, 0), (1, 1), (1, 2), (2, 0)),
        _coords((0, 0), (0, 1), (1, 1), (2, 1)),
        _coords((0, 2), (1, 0), (1, 1), (1, 2)),
        _coords((0, 1), (1, 1), (2, 1), (2, 2)),
    ),
    TetrominoType.O: (
        _coords((1, 1), (1, 2), (2, 1), (2, 2)),
    ),
    TetrominoType.S: (
        _coords((1, 1), (1, 2), (2, 0), (2, 1)),
        _coords((0, 1), (1, 1), (1, 2), (2, 2)),
    ),
    TetrominoType.T: (
        _coords((1, 0), (1, 1), (1, 2), (2, 1)),
        _coords((0, 1), (1, 1), (1, 2), (2, 1)),
        _coords((0, 1), (1, 0), (1, 1), (1, 2)),
        _coords((0, 1), (1, 0), (1, 1), (2, 1)),
    ),
    TetrominoType.Z: (
        _coords((1, 0), (1, 1), (2, 1), (2, 2)),
        _coords((0, 2), (1, 1), (1, 2), (2, 1)),
    ),
}

assert set(ROTATIONS) == set(TetrominoType)
assert all(len(state) == 4 for states in ROTATIONS.values() for state in states)

# Shift applied to every spawned block so it starts centered on a 10-wide grid
SPAWN_OFFSET = Coord(0, 3)


def num_rotations(kind: TetrominoType) -> int:
    return len(ROTATIONS[kind])


def bounding_box(kind: TetrominoType) -> Tuple[int, int]:
    """Return (height, width) of the minimal box around the rotation-0 cells."""
    cells = ROTATIONS[kind][0]
    ys = [c.y for c in cells]
    xs = [c.x for c in cells]
    return max(ys) - min(ys) + 1, max(xs) - min(xs) + 1


@dataclass
class Block:
    kind: TetrominoType
    rotation: int = 0
    coords: List[Coord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            self.kind = TetrominoType[self.kind]
        self.kind = TetrominoType(self.kind)
        if not self.coords:
            self.coords = [c + SPAWN_OFFSET for c in ROTATIONS[self.kind][self.rotation]]

    def get_next_rotation(self) -> Tuple[List[Coord], int]:
        """Candidate (coords, rotation) for the next rotation state.

        The block keeps its translation since spawn: the offset between its
        first cell and the first cell of the current unshifted template is
        re-applied to the next template. Nothing is mutated; the caller must
        validate the candidate before committing it.
        """
        templates = ROTATIONS[self.kind]
        offset = self.coords[0] - templates[self.rotation][0]
        next_rotation = (self.rotation + 1) % len(templates)
        return [c + offset for c in templates[next_rotation]], next_rotation

    def translated(self, delta: Coord) -> List[Coord]:
        return [c + delta for c in self.coords]

    def rows(self) -> Tuple[int, int]:
        ys = [c.y for c in self.coords]
        return min(ys), max(ys)
