from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .coord import Coord

logger = logging.getLogger(__name__)

EMPTY = 0


class GameGrid:
    """Settled cells of the playfield.

    The grid uses 0 for empty cells and the ``TetrominoType`` value of the
    block that filled it otherwise. Row 0 is the hidden buffer row.
    """

    def __init__(self, height: int, width: int) -> None:
        self.height = int(height)
        self.width = int(width)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def cell(self, y: int, x: int) -> int:
        return int(self.grid[y, x])

    def is_inside(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def is_empty(self, coord: Coord) -> bool:
        return self.grid[coord.y, coord.x] == EMPTY

    def fill(self, coords: Iterable[Coord], value: int) -> None:
        for c in coords:
            self.grid[c.y, c.x] = value

    def row_occupied(self, y: int) -> bool:
        return bool(np.any(self.grid[y] != EMPTY))

    def drop_distance(self, coord: Coord) -> int:
        """Empty cells directly below ``coord`` before the floor or a settled cell."""
        column = self.grid[coord.y + 1 :, coord.x]
        filled = np.flatnonzero(column != EMPTY)
        if filled.size == 0:
            return int(column.size)
        return int(filled[0])

    def clear_full_rows(self, min_y: int, max_y: int) -> int:
        """Remove full rows within [min_y, max_y] and return how many went.

        Every removed row is replaced by an empty row at the top, so the
        height never changes and rows above a cleared one fall by one.
        """
        cleared = 0
        for y in range(min_y, max_y + 1):
            if np.all(self.grid[y] != EMPTY):
                rest = np.delete(self.grid, y, axis=0)
                self.grid = np.vstack((np.zeros((1, self.width), dtype=np.int8), rest))
                cleared += 1
        if cleared:
            logger.debug("cleared %d row(s) in range %d..%d", cleared, min_y, max_y)
        return cleared

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
