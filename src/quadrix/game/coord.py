from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    """Grid coordinate, row first: ``y`` grows downwards, ``x`` to the right."""

    y: int
    x: int

    def plus(self, other: "Coord") -> "Coord":
        return Coord(self.y + other.y, self.x + other.x)

    def minus(self, other: "Coord") -> "Coord":
        return Coord(self.y - other.y, self.x - other.x)

    __add__ = plus
    __sub__ = minus
