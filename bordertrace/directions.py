# directions.py
# 8-way compass directions on an image grid (y grows southwards)

from __future__ import annotations
from enum import IntEnum
from typing import Tuple

_OFFSETS = [(0,-1),(1,-1),(1,0),(1,1),(0,1),(-1,1),(-1,0),(-1,-1)]


class Direction(IntEnum):
    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7

    def rotate(self, steps: int) -> "Direction":
        """Turn clockwise by `steps` eighths of a revolution (negative turns anticlockwise)."""
        return Direction((self + steps) % 8)

    def opposite(self) -> "Direction":
        return self.rotate(4)

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) of one step in this direction."""
        return _OFFSETS[self]

    def step(self, x: int, y: int) -> Tuple[int, int]:
        dx, dy = _OFFSETS[self]
        return x + dx, y + dy
