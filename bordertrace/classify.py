# classify.py
# border-cell tests: where tracing may start, and which cells it may step onto

from __future__ import annotations
from typing import Optional

from .directions import Direction
from .grid import Color, PixelGrid

# (neighbour offset, initial heading); first differing neighbour wins
_START_RULES = [
    ((0, -1), Direction.WEST),    # north
    ((0, 1),  Direction.EAST),    # south
    ((1, 0),  Direction.NORTH),   # east
    ((-1, 0), Direction.SOUTH),   # west
]


def _differs(grid: PixelGrid, x: int, y: int, color: Color) -> bool:
    s = grid.sample(x, y)
    return s is not None and s.color != color


def classify(grid: PixelGrid, x: int, y: int, color: Color) -> Optional[Direction]:
    """
    Initial heading for a trace starting at (x, y), or None if the cell is not a border cell.

    A border cell has the target colour and at least one in-grid 4-neighbour that does not.
    The heading keeps that neighbour on the tracer's right.
    """
    s = grid.sample(x, y)
    if s is None or s.color != color:
        return None
    for (dx, dy), heading in _START_RULES:
        if _differs(grid, x + dx, y + dy, color):
            return heading
    return None


def oriented_border_check(grid: PixelGrid, x: int, y: int, color: Color, approach: Direction) -> bool:
    """
    True if (x, y) has the target colour and one of the three cells on the right of
    `approach` (forward-right, right, back-right) is in-grid and off-target.
    """
    s = grid.sample(x, y)
    if s is None or s.color != color:
        return False
    for turn in (1, 2, 3):
        nx, ny = approach.rotate(turn).step(x, y)
        if _differs(grid, nx, ny, color):
            return True
    return False
