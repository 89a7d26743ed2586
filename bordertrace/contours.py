# contours.py  (direction-aware border following)
# walks 8-connected border cells of one colour, keeping off-target cells on the right

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Set, Tuple
import logging

from .classify import oriented_border_check
from .directions import Direction
from .errors import TraceError
from .grid import Color, Coordinate, PixelGrid, Sample

logger = logging.getLogger(__name__)

OrientedView = List[Optional[Sample]]

# local directions tried at each step, most-right first. S is never tried (no U-turns
# on 1px lines) and SE is the cell the admissibility check already ruled off-target.
CANDIDATES = [
    Direction.EAST,
    Direction.NORTHEAST,
    Direction.NORTH,
    Direction.NORTHWEST,
    Direction.WEST,
    Direction.SOUTHWEST,
]


@dataclass(frozen=True)
class Contour:
    points: Tuple[Coordinate, ...]
    color: Color
    closed: bool = True
    _members: FrozenSet[Coordinate] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "_members", frozenset(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __contains__(self, coord) -> bool:
        return tuple(coord) in self._members


def oriented_view(grid: PixelGrid, x: int, y: int, heading: Direction) -> OrientedView:
    """Eight neighbour samples around (x, y); index i lies in global direction heading+i."""
    return [grid.sample(*heading.rotate(i).step(x, y)) for i in range(8)]


def pick_next(grid: PixelGrid, view: OrientedView, heading: Direction,
              color: Color) -> Optional[Tuple[Sample, Direction]]:
    """First admissible candidate as (sample, global direction), or None."""
    for local in CANDIDATES:
        s = view[local]
        if s is None or s.color != color:
            continue
        d = heading.rotate(local)
        if oriented_border_check(grid, s.coord[0], s.coord[1], color, d):
            return s, d
    return None


def trace_contour(grid: PixelGrid, x: int, y: int, heading: Direction, color: Color,
                  max_steps: Optional[int] = None) -> Contour:
    """
    Follow the border from (x, y) until the walk returns to its start (closed contour)
    or no candidate is admissible (open contour). The start is stored once, first.

    The walk is deterministic in its (cell, heading) state, so a repeated state means a
    cycle that misses the start; that raises TraceError(cycle=True) on the first repeat.
    `max_steps` additionally caps the walk length.
    """
    start = (x, y)
    points: List[Coordinate] = [start]
    seen: Set[Tuple[Coordinate, Direction]] = set()
    closed = False
    steps = 0
    while heading is not None:
        state = ((x, y), heading)
        if state in seen:
            raise TraceError(start, steps, cycle=True)
        seen.add(state)
        nxt = pick_next(grid, oriented_view(grid, x, y, heading), heading, color)
        if nxt is None:
            heading = None
            continue
        s, heading = nxt
        if s.coord == start:
            closed = True
            break
        points.append(s.coord)
        x, y = s.coord
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise TraceError(start, max_steps)
    if not closed:
        logger.debug("trace from %s ended open after %d points", start, len(points))
    return Contour(points, color, closed=closed)
