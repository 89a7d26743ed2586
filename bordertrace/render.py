# render.py
# visualisation: paint traced contours and corner marks back into the grid
# Dependencies: numpy, scikit-image

from __future__ import annotations
from typing import Iterable, Sequence
import numpy as np
from skimage.draw import disk

from .config import DEFAULT_PALETTE
from .contours import Contour
from .grid import Color, Coordinate, PixelGrid


def paint_contours(grid: PixelGrid, contours: Iterable[Contour],
                   palette: Sequence[Color] = DEFAULT_PALETTE) -> None:
    """Colour each contour's pixels, cycling through `palette` one contour at a time."""
    px = grid.array
    for i, c in enumerate(contours):
        if not len(c): continue
        xs, ys = np.array(c.points, dtype=np.intp).T
        px[ys, xs] = palette[i % len(palette)]


def paint_corners(grid: PixelGrid, corners: Iterable[Coordinate],
                  color: Color = (255, 0, 0), radius: int = 0) -> None:
    """Mark each corner with a single pixel, or a filled disc when radius > 0."""
    px = grid.array
    H, W = px.shape[:2]
    for (x, y) in corners:
        if radius > 0:
            rr, cc = disk((int(y), int(x)), radius, shape=(H, W))
            px[rr, cc] = color
        else:
            grid.set(x, y, color)
