# grid.py
# in-memory RGB raster with bounds-aware sampling

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

Color = Tuple[int, int, int]
Coordinate = Tuple[int, int]   # (x, y)


@dataclass(frozen=True)
class Sample:
    coord: Coordinate
    color: Color


def parse_color(text: str) -> Color:
    """Parse 'r,g,b', 'r g b' or '#rrggbb' into a colour triple."""
    s = text.strip()
    if s.startswith("#"):
        if len(s) != 7:
            raise ValueError(f"expected #rrggbb, got {text!r}")
        vals = [int(s[i:i+2], 16) for i in (1, 3, 5)]
    else:
        parts = s.replace(",", " ").split()
        if len(parts) != 3:
            raise ValueError(f"expected three channel values, got {text!r}")
        vals = [int(p) for p in parts]
    if any(v < 0 or v > 255 for v in vals):
        raise ValueError(f"channel values must be in [0, 255], got {text!r}")
    return (vals[0], vals[1], vals[2])


class PixelGrid:
    """Pixel access by (x, y) over a (height, width, 3) uint8 array."""

    def __init__(self, width: int, height: int, fill: Color = (0, 0, 0)):
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be >= 0, got {width}x{height}")
        self._px = np.empty((height, width, 3), dtype=np.uint8)
        self._px[...] = fill

    @classmethod
    def blank(cls, width: int, height: int, color: Color = (255, 255, 255)) -> "PixelGrid":
        return cls(width, height, fill=color)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelGrid":
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"expected an (H, W, 3) array, got shape {arr.shape}")
        grid = cls.__new__(cls)
        grid._px = np.ascontiguousarray(arr, dtype=np.uint8).copy()
        return grid

    @property
    def width(self) -> int:
        return self._px.shape[1]

    @property
    def height(self) -> int:
        return self._px.shape[0]

    @property
    def array(self) -> np.ndarray:
        return self._px

    def copy(self) -> "PixelGrid":
        return PixelGrid.from_array(self._px)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        r, g, b = self._px[y, x]
        return (int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        self._px[y, x] = color

    def sample(self, x: int, y: int) -> Optional[Sample]:
        """Coordinate and colour at (x, y), or None when off-grid."""
        if not self.in_bounds(x, y):
            return None
        return Sample((x, y), self.get(x, y))

    def __repr__(self):
        return f"PixelGrid({self.width}x{self.height})"
