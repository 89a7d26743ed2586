# registry.py
# insertion-ordered store of traced contours

from __future__ import annotations
from typing import Iterator, List, Tuple

from .contours import Contour
from .errors import RegistryError


class TraceRegistry:
    """Owns every contour found during a scan, in discovery order."""

    def __init__(self):
        self._contours: List[Contour] = []

    def append(self, contour: Contour) -> None:
        try:
            self._contours.append(contour)
        except MemoryError as e:
            raise RegistryError(f"could not store contour #{len(self._contours)}") from e

    def is_traced(self, x: int, y: int) -> bool:
        """True if (x, y) belongs to any stored contour."""
        coord = (x, y)
        for c in self._contours:
            if coord in c:
                return True
        return False

    @property
    def contours(self) -> Tuple[Contour, ...]:
        return tuple(self._contours)

    @property
    def total_points(self) -> int:
        return sum(len(c) for c in self._contours)

    def __len__(self) -> int:
        return len(self._contours)

    def __iter__(self) -> Iterator[Contour]:
        return iter(self._contours)

    def __getitem__(self, i: int) -> Contour:
        return self._contours[i]
