# corners.py
# curvature extrema along a traced contour (law of cosines over a sliding window)

from __future__ import annotations
from typing import List, Optional, Sequence
import logging
import math
import numpy as np

from .grid import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 7
DEFAULT_MAX_ANGLE = math.radians(155.0)


def corner_angle(p1: Coordinate, p2: Coordinate, p3: Coordinate) -> Optional[float]:
    """Included angle at p2 in radians; None when p2 coincides with p1 or p3."""
    a = math.hypot(p1[0] - p3[0], p1[1] - p3[1])
    b = math.hypot(p1[0] - p2[0], p1[1] - p2[1])
    c = math.hypot(p2[0] - p3[0], p2[1] - p3[1])
    if b == 0 or c == 0:
        return None
    cosang = np.clip((b*b + c*c - a*a) / (2*b*c), -1.0, 1.0)
    return float(np.arccos(cosang))


def detect_corners(points: Sequence[Coordinate], window: int = DEFAULT_WINDOW,
                   max_angle: float = DEFAULT_MAX_ANGLE) -> List[Coordinate]:
    """
    Slide a `window`-point window along `points` and flag its middle point whenever the
    angle between the window's ends, seen from the middle, is <= max_angle.

    After a hit the window jumps ahead by half its width, so two corners closer than
    that are reported once. Windows with a zero-length side are skipped.
    """
    if window < 3 or window % 2 == 0:
        raise ValueError(f"window must be odd and >= 3, got {window}")
    half = window // 2
    marks: List[Coordinate] = []
    j = 0
    while j < len(points) - window:
        p1, p2, p3 = points[j], points[j + half], points[j + window - 1]
        theta = corner_angle(p1, p2, p3)
        if theta is None:
            logger.debug("degenerate window at %d (%s)", j, p2)
        else:
            logger.debug("theta: %f", theta)
            if theta <= max_angle:
                marks.append(tuple(p2))
                j += half
        j += 1
    return marks
