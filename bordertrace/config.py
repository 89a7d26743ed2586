# config.py
# tunable settings for a trace run (one place)

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import math

from .grid import Color

DEFAULT_PALETTE: Tuple[Color, ...] = (
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
)


def _valid_color(c) -> bool:
    return len(c) == 3 and all(isinstance(v, int) and 0 <= v <= 255 for v in c)


@dataclass
class TraceConfig:
    # what to trace
    border_color: Color = (0, 0, 0)
    max_steps: Optional[int] = None   # per-trace cap; None = cycle detection only

    # corner detection
    corner_window: int = 7
    corner_angle_deg: float = 155.0

    # visualisation
    corner_color: Color = (255, 0, 0)
    corner_radius: int = 0            # 0 = single pixel
    palette: Tuple[Color, ...] = field(default_factory=lambda: DEFAULT_PALETTE)

    @property
    def corner_angle(self) -> float:
        return math.radians(self.corner_angle_deg)

    def validate(self) -> None:
        """Validate configuration values."""
        if not _valid_color(self.border_color):
            raise ValueError("border_color must be three ints in [0, 255]")
        if not _valid_color(self.corner_color):
            raise ValueError("corner_color must be three ints in [0, 255]")
        if self.corner_window < 3 or self.corner_window % 2 == 0:
            raise ValueError("corner_window must be odd and >= 3")
        if not (0.0 < self.corner_angle_deg <= 180.0):
            raise ValueError("corner_angle_deg must be in (0, 180]")
        if self.corner_radius < 0:
            raise ValueError("corner_radius must be >= 0")
        if not self.palette:
            raise ValueError("palette must contain at least one colour")
        if not all(_valid_color(c) for c in self.palette):
            raise ValueError("palette colours must be three ints in [0, 255]")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError("max_steps must be >= 1 when provided")

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "border_color": list(self.border_color),
            "max_steps": self.max_steps,
            "corner_window": self.corner_window,
            "corner_angle_deg": self.corner_angle_deg,
            "corner_color": list(self.corner_color),
            "corner_radius": self.corner_radius,
            "palette": [list(c) for c in self.palette],
        }


DEFAULTS = TraceConfig()
