# pipeline.py
# Orchestration: scan → paint contours → detect + paint corners, per image or per glob.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import glob, os
import logging

from .classify import classify
from .config import DEFAULTS, TraceConfig
from .contours import Contour, trace_contour
from .corners import detect_corners
from .errors import TraceError
from .grid import Color, Coordinate, PixelGrid
from .io_save_load import load_grid, save_grid, save_json
from .registry import TraceRegistry
from .render import paint_contours, paint_corners
from .svg import write_svg

logger = logging.getLogger(__name__)


@dataclass
class TraceResult:
    width: int
    height: int
    contours: Tuple[Contour, ...]
    corners: List[List[Coordinate]] = field(default_factory=list)  # one list per contour

    @property
    def all_corners(self) -> List[Coordinate]:
        return [p for marks in self.corners for p in marks]

    def summary(self, file: Optional[str] = None) -> Dict:
        out = {
            "width": self.width,
            "height": self.height,
            "contours": [
                {"length": len(c), "closed": c.closed, "corners": [list(p) for p in marks]}
                for c, marks in zip(self.contours, self.corners)
            ],
            "corners": len(self.all_corners),
        }
        if file is not None:
            out = {"file": file, **out}
        return out


# ----------------------------
# Phase 1: read-only scan
# ----------------------------

def scan_grid(grid: PixelGrid, color: Color, registry: Optional[TraceRegistry] = None,
              max_steps: Optional[int] = None) -> TraceRegistry:
    """
    Row-major scan. Every border cell that no stored contour covers yet starts a new
    trace. The grid is only read here.

    A start whose trace cycles without closing (or hits `max_steps`) is logged and
    skipped; the scan goes on with the next cell.
    """
    if registry is None:
        registry = TraceRegistry()
    for y in range(grid.height):
        for x in range(grid.width):
            heading = classify(grid, x, y, color)
            if heading is None or registry.is_traced(x, y):
                continue
            logger.debug("start cell (%d, %d) heading %s", x, y, heading.name)
            try:
                contour = trace_contour(grid, x, y, heading, color, max_steps=max_steps)
            except TraceError as e:
                logger.warning("skipping start (%d, %d): %s", x, y, e)
                continue
            registry.append(contour)

    logger.info("number of traces: %d", len(registry))
    for i, c in enumerate(registry):
        logger.info("trace %d, size %d", i, len(c))
    return registry


# ----------------------------
# Phase 3: corners
# ----------------------------

def find_corners(contours: Sequence[Contour], window: int = 7,
                 max_angle: float = DEFAULTS.corner_angle) -> List[List[Coordinate]]:
    return [detect_corners(c.points, window=window, max_angle=max_angle) for c in contours]


def analyse_grid(grid: PixelGrid, config: TraceConfig = DEFAULTS) -> TraceResult:
    """Run all three phases on `grid`; the grid ends up painted."""
    config.validate()
    registry = scan_grid(grid, config.border_color, max_steps=config.max_steps)
    contours = registry.contours

    paint_contours(grid, contours, config.palette)

    corners = find_corners(contours, window=config.corner_window, max_angle=config.corner_angle)
    result = TraceResult(grid.width, grid.height, contours, corners)
    paint_corners(grid, result.all_corners, config.corner_color, config.corner_radius)
    logger.info("corners: %d", len(result.all_corners))
    return result


# ----------------------------
# File drivers
# ----------------------------

def process_image(
    in_path: str,
    out_path: str,
    config: TraceConfig = DEFAULTS,
    svg_path: Optional[str] = None,
    summary_path: Optional[str] = None,
) -> TraceResult:
    """Load → analyse → write painted raster (+ optional SVG overlay and JSON summary)."""
    grid = load_grid(in_path)
    logger.info("%s: %dx%d", in_path, grid.width, grid.height)
    result = analyse_grid(grid, config)
    save_grid(grid, out_path)
    if svg_path:
        os.makedirs(os.path.dirname(svg_path) or ".", exist_ok=True)
        write_svg(result.contours, result.all_corners, (grid.width, grid.height), svg_path,
                  palette=config.palette, corner_color=config.corner_color)
        logger.info("wrote %s", svg_path)
    if summary_path:
        save_json(summary_path, result.summary(file=in_path))
        logger.info("wrote %s", summary_path)
    return result


def process_glob(input_glob: str, out_dir: str = "out/traced", config: TraceConfig = DEFAULTS,
                 svg: bool = False) -> List[Dict]:
    """
    For each file matching `input_glob`:
      - trace and paint it into out_dir/<stem>_traced.ppm
      - optionally write out_dir/<stem>.svg
    Writes out_dir/summary.json and returns its rows.
    """
    os.makedirs(out_dir, exist_ok=True)
    rows: List[Dict] = []
    for path in sorted(glob.glob(input_glob)):
        stem = os.path.splitext(os.path.basename(path))[0]
        out_img = os.path.join(out_dir, stem + "_traced.ppm")
        out_svg = os.path.join(out_dir, stem + ".svg") if svg else None
        result = process_image(path, out_img, config, svg_path=out_svg)
        rows.append(result.summary(file=os.path.basename(path)))
    save_json(os.path.join(out_dir, "summary.json"), {"config": config.to_dict(), "results": rows})
    return rows
