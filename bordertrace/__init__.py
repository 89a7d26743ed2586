# bordertrace/__init__.py

# Grid & directions
from .grid import PixelGrid, Sample, Color, Coordinate, parse_color
from .directions import Direction

# Core: classify → trace → store → corners
from .classify import classify, oriented_border_check
from .contours import Contour, oriented_view, pick_next, trace_contour
from .registry import TraceRegistry
from .corners import corner_angle, detect_corners

# Settings & errors
from .config import TraceConfig, DEFAULTS, DEFAULT_PALETTE
from .errors import BordertraceError, ImageFormatError, RegistryError, TraceError

# I/O, visualisation, pipeline
from .io_save_load import load_grid, save_grid, parse_ppm, format_ppm, read_ppm, write_ppm, save_json
from .render import paint_contours, paint_corners
from .svg import write_svg
from .pipeline import (
    TraceResult,
    scan_grid,
    find_corners,
    analyse_grid,
    process_image,
    process_glob,
)

__version__ = "0.1.0"
