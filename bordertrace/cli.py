# cli.py
# command line entry: P3 filter (stdin → stdout) by default, or a batch over a glob

from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import sys

from .config import TraceConfig
from .errors import BordertraceError
from .grid import parse_color
from .pipeline import process_glob, process_image

logger = logging.getLogger("bordertrace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bordertrace",
        description="Trace closed borders of one colour in a raster and mark their corners",
    )
    parser.add_argument("input", nargs="?", default="-",
                        help="Input image (P3 text or any Pillow format); '-' = stdin (default). "
                             "With --batch, a glob pattern")
    parser.add_argument("-o", "--output", default="-",
                        help="Painted output image; '-' = P3 on stdout (default)")
    parser.add_argument("--batch", metavar="OUT_DIR", default=None,
                        help="Treat INPUT as a glob and write results into OUT_DIR")
    parser.add_argument("--color", type=parse_color, default=(0, 0, 0),
                        help="Border colour to trace, 'r,g,b' or '#rrggbb' (default: 0,0,0)")
    parser.add_argument("--window", type=int, default=7,
                        help="Corner window width, odd (default: 7)")
    parser.add_argument("--angle", type=float, default=155.0,
                        help="Corner threshold in degrees (default: 155)")
    parser.add_argument("--corner-color", type=parse_color, default=(255, 0, 0),
                        help="Colour painted on corners (default: 255,0,0)")
    parser.add_argument("--corner-radius", type=int, default=0,
                        help="Corner marker radius in px; 0 = single pixel (default: 0)")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Skip a start whose trace runs longer than this (default: no cap; cycles are always detected)")
    parser.add_argument("--svg", default=None,
                        help="Also write an SVG overlay here (with --batch: any value enables per-image SVGs)")
    parser.add_argument("--summary", default=None,
                        help="Also write a JSON summary here (ignored with --batch)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for per-trace counts, -vv for per-window angles")
    return parser


def config_from_args(args: argparse.Namespace) -> TraceConfig:
    cfg = TraceConfig(
        border_color=args.color,
        max_steps=args.max_steps,
        corner_window=args.window,
        corner_angle_deg=args.angle,
        corner_color=args.corner_color,
        corner_radius=args.corner_radius,
    )
    cfg.validate()
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else (logging.INFO if args.verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = config_from_args(args)
    except ValueError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    try:
        if args.batch:
            rows = process_glob(args.input, args.batch, cfg, svg=args.svg is not None)
            if not rows:
                logger.warning("no files matched %s", args.input)
        else:
            process_image(args.input, args.output, cfg, svg_path=args.svg, summary_path=args.summary)
    except BordertraceError as e:
        logger.error("fatal: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
