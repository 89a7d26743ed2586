# io_save_load.py
# load/save helpers: plain-text P3 rasters, anything else through Pillow, JSON summaries

from __future__ import annotations
from typing import IO, List
import json
import logging
import pathlib as _p
import sys

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import ImageFormatError
from .grid import PixelGrid

logger = logging.getLogger(__name__)

PPM_SUFFIXES = {".ppm", ".pnm"}


def _header_tokens(text: str) -> List[str]:
    toks: List[str] = []
    for line in text.splitlines():
        toks.extend(line.split("#", 1)[0].split())
    return toks


def _checked_values(body: List[str], maxval: int, source: str) -> List[int]:
    vals: List[int] = []
    for i, t in enumerate(body):
        try:
            v = int(t)
        except ValueError:
            raise ImageFormatError(source, f"non-numeric pixel value {t!r} at token {i + 4}") from None
        if not 0 <= v <= maxval:
            raise ImageFormatError(source, f"channel value {v} out of range at token {i + 4}")
        vals.append(v)
    return vals


def parse_ppm(text: str, source: str = "<string>") -> PixelGrid:
    """Decode a P3 (ASCII RGB) raster. Short pixel data is zero-filled with a warning."""
    toks = _header_tokens(text)
    if not toks or toks[0] != "P3":
        got = toks[0] if toks else "<empty>"
        raise ImageFormatError(source, f"expected 'P3' magic number, got {got!r}")
    if len(toks) < 4:
        raise ImageFormatError(source, "truncated header (need width, height and maxval)")
    try:
        width, height, maxval = (int(t) for t in toks[1:4])
    except ValueError:
        raise ImageFormatError(source, f"non-numeric header token in {toks[1:4]!r}") from None
    if width < 0 or height < 0:
        raise ImageFormatError(source, f"invalid dimensions {width}x{height}")
    if maxval != 255:
        raise ImageFormatError(source, f"unsupported maxval {maxval} (expected 255)")
    # same ceiling Pillow applies to the formats it decodes
    if Image.MAX_IMAGE_PIXELS and width * height > Image.MAX_IMAGE_PIXELS:
        raise ImageFormatError(source, f"{width}x{height} exceeds {Image.MAX_IMAGE_PIXELS} pixels")

    n = width * height * 3
    body = toks[4:4 + n]
    try:
        vals = np.array(body, dtype=np.int64)
        ok = not vals.size or (vals.min() >= 0 and vals.max() <= maxval)
    except (ValueError, OverflowError):
        ok = False
    if not ok:
        vals = np.array(_checked_values(body, maxval, source), dtype=np.int64)
    if vals.size < n:
        logger.warning("%s: expected %d channel values, got %d; padding with 0", source, n, vals.size)
    elif len(toks) > 4 + n:
        logger.warning("%s: ignoring %d trailing tokens", source, len(toks) - 4 - n)
    try:
        arr = np.zeros(n, dtype=np.uint8)
        arr[:vals.size] = vals
    except MemoryError:
        raise ImageFormatError(source, f"cannot allocate a {width}x{height} raster") from None
    return PixelGrid.from_array(arr.reshape(height, width, 3))


def format_ppm(grid: PixelGrid) -> str:
    lines = [f"P3\n{grid.width} {grid.height}\n255"]
    for row in grid.array:
        lines.append("".join(f"{r} {g} {b} " for r, g, b in row.tolist()))
    return "\n".join(lines) + "\n"


def read_ppm(stream: IO[str], source: str = "<stream>") -> PixelGrid:
    return parse_ppm(stream.read(), source=source)


def write_ppm(grid: PixelGrid, stream: IO[str]) -> None:
    stream.write(format_ppm(grid))


def load_grid(path: str) -> PixelGrid:
    """Load a raster as RGB. '-' reads P3 from stdin."""
    if path == "-":
        return read_ppm(sys.stdin, source="<stdin>")
    p = _p.Path(path)
    try:
        with open(p, "rb") as f:
            head = f.read(2)
    except OSError as e:
        raise ImageFormatError(str(p), f"cannot open: {e.strerror or e}") from e
    if head == b"P3":
        return parse_ppm(p.read_text(encoding="ascii", errors="replace"), source=str(p))
    try:
        with Image.open(p) as im:
            arr = np.array(im.convert("RGB"), dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageFormatError(str(p), f"cannot decode image: {e}") from e
    return PixelGrid.from_array(arr)


def save_grid(grid: PixelGrid, path: str) -> None:
    """Write a raster. '-' and .ppm/.pnm paths get P3 text; other suffixes go through Pillow."""
    if path == "-":
        write_ppm(grid, sys.stdout)
        sys.stdout.flush()
        return
    p = _p.Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    if p.suffix.lower() in PPM_SUFFIXES:
        with open(p, "w", encoding="ascii") as f:
            write_ppm(grid, f)
    else:
        Image.fromarray(grid.array).save(p)
    logger.info("wrote %s", p)


def save_json(path: str, obj: dict):
    _p.Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)
