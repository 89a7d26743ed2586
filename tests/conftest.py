"""Shared pytest fixtures for the bordertrace test suite.

Fixtures:
    make_grid: factory building a white PixelGrid with filled black rectangles
    square_5x5: 5x5 white grid with a centred 3x3 black square
    square_10x10: 14x14 white grid with a 10x10 black square at (2, 2)
    write_ppm_file: factory writing P3 text to a temp file and returning its path
"""

import pytest

from bordertrace.grid import PixelGrid

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def make_grid():
    """Return a factory: make_grid(w, h, rects=[(x0, y0, w, h), ...], fg=BLACK, bg=WHITE)."""
    def _make(width, height, rects=(), fg=BLACK, bg=WHITE):
        grid = PixelGrid.blank(width, height, bg)
        for (x0, y0, w, h) in rects:
            grid.array[y0:y0 + h, x0:x0 + w] = fg
        return grid
    return _make


@pytest.fixture
def square_5x5(make_grid):
    return make_grid(5, 5, [(1, 1, 3, 3)])


@pytest.fixture
def square_10x10(make_grid):
    return make_grid(14, 14, [(2, 2, 10, 10)])


@pytest.fixture
def write_ppm_file(tmp_path):
    """Return a factory writing `text` to tmp_path/<name> and returning the path as str."""
    def _write(text, name="in.ppm"):
        p = tmp_path / name
        p.write_text(text)
        return str(p)
    return _write
