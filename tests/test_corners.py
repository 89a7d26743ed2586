"""Unit tests for corners.py: law-of-cosines angles and sliding-window corner marks."""

import math

import pytest

from bordertrace.corners import DEFAULT_MAX_ANGLE, corner_angle, detect_corners
from bordertrace.pipeline import scan_grid

BLACK = (0, 0, 0)


def _l_shape(arm=4):
    """Polyline going right `arm` steps from the origin, then down `arm` steps."""
    pts = [(x, 0) for x in range(arm + 1)]
    pts += [(arm, y) for y in range(1, arm + 1)]
    return pts


class TestCornerAngle:

    def test_right_angle(self):
        assert corner_angle((0, 0), (3, 0), (3, 3)) == pytest.approx(math.pi / 2)

    def test_straight(self):
        assert corner_angle((0, 0), (3, 0), (6, 0)) == pytest.approx(math.pi)

    def test_acute(self):
        # b = c = sqrt(13), a = 4
        assert corner_angle((0, 0), (2, 3), (4, 0)) == pytest.approx(math.acos(5 / 13))

    def test_degenerate_sides(self):
        assert corner_angle((1, 1), (1, 1), (3, 3)) is None
        assert corner_angle((0, 0), (3, 3), (3, 3)) is None

    def test_default_threshold_is_155_degrees(self):
        assert DEFAULT_MAX_ANGLE == pytest.approx(2.7053, abs=1e-4)


class TestDetectCorners:

    def test_right_angle_vertex_flagged(self):
        pts = _l_shape(4)   # 9 points, vertex at index 4
        assert detect_corners(pts[1:], window=7) == [(4, 0)]

    def test_straight_line_has_no_corners(self):
        pts = [(x, 5) for x in range(30)]
        assert detect_corners(pts) == []

    def test_diagonal_line_has_no_corners(self):
        pts = [(i, i) for i in range(20)]
        assert detect_corners(pts) == []

    @pytest.mark.parametrize("n", [0, 1, 6, 7])
    def test_too_short_for_a_window(self, n):
        assert detect_corners(_l_shape(4)[:n], window=7) == []

    def test_degenerate_window_skipped(self):
        # p2 == p1 in the first window; later windows still run
        pts = [(0, 0)] * 4 + [(1, 0), (2, 0), (3, 0), (4, 0), (5, 0)]
        assert detect_corners(pts, window=7) == []

    def test_threshold_is_inclusive(self):
        pts = _l_shape(4)[1:]
        assert detect_corners(pts, window=7, max_angle=math.pi / 2 + 1e-9) == [(4, 0)]
        assert detect_corners(pts, window=7, max_angle=math.pi / 2 - 1e-6) == []

    def test_skip_ahead_hides_nearby_second_corner(self):
        # a U-turn: right 4, down 2, left 4; only the first bend is reported
        pts = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (4, 1), (4, 2),
               (3, 2), (2, 2), (1, 2), (0, 2)]
        assert detect_corners(pts, window=7) == [(3, 0)]
        # the window centred on the second bend would have qualified on its own
        assert corner_angle(pts[3], pts[6], pts[9]) <= DEFAULT_MAX_ANGLE

    @pytest.mark.parametrize("window", [0, 1, 2, 4, 8])
    def test_invalid_window(self, window):
        with pytest.raises(ValueError):
            detect_corners(_l_shape(), window=window)

    def test_square_10x10_marks(self, square_10x10):
        contour = scan_grid(square_10x10, BLACK)[0]
        marks = detect_corners(contour.points)
        assert marks == [(2, 9), (4, 11), (9, 11), (11, 9), (11, 4), (9, 2)]

    def test_square_marks_stay_near_true_corners(self, square_10x10):
        contour = scan_grid(square_10x10, BLACK)[0]
        corners = [(2, 2), (2, 11), (11, 11), (11, 2)]
        for (x, y) in detect_corners(contour.points):
            assert min(max(abs(x - cx), abs(y - cy)) for cx, cy in corners) <= 2
