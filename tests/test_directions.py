"""Unit tests for directions.py."""

import pytest

from bordertrace.directions import Direction


class TestDirection:

    def test_eight_members_in_clockwise_order(self):
        assert [d.name for d in Direction] == [
            "NORTH", "NORTHEAST", "EAST", "SOUTHEAST",
            "SOUTH", "SOUTHWEST", "WEST", "NORTHWEST",
        ]

    def test_rotate_wraps(self):
        assert Direction.NORTHWEST.rotate(1) is Direction.NORTH
        assert Direction.WEST.rotate(6) is Direction.SOUTH
        assert Direction.NORTH.rotate(-1) is Direction.NORTHWEST
        assert Direction.EAST.rotate(8) is Direction.EAST

    @pytest.mark.parametrize("d", list(Direction))
    def test_opposite_is_involution(self, d):
        assert d.opposite() != d
        assert d.opposite().opposite() is d

    @pytest.mark.parametrize("d", list(Direction))
    def test_opposite_offsets_cancel(self, d):
        dx, dy = d.offset
        ox, oy = d.opposite().offset
        assert (dx + ox, dy + oy) == (0, 0)

    def test_offsets_use_image_axes(self):
        assert Direction.NORTH.offset == (0, -1)
        assert Direction.EAST.offset == (1, 0)
        assert Direction.SOUTHWEST.offset == (-1, 1)

    def test_step(self):
        assert Direction.NORTHEAST.step(3, 3) == (4, 2)
