"""Unit tests for registry.py."""

import pytest

from bordertrace.contours import Contour
from bordertrace.errors import RegistryError
from bordertrace.registry import TraceRegistry

BLACK = (0, 0, 0)


class TestTraceRegistry:

    def test_empty(self):
        reg = TraceRegistry()
        assert len(reg) == 0
        assert not reg.is_traced(0, 0)
        assert reg.total_points == 0

    def test_membership_after_append(self):
        reg = TraceRegistry()
        c = Contour([(1, 1), (1, 2), (2, 2)], BLACK)
        reg.append(c)
        for (x, y) in c:
            assert reg.is_traced(x, y)
        assert not reg.is_traced(2, 1)
        assert not reg.is_traced(0, 0)

    def test_membership_spans_contours(self):
        reg = TraceRegistry()
        reg.append(Contour([(0, 0)], BLACK))
        reg.append(Contour([(5, 5), (6, 5)], BLACK))
        assert reg.is_traced(0, 0)
        assert reg.is_traced(6, 5)
        assert reg.total_points == 3

    def test_growth_preserves_order(self):
        reg = TraceRegistry()
        contours = [Contour([(i, 0), (i, 1)], BLACK) for i in range(3000)]
        for c in contours:
            reg.append(c)
        assert len(reg) == 3000
        assert list(reg) == contours
        assert reg[0] is contours[0]
        assert reg[2999] is contours[2999]

    def test_contours_snapshot_is_tuple(self):
        reg = TraceRegistry()
        reg.append(Contour([(0, 0)], BLACK))
        snap = reg.contours
        reg.append(Contour([(1, 1)], BLACK))
        assert isinstance(snap, tuple)
        assert len(snap) == 1

    def test_append_failure_is_registry_error(self):
        class _Full(list):
            def append(self, item):
                raise MemoryError

        reg = TraceRegistry()
        reg._contours = _Full()
        with pytest.raises(RegistryError):
            reg.append(Contour([(0, 0)], BLACK))
