"""Tests for curve flattening."""

import pytest

from pen_editor import curves
from pen_editor.interpolation import (
    cubic_bezier,
    flatten_path,
    flatten_segment,
)
from pen_editor.types import Document, HandleKind, Path, Point


class TestCubicBezier:
    p0 = Point(x=0, y=0)
    p1 = Point(x=33, y=100)
    p2 = Point(x=66, y=100)
    p3 = Point(x=100, y=0)

    def test_start(self) -> None:
        result = cubic_bezier(self.p0, self.p1, self.p2, self.p3, 0)
        assert result.x == pytest.approx(0)
        assert result.y == pytest.approx(0)

    def test_end(self) -> None:
        result = cubic_bezier(self.p0, self.p1, self.p2, self.p3, 1)
        assert result.x == pytest.approx(100)
        assert result.y == pytest.approx(0)

    def test_middle(self) -> None:
        result = cubic_bezier(self.p0, self.p1, self.p2, self.p3, 0.5)
        assert result.x == pytest.approx(49.625)
        assert result.y == pytest.approx(75)


class TestFlatten:
    def test_segment_ends_at_endpoint(self) -> None:
        points = flatten_segment(Point(x=0, y=0), Point(x=2, y=0), Point(x=4, y=0), Point(x=6, y=0))
        assert len(points) == 10  # minimum step count
        assert points[-1] == Point(x=6, y=0)

    def test_empty_path(self) -> None:
        assert flatten_path(Path()) == []

    def test_single_anchor(self) -> None:
        document = Document(paths=[Path()])
        curves.add_anchor(document, 0, Point(x=4, y=4))
        assert flatten_path(document.paths[0]) == [Point(x=4, y=4)]

    def test_straight_path_follows_anchors(self) -> None:
        document = Document(paths=[Path()])
        curves.add_anchor(document, 0, Point(x=0, y=0))
        curves.add_anchor(document, 0, Point(x=100, y=0))
        curves.set_handle(document, 0, 0, HandleKind.OUTGOING, None)
        curves.set_handle(document, 0, 1, HandleKind.INCOMING, None)
        points = flatten_path(document.paths[0])
        assert points[0] == Point(x=0, y=0)
        assert points[-1] == Point(x=100, y=0)
        assert all(p.y == 0 for p in points)
        assert [p.x for p in points] == sorted(p.x for p in points)
