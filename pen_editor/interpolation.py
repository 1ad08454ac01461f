"""Pure functions for curve flattening.

Stateless math used by the preview renderer. No side effects or I/O.
"""

from pen_editor.types import Path, Point

MIN_SEGMENT_STEPS = 10


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Bernstein form of the cubic through control points p0..p3."""
    s = 1 - t
    return s**3 * p0 + 3 * s**2 * t * p1 + 3 * s * t**2 * p2 + t**3 * p3


def flatten_segment(
    p0: Point, p1: Point, p2: Point, p3: Point, steps_per_unit: float = 0.5
) -> list[Point]:
    """Sample a cubic segment, excluding its start point.

    The control polygon length is used as a rough estimate of arc length.
    """
    polygon_length = p0.distance_to(p1) + p1.distance_to(p2) + p2.distance_to(p3)
    steps = max(MIN_SEGMENT_STEPS, int(polygon_length * steps_per_unit))
    return [cubic_bezier(p0, p1, p2, p3, i / steps) for i in range(1, steps + 1)]


def flatten_path(path: Path, steps_per_unit: float = 0.5) -> list[Point]:
    """Convert a path into a polyline suitable for drawing."""
    if path.is_empty:
        return []
    points = [path.anchors[0]]
    for segment in path.segments():
        points.extend(flatten_segment(*segment, steps_per_unit=steps_per_unit))
    return points
