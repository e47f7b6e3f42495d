"""Unit tests for outline flattening and polygon helpers."""

import math

import pytest

from curveclip.core.builder import CubicOutlineBuilder, QuadraticOutlineBuilder
from curveclip.core.geometry import bounding_box, flatten_outline, signed_area
from curveclip.domain import CubicSegment, EdgePlacement, Point, QuadraticSegment, Size
from curveclip.domain._bezier import (
    MAX_DEPTH,
    evaluate_cubic,
    flatten_cubic,
    flatten_quadratic,
)


def _distance_to_polyline(point: Point, polyline: list[Point]) -> float:
    """Shortest distance from a point to any segment of a polyline."""
    best = math.inf
    for a, b in zip(polyline, polyline[1:]):
        ab = b - a
        length_sq = ab.x * ab.x + ab.y * ab.y
        t = 0.0
        if length_sq:
            t = max(0.0, min(1.0, ((point.x - a.x) * ab.x + (point.y - a.y) * ab.y) / length_sq))
        best = min(best, point.distance_to(a.lerp(b, t)))
    return best


class TestBezierFlattening:
    """Tests for the internal subdivision helpers."""

    def test_straight_quadratic_is_one_segment(self) -> None:
        """Test a control point on the chord needs no subdivision."""
        points = flatten_quadratic([Point(0, 0), Point(5, 0), Point(10, 0)], 0.1)
        assert points == [Point(0, 0), Point(10, 0)]

    def test_quadratic_points_within_tolerance(self) -> None:
        """Test flattened points lie on the true curve."""
        p0, p1, p2 = Point(0, 0), Point(50, 100), Point(100, 0)
        points = flatten_quadratic([p0, p1, p2], 0.25)
        assert len(points) > 3
        assert points[0] == p0
        assert points[-1] == p2
        # Apex of this parabola is (50, 50)
        assert Point(50.0, 50.0) in points

    def test_cubic_endpoints_kept(self) -> None:
        """Test cubic flattening keeps both endpoints."""
        pts = [Point(0, 0), Point(0, 100), Point(100, 100), Point(100, 0)]
        flat = flatten_cubic(pts, 0.5)
        assert flat[0] == pts[0]
        assert flat[-1] == pts[-1]
        assert all(0.0 <= p.y <= 75.0 for p in flat)

    def test_nan_input_terminates(self) -> None:
        """Test non-finite control points do not recurse forever."""
        flat = flatten_quadratic([Point(0, 0), Point(math.nan, math.nan), Point(10, 0)], 0.1)
        assert flat[0] == Point(0, 0)
        assert len(flat) <= 2**MAX_DEPTH + 1

    def test_infinite_input_terminates(self) -> None:
        """Test infinite control points stop at the depth limit."""
        flat = flatten_cubic(
            [Point(0, 0), Point(math.inf, 0), Point(5, 5), Point(10, 0)], 0.1
        )
        assert flat[0] == Point(0, 0)
        assert flat[-1] == Point(10, 0)

    def test_s_curve_is_subdivided(self) -> None:
        """Test an S-curve whose midpoint sits on the chord is still subdivided."""
        pts = [Point(0, 0), Point(0, 100), Point(100, -100), Point(100, 0)]
        assert evaluate_cubic(*pts, 0.5) == Point(50.0, 0.0)

        flat = flatten_cubic(pts, 0.5)

        assert len(flat) > 2
        for step in range(21):
            on_curve = evaluate_cubic(*pts, step / 20)
            assert _distance_to_polyline(on_curve, flat) <= 0.5 + 1e-9


class TestFlattenOutline:
    """Tests for flatten_outline."""

    def test_quadratic_outline(self) -> None:
        """Test the curve apex appears in the flattened polygon."""
        segs = [QuadraticSegment(Point(0, 80), Point(50, 100), Point(100, 80))]
        outline = QuadraticOutlineBuilder(segs, EdgePlacement.BOTTOM).build(Size(100, 100))

        points = flatten_outline(outline, tolerance=0.1)

        assert points[0] == Point(0.0, 0.0)
        assert Point(0.0, 80.0) in points
        assert Point(50.0, 100.0) in points
        assert points[-1] == Point(0.0, 0.0)
        assert bounding_box(points) == (0.0, 0.0, 100.0, 100.0)

    def test_cubic_outline(self) -> None:
        """Test cubic outlines flatten to more points than commands."""
        segs = [CubicSegment(Point(0, 80), Point(30, 100), Point(70, 60), Point(100, 80))]
        outline = CubicOutlineBuilder(segs, EdgePlacement.BOTTOM).build(Size(100, 100))
        points = flatten_outline(outline, tolerance=0.1)
        assert len(points) > len(outline)
        assert Point(100, 80) in points

    def test_cubic_outline_within_tolerance(self) -> None:
        """Test every point of the fitted cubic is close to the polygon."""
        segs = [CubicSegment(Point(0, 80), Point(30, 100), Point(70, 60), Point(100, 80))]
        outline = CubicOutlineBuilder(segs, EdgePlacement.BOTTOM).build(Size(100, 100))
        index = next(i for i, c in enumerate(outline.commands) if c.is_curve)
        start = outline.cursor_points()[index - 1]
        control1, control2, end = outline.commands[index].points

        points = flatten_outline(outline, tolerance=0.1)

        for step in range(41):
            on_curve = evaluate_cubic(start, control1, control2, end, step / 40)
            assert _distance_to_polyline(on_curve, points) <= 0.1 + 1e-9

    def test_outline_method_matches_function(self) -> None:
        """Test CurveOutline.flatten gives the same polygon as flatten_outline."""
        segs = [
            QuadraticSegment(Point(0, 80), Point(25, 95), Point(50, 85)),
            QuadraticSegment(Point(50, 85), Point(75, 70), Point(100, 80), 0.4),
        ]
        outline = QuadraticOutlineBuilder(segs, EdgePlacement.BOTTOM).build(Size(100, 100))
        assert outline.flatten(0.2) == flatten_outline(outline, tolerance=0.2)
        assert outline.flatten()[0] == outline.start_point

    def test_outline_method_rejects_bad_tolerance(self) -> None:
        segs = [QuadraticSegment(Point(0, 80), Point(50, 100), Point(100, 80))]
        outline = QuadraticOutlineBuilder(segs).build(Size(100, 100))
        with pytest.raises(ValueError, match="tolerance"):
            outline.flatten(-1.0)

    def test_invalid_tolerance(self) -> None:
        """Test a non-positive tolerance is rejected."""
        segs = [QuadraticSegment(Point(0, 80), Point(50, 100), Point(100, 80))]
        outline = QuadraticOutlineBuilder(segs).build(Size(100, 100))
        with pytest.raises(ValueError, match="tolerance"):
            flatten_outline(outline, tolerance=0)


class TestPolygonHelpers:
    """Tests for signed_area and bounding_box."""

    def test_signed_area_sign(self) -> None:
        """Test opposite traversal directions give opposite areas."""
        square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        assert signed_area(square) == 100.0
        assert signed_area(list(reversed(square))) == -100.0

    def test_signed_area_degenerate(self) -> None:
        assert signed_area([Point(0, 0), Point(1, 1)]) == 0.0

    def test_straight_outline_area(self) -> None:
        """Test a flat curve along the bottom reproduces the rectangle area."""
        segs = [QuadraticSegment(Point(0, 50), Point(50, 50), Point(100, 50))]
        outline = QuadraticOutlineBuilder(segs, EdgePlacement.BOTTOM).build(Size(100, 50))
        points = flatten_outline(outline)
        assert abs(signed_area(points)) == pytest.approx(5000.0)

    def test_bounding_box_empty(self) -> None:
        assert bounding_box([]) == (0.0, 0.0, 0.0, 0.0)
