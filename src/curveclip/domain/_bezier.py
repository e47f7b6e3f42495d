"""Internal Bezier evaluation and flattening helpers.

This is an internal module containing helper functions for the fitters and
CurveOutline.flatten. Not intended for public use.
"""

import math

from curveclip.domain.geometry import Point

# Subdivision stops here even if the tolerance is not met (non-finite input
# never satisfies it).
MAX_DEPTH = 16


def evaluate_quadratic(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate B(t) = (1-t)^2 p0 + 2t(1-t) p1 + t^2 p2."""
    u = 1.0 - t
    a, b, c = u * u, 2.0 * t * u, t * t
    return Point(a * p0.x + b * p1.x + c * p2.x, a * p0.y + b * p1.y + c * p2.y)


def evaluate_cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bezier at parameter t."""
    u = 1.0 - t
    a, b, c, d = u * u * u, 3.0 * t * u * u, 3.0 * t * t * u, t * t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def distance_to_line(point: Point, start: Point, end: Point) -> float:
    """Distance from a point to the infinite line through start and end.

    Falls back to the distance to start when the line is degenerate.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0.0:
        return point.distance_to(start)
    return abs(dx * (point.y - start.y) - dy * (point.x - start.x)) / length


def _is_flat(distance: float, tolerance: float, depth: int) -> bool:
    return distance <= tolerance or depth >= MAX_DEPTH or math.isnan(distance)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    The curve lies within half the control point's distance from the chord,
    so the control point distance bounds the flattening error.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2 = points

    if _is_flat(distance_to_line(p1, p0, p2), tolerance, depth):
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = p0.midpoint(p1)
    r1 = p1.midpoint(p2)
    mid = q1.midpoint(r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Flatness is judged on the control points: the curve stays inside their
    convex hull, so once both inner control points are within tolerance of
    the chord, so is the curve. Uses De Casteljau's algorithm to subdivide.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2, p3 = points

    distance = max(distance_to_line(p1, p0, p3), distance_to_line(p2, p0, p3))
    if _is_flat(distance, tolerance, depth):
        return [p0, p3]

    # First level
    q1 = p0.midpoint(p1)
    q2 = p1.midpoint(p2)
    q3 = p2.midpoint(p3)

    # Second level
    r1 = q1.midpoint(q2)
    r2 = q2.midpoint(q3)

    # Third level (point on the curve at t=0.5)
    mid = r1.midpoint(r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right
