"""Polygon utilities for produced outlines.

Hosts that can only clip with polygons (or want to inspect an outline) can
flatten it into a point list here. Provides:
- Outline flattening (Bezier subdivision)
- Signed area (shoelace formula) for winding checks
- Bounding box

All functions are pure and stateless.
"""

from curveclip.domain import CurveOutline, Point


def flatten_outline(outline: CurveOutline, tolerance: float = 0.5) -> list[Point]:
    """Convert an outline to a closed polygon.

    Straight commands contribute their end points; curves are subdivided
    until their control points are within ``tolerance`` of the chord. The
    trailing CLOSE is not repeated as a point.

    Args:
        outline: Outline to flatten
        tolerance: Maximum distance from true curve

    Returns:
        Polygon vertices in path order

    Raises:
        ValueError: If tolerance is not positive

    Examples:
        >>> from curveclip.domain import PathCommand
        >>> square = CurveOutline((
        ...     PathCommand.move_to(0, 0), PathCommand.line_to(0, 1),
        ...     PathCommand.line_to(1, 1), PathCommand.close(),
        ... ))
        >>> flatten_outline(square)
        [Point(x=0, y=0), Point(x=0, y=1), Point(x=1, y=1)]
    """
    return outline.flatten(tolerance)


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    In the host's y-down coordinate system a positive area means the polygon
    is traversed clockwise on screen.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def bounding_box(points: list[Point]) -> tuple[float, float, float, float]:
    """Calculate bounding box of a point list.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zero for an empty list
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
