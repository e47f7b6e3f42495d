"""Curveclip - Bézier-edged clip outlines for rectangular regions.

Curveclip computes closed outlines that clip a rectangle: three straight sides
are kept and the fourth is replaced by a chain of quadratic or cubic Bézier
segments fitted from user-supplied anchor points.

Example:
    >>> from curveclip import EdgePlacement, Point, QuadraticOutlineBuilder
    >>> from curveclip import QuadraticSegment, Size
    >>> builder = QuadraticOutlineBuilder(
    ...     [QuadraticSegment(Point(0, 30), Point(50, 10), Point(100, 30))],
    ...     placement=EdgePlacement.TOP,
    ... )
    >>> builder.build(Size(100, 100)).curve_count
    1
"""

from curveclip.core import (
    CubicOutlineBuilder,
    QuadraticOutlineBuilder,
    build_outline,
    fit_cubic,
    fit_quadratic,
)
from curveclip.domain import (
    CubicControlPoints,
    CubicSegment,
    CurveOutline,
    EdgePlacement,
    Point,
    QuadraticControlPoints,
    QuadraticSegment,
    Size,
)

__version__ = "0.1.0"

__all__ = [
    "CubicControlPoints",
    "CubicOutlineBuilder",
    "CubicSegment",
    "CurveOutline",
    "EdgePlacement",
    "Point",
    "QuadraticControlPoints",
    "QuadraticOutlineBuilder",
    "QuadraticSegment",
    "Size",
    "__version__",
    "build_outline",
    "fit_cubic",
    "fit_quadratic",
]
