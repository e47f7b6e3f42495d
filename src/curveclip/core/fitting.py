"""Control point fitting for quadratic and cubic segments.

Users describe a curved edge with anchor points that are easy to reason
about (a point the curve should pass through, or four points it should follow
smoothly). The functions here turn those anchors into true Bézier control
points.

Division by zero follows IEEE float semantics by default: a zero denominator
produces inf or nan coordinates instead of raising. Pass ``strict=True`` to
raise DegenerateSegmentError instead.

Key functions:
- fit_quadratic: Hinted 3-point definition to one control point
- fit_cubic: 4 anchors plus smoothing factor to two control points

Key classes:
- QuadraticFitter, CubicFitter: Strategy objects used by the assembler
"""

import logging
import math
from dataclasses import dataclass
from typing import Protocol, TypeVar

from curveclip.domain import (
    CubicControlPoints,
    CubicSegment,
    PathCommand,
    Point,
    QuadraticControlPoints,
    QuadraticSegment,
)
from curveclip.exceptions import DegenerateSegmentError

logger = logging.getLogger(__name__)

SegmentT = TypeVar("SegmentT", contravariant=True)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: x/0 is +-inf and 0/0 is nan."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def fit_quadratic(
    segment: QuadraticSegment,
    strict: bool = False,
    index: int | None = None,
) -> QuadraticControlPoints:
    """Solve for the quadratic control point that puts the hint on the curve.

    With t = segment.proportion, finds P such that
    B(t) = (1-t)^2 start + 2t(1-t) P + t^2 end equals the hint:

        P = (hint - ((1-t)^2 start + t^2 end)) / (2t(1-t))

    Args:
        segment: Declared segment
        strict: Raise instead of producing non-finite coordinates
        index: Position of the segment in its list, used in error messages

    Returns:
        Fitted control point and the unchanged end point

    Raises:
        DegenerateSegmentError: If strict and proportion is 0 or 1

    Examples:
        >>> seg = QuadraticSegment(Point(0, 0), Point(50, 50), Point(100, 0), 0.5)
        >>> fit_quadratic(seg).control
        Point(x=50.0, y=100.0)
    """
    t = segment.proportion
    u = 1.0 - t
    denominator = 2.0 * t * u

    if denominator == 0.0:
        if strict:
            raise DegenerateSegmentError(index, f"proportion must not be {t!r}")
        logger.debug("Quadratic segment %s has degenerate proportion %r", index, t)

    x = _divide(
        segment.hint.x - (segment.start.x * u * u + t * t * segment.end.x),
        denominator,
    )
    y = _divide(
        segment.hint.y - (segment.start.y * u * u + t * t * segment.end.y),
        denominator,
    )

    return QuadraticControlPoints(control=Point(x, y), end=segment.end)


def fit_cubic(
    segment: CubicSegment,
    strict: bool = False,
    index: int | None = None,
) -> CubicControlPoints:
    """Derive cubic control points by chord-length blending of midpoints.

    The algorithm:
    1. Takes the midpoints m1, m2, m3 of the anchor pairs (p1,p2), (p2,p3),
       (p3,p4)
    2. Weights m1->m2 and m2->m3 by the chord lengths on either side,
       giving bm1 and bm2
    3. Moves each blended point towards m2 by ``smooth``, then translates
       it so that it sits relative to p2 (or p3) instead of bm1 (or bm2)

    ``smooth`` is a tension factor: 0 uses p2 and p3 themselves as control
    points, 1 shifts them by the full offset from the blended points to m2.
    Values outside [0, 1] extrapolate.

    Args:
        segment: Declared segment
        strict: Raise instead of producing non-finite coordinates
        index: Position of the segment in its list, used in error messages

    Returns:
        Fitted control points; the end point is always p4

    Raises:
        DegenerateSegmentError: If strict and two consecutive chords both
            have zero length
    """
    p1, p2, p3, p4 = segment.p1, segment.p2, segment.p3, segment.p4

    m1 = p1.midpoint(p2)
    m2 = p2.midpoint(p3)
    m3 = p3.midpoint(p4)

    len1 = p1.distance_to(p2)
    len2 = p2.distance_to(p3)
    len3 = p3.distance_to(p4)

    if strict:
        if len1 + len2 == 0.0:
            raise DegenerateSegmentError(index, "p1, p2 and p3 coincide")
        if len2 + len3 == 0.0:
            raise DegenerateSegmentError(index, "p2, p3 and p4 coincide")

    k1 = _divide(len1, len1 + len2)
    k2 = _divide(len2, len2 + len3)

    bm1 = m1.lerp(m2, k1)
    bm2 = m2.lerp(m3, k2)

    smooth = segment.smooth
    control1 = bm1 + (m2 - bm1) * smooth + (p2 - bm1)
    control2 = bm2 + (m2 - bm2) * smooth + (p3 - bm2)

    return CubicControlPoints(control1=control1, control2=control2, end=p4)


class SegmentFitter(Protocol[SegmentT]):
    """Capability the assembler needs from a curve kind."""

    def start_of(self, segment: SegmentT) -> Point:
        """Declared start of the segment, used for lead-in clamping."""
        ...

    def curve_command(self, segment: SegmentT, index: int) -> PathCommand:
        """Fit the segment and return the curve command that draws it."""
        ...


@dataclass(frozen=True)
class QuadraticFitter:
    """Fits QuadraticSegment values and emits QUAD_TO commands."""

    strict: bool = False

    def fit(self, segment: QuadraticSegment, index: int | None = None) -> QuadraticControlPoints:
        return fit_quadratic(segment, strict=self.strict, index=index)

    def start_of(self, segment: QuadraticSegment) -> Point:
        return segment.start

    def curve_command(self, segment: QuadraticSegment, index: int) -> PathCommand:
        dots = self.fit(segment, index)
        return PathCommand.quad_to(dots.control, dots.end)


@dataclass(frozen=True)
class CubicFitter:
    """Fits CubicSegment values and emits CUBIC_TO commands."""

    strict: bool = False

    def fit(self, segment: CubicSegment, index: int | None = None) -> CubicControlPoints:
        return fit_cubic(segment, strict=self.strict, index=index)

    def start_of(self, segment: CubicSegment) -> Point:
        return segment.p1

    def curve_command(self, segment: CubicSegment, index: int) -> PathCommand:
        dots = self.fit(segment, index)
        return PathCommand.cubic_to(dots.control1, dots.control2, dots.end)
