"""Domain models for curveclip.

This module contains the value types describing curve segments, their fitted
control points and the outlines built from them. All models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any rendering framework

Key classes:
- Point, Size: Plain coordinates and region bounds
- QuadraticSegment, CubicSegment: User-declared curve sections
- QuadraticControlPoints, CubicControlPoints: Fitter output
- EdgePlacement: Which side of the rectangle is curved
- PathCommand, CurveOutline: The produced path
"""

from curveclip.domain.geometry import Point, Size
from curveclip.domain.outline import (
    CommandKind,
    CurveOutline,
    EdgePlacement,
    PathCommand,
    format_number,
)
from curveclip.domain.segments import (
    CubicControlPoints,
    CubicSegment,
    QuadraticControlPoints,
    QuadraticSegment,
)

__all__: list[str] = [
    # Enums
    "CommandKind",
    "EdgePlacement",
    # Core types
    "Point",
    "Size",
    "QuadraticSegment",
    "CubicSegment",
    "QuadraticControlPoints",
    "CubicControlPoints",
    "PathCommand",
    "CurveOutline",
    # Helpers
    "format_number",
]
