"""Curve segment definitions and fitted control points.

Segments are what callers declare: anchor points that the curve should pass
through or lean towards. Control points are what the fitters derive from them
and what ends up in the outline.
"""

from dataclasses import dataclass
from typing import Any

from curveclip.domain.geometry import Point


@dataclass(frozen=True, slots=True)
class QuadraticSegment:
    """One quadratic section of a curved edge.

    The fitted curve starts at the current path cursor, passes exactly through
    ``hint`` at parameter ``proportion`` and ends at ``end``.

    Attributes:
        start: Declared start of the section, used for lead-in clamping
        hint: Point the curve must pass through (the apex of the bend)
        end: End point of the section
        proportion: Curve parameter at which the hint is reached; must not
            be 0 or 1
    """

    start: Point
    hint: Point
    end: Point
    proportion: float = 0.5

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the segment
        """
        return {
            "start": self.start.to_dict(),
            "hint": self.hint.to_dict(),
            "end": self.end.to_dict(),
            "proportion": self.proportion,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuadraticSegment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a segment

        Returns:
            QuadraticSegment instance
        """
        return cls(
            start=Point.from_dict(data["start"]),
            hint=Point.from_dict(data["hint"]),
            end=Point.from_dict(data["end"]),
            proportion=float(data.get("proportion", 0.5)),
        )


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """One cubic section of a curved edge.

    Attributes:
        p1: First anchor, used for lead-in clamping
        p2: Second anchor, pulls the first control point
        p3: Third anchor, pulls the second control point
        p4: End point of the section
        smooth: Tension factor; conventionally in [0, 1] but never clamped
    """

    p1: Point
    p2: Point
    p3: Point
    p4: Point
    smooth: float = 0.5

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the segment
        """
        return {
            "p1": self.p1.to_dict(),
            "p2": self.p2.to_dict(),
            "p3": self.p3.to_dict(),
            "p4": self.p4.to_dict(),
            "smooth": self.smooth,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CubicSegment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a segment

        Returns:
            CubicSegment instance
        """
        return cls(
            p1=Point.from_dict(data["p1"]),
            p2=Point.from_dict(data["p2"]),
            p3=Point.from_dict(data["p3"]),
            p4=Point.from_dict(data["p4"]),
            smooth=float(data.get("smooth", 0.5)),
        )


@dataclass(frozen=True, slots=True)
class QuadraticControlPoints:
    """Fitted quadratic Bézier: the true control point and the end point."""

    control: Point
    end: Point


@dataclass(frozen=True, slots=True)
class CubicControlPoints:
    """Fitted cubic Bézier: two true control points and the end point."""

    control1: Point
    control2: Point
    end: Point
