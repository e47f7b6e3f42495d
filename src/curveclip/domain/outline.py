"""Outline types produced by the assembler.

This module defines:
- EdgePlacement: Which side of the rectangle carries the curve
- CommandKind: Enum of path command types
- PathCommand: One move/line/curve/close instruction
- CurveOutline: The closed, ordered command sequence handed to the host
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from curveclip.domain._bezier import flatten_cubic, flatten_quadratic
from curveclip.domain.geometry import Point


class EdgePlacement(str, Enum):
    """Side of the clipped rectangle that is replaced by curve segments.

    Host coordinates put the origin at the top-left corner, so:
    - LEFT: the curve runs down the left edge
    - BOTTOM: the curve runs along the bottom edge
    - RIGHT: the curve runs down the right edge
    - TOP: the curve runs along the top edge
    """

    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"
    TOP = "top"


class CommandKind(str, Enum):
    """Path command type, named after its SVG path letter."""

    MOVE_TO = "M"
    LINE_TO = "L"
    QUAD_TO = "Q"
    CUBIC_TO = "C"
    CLOSE = "Z"

    @property
    def arity(self) -> int:
        """Number of points the command carries."""
        return _ARITY[self]


_ARITY = {
    CommandKind.MOVE_TO: 1,
    CommandKind.LINE_TO: 1,
    CommandKind.QUAD_TO: 2,
    CommandKind.CUBIC_TO: 3,
    CommandKind.CLOSE: 0,
}


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path instruction.

    Curve commands start at the current cursor; their last point is where the
    cursor ends up. CLOSE carries no points and returns the cursor to the
    start of the subpath.

    Attributes:
        kind: Command type
        points: Control and end points, in SVG argument order
    """

    kind: CommandKind
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        if len(self.points) != self.kind.arity:
            raise ValueError(
                f"{self.kind.name} takes {self.kind.arity} points, got {len(self.points)}"
            )

    @classmethod
    def move_to(cls, x: float, y: float) -> "PathCommand":
        return cls(CommandKind.MOVE_TO, (Point(x, y),))

    @classmethod
    def line_to(cls, x: float, y: float) -> "PathCommand":
        return cls(CommandKind.LINE_TO, (Point(x, y),))

    @classmethod
    def quad_to(cls, control: Point, end: Point) -> "PathCommand":
        return cls(CommandKind.QUAD_TO, (control, end))

    @classmethod
    def cubic_to(cls, control1: Point, control2: Point, end: Point) -> "PathCommand":
        return cls(CommandKind.CUBIC_TO, (control1, control2, end))

    @classmethod
    def close(cls) -> "PathCommand":
        return cls(CommandKind.CLOSE)

    @property
    def end(self) -> Point | None:
        """End point of the command, None for CLOSE."""
        return self.points[-1] if self.points else None

    @property
    def is_curve(self) -> bool:
        return self.kind in (CommandKind.QUAD_TO, CommandKind.CUBIC_TO)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        return cls(
            kind=CommandKind(data["kind"]),
            points=tuple(Point.from_dict(p) for p in data["points"]),
        )


def format_number(value: float, precision: int = 3) -> str:
    """Format a coordinate for SVG path data.

    Trailing zeros are dropped and negative zero is printed as 0.

    Args:
        value: Coordinate value
        precision: Maximum number of decimals

    Returns:
        Compact decimal string ("nan"/"inf" are passed through as-is)
    """
    if not math.isfinite(value):
        return str(value)
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class CurveOutline:
    """A closed outline: straight sides plus one curved side.

    Outlines produced by the assembler start with MOVE_TO at the origin and
    end with CLOSE, so the cursor finishes where it started.

    Attributes:
        commands: Ordered path commands
    """

    commands: tuple[PathCommand, ...]

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @property
    def start_point(self) -> Point:
        """Start of the outline (target of the leading MOVE_TO).

        Raises:
            ValueError: If the outline does not start with MOVE_TO
        """
        if not self.commands or self.commands[0].kind is not CommandKind.MOVE_TO:
            raise ValueError("Outline does not start with a move command")
        return self.commands[0].points[0]

    @property
    def end_point(self) -> Point:
        """Cursor position after the last command."""
        return self.cursor_points()[-1]

    def cursor_points(self) -> list[Point]:
        """Cursor position after each command, in order.

        Returns:
            One point per command
        """
        cursor: list[Point] = []
        subpath_start = self.start_point
        for command in self.commands:
            if command.kind is CommandKind.CLOSE:
                cursor.append(subpath_start)
                continue
            if command.kind is CommandKind.MOVE_TO:
                subpath_start = command.points[0]
            cursor.append(command.points[-1])
        return cursor

    @property
    def is_closed(self) -> bool:
        """True when the outline finishes where it started."""
        return bool(self.commands) and self.end_point == self.start_point

    @property
    def curves(self) -> list[PathCommand]:
        """Curve commands in path order."""
        return [c for c in self.commands if c.is_curve]

    @property
    def curve_count(self) -> int:
        return len(self.curves)

    def is_finite(self) -> bool:
        """Check that no coordinate is NaN or infinite.

        Degenerate segments (proportion 0 or 1, coincident cubic anchors)
        leak non-finite coordinates into the outline; hosts should reject
        such outlines rather than render them.
        """
        return all(p.is_finite() for c in self.commands for p in c.points)

    def flatten(self, tolerance: float = 0.5) -> list[Point]:
        """Approximate the outline by a polygon.

        Curves are subdivided until every piece is within ``tolerance`` of
        the true curve; straight commands contribute their end point. CLOSE
        adds nothing, the polygon is implicitly closed.

        Args:
            tolerance: Maximum distance between polygon and curve

        Returns:
            Polygon vertices in path order

        Raises:
            ValueError: If tolerance is not positive
        """
        if tolerance <= 0:
            raise ValueError(f"Flatten tolerance must be positive, got {tolerance}")

        points: list[Point] = []
        for command in self.commands:
            if command.kind is CommandKind.CLOSE:
                continue
            if command.kind is CommandKind.QUAD_TO and points:
                points.extend(flatten_quadratic([points[-1], *command.points], tolerance)[1:])
            elif command.kind is CommandKind.CUBIC_TO and points:
                points.extend(flatten_cubic([points[-1], *command.points], tolerance)[1:])
            else:
                points.append(command.points[-1])
        return points

    def to_svg_path(self, precision: int = 3) -> str:
        """Render as SVG path data (the ``d`` attribute).

        Args:
            precision: Maximum number of decimals per coordinate

        Returns:
            Path data string, e.g. "M0 0 L0 100 ... Z"
        """
        parts: list[str] = []
        for command in self.commands:
            coords = " ".join(
                f"{format_number(p.x, precision)} {format_number(p.y, precision)}"
                for p in command.points
            )
            parts.append(f"{command.kind.value}{coords}" if coords else command.kind.value)
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the list of serialized commands
        """
        return {"commands": [c.to_dict() for c in self.commands]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurveOutline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a "commands" list

        Returns:
            CurveOutline instance
        """
        return cls(commands=tuple(PathCommand.from_dict(c) for c in data["commands"]))
