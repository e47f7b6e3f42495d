"""Outline assembly for a rectangle with one curved edge.

The assembler walks the four sides of the rectangle from (0, 0) to
(width, height) in a fixed cyclic order and swaps exactly one of them for the
fitted curve segments. It does not know how segments are fitted: a
SegmentFitter strategy supplies the start point used for clamping and the
curve command for each segment, so quadratic and cubic outlines share the
same traversal.

The straight lead-in to the curve is clamped against the first segment's
declared start so that an anchor outside the rectangle cannot pull the corner
outside it:
- LEFT: max(0, first.x) on the top edge
- BOTTOM: min(height, first.y) on the left edge
- RIGHT: min(width, first.x) on the bottom edge
- TOP: max(0, first.y) on the right edge
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

from curveclip.core.fitting import SegmentFitter
from curveclip.domain import CurveOutline, EdgePlacement, PathCommand, Size

logger = logging.getLogger(__name__)

SegmentT = TypeVar("SegmentT")


class _OutlineWriter:
    """Append-only command list for one outline under construction."""

    def __init__(self) -> None:
        self._commands: list[PathCommand] = [PathCommand.move_to(0.0, 0.0)]

    def line_to(self, x: float, y: float) -> None:
        self._commands.append(PathCommand.line_to(x, y))

    def curves(self, segments: Sequence[SegmentT], fitter: SegmentFitter[SegmentT]) -> None:
        for index, segment in enumerate(segments):
            self._commands.append(fitter.curve_command(segment, index))

    def finish(self) -> CurveOutline:
        self._commands.append(PathCommand.close())
        return CurveOutline(commands=tuple(self._commands))


def assemble(
    segments: Sequence[SegmentT],
    placement: EdgePlacement,
    size: Size,
    fitter: SegmentFitter[SegmentT],
) -> CurveOutline:
    """Build the closed outline for one edge placement.

    Traversal per placement (W = width, H = height, (fx, fy) = declared
    start of the first segment):

    - LEFT:   (max(0,fx), 0) -> curves -> (0,H) -> (W,H) -> (W,0) -> (max(0,fx), 0)
    - BOTTOM: (0,0) -> (0, min(H,fy)) -> curves -> (W,H) -> (W,0) -> (0,0)
    - RIGHT:  (0,0) -> (0,H) -> (min(W,fx), H) -> curves -> (W,0) -> (0,0)
    - TOP:    (0,0) -> (0,H) -> (W,H) -> (W, max(0,fy)) -> curves -> (0,0)

    Every outline starts with MOVE_TO(0, 0) and ends with CLOSE. Each curve
    command begins at the cursor left by the previous command.

    Args:
        segments: Non-empty segment list, drawn in order
        placement: Side of the rectangle to replace with the curves
        size: Rectangle size
        fitter: Strategy that fits the segment kind

    Returns:
        Closed outline

    Raises:
        ValueError: If segments is empty
        DegenerateSegmentError: If the fitter is strict and a segment is degenerate
    """
    if not segments:
        raise ValueError("Cannot assemble an outline without segments")

    placement = EdgePlacement(placement)
    first = fitter.start_of(segments[0])
    width, height = size.width, size.height
    out = _OutlineWriter()

    if placement is EdgePlacement.LEFT:
        lead_x = max(0.0, first.x)
        out.line_to(lead_x, 0.0)
        out.curves(segments, fitter)
        out.line_to(0.0, height)
        out.line_to(width, height)
        out.line_to(width, 0.0)
        out.line_to(lead_x, 0.0)
    elif placement is EdgePlacement.BOTTOM:
        out.line_to(0.0, 0.0)
        out.line_to(0.0, min(height, first.y))
        out.curves(segments, fitter)
        out.line_to(width, height)
        out.line_to(width, 0.0)
        out.line_to(0.0, 0.0)
    elif placement is EdgePlacement.RIGHT:
        out.line_to(0.0, 0.0)
        out.line_to(0.0, height)
        out.line_to(min(width, first.x), height)
        out.curves(segments, fitter)
        out.line_to(width, 0.0)
        out.line_to(0.0, 0.0)
    else:  # EdgePlacement.TOP
        out.line_to(0.0, 0.0)
        out.line_to(0.0, height)
        out.line_to(width, height)
        out.line_to(width, max(0.0, first.y))
        out.curves(segments, fitter)
        out.line_to(0.0, 0.0)

    outline = out.finish()
    logger.debug(
        "Assembled %s outline: %d segments, %d commands",
        placement.value,
        len(segments),
        len(outline),
    )
    return outline
