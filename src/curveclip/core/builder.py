"""Outline builders: the host-facing entry points.

A builder pairs a fixed segment list and edge placement with a redraw flag.
The host calls ``build(size)`` from its layout pass whenever the region size
may have changed, and ``should_rebuild(previous)`` to decide whether a cached
outline can be reused.

Builders copy their segments into a tuple at construction and keep no other
state, so one builder may be shared between threads.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from curveclip.core.assembler import assemble
from curveclip.core.fitting import CubicFitter, QuadraticFitter, SegmentFitter
from curveclip.domain import CubicSegment, CurveOutline, EdgePlacement, QuadraticSegment, Size
from curveclip.exceptions import EmptySegmentListError, SegmentTypeError

logger = logging.getLogger(__name__)

SegmentT = TypeVar("SegmentT")


class _OutlineBuilder(Generic[SegmentT]):
    """Shared behaviour of the quadratic and cubic builders."""

    def __init__(
        self,
        segments: Iterable[SegmentT],
        fitter: SegmentFitter[SegmentT],
        placement: EdgePlacement = EdgePlacement.LEFT,
        reclip: bool = True,
    ) -> None:
        self._segments: tuple[SegmentT, ...] = tuple(segments)
        if not self._segments:
            raise EmptySegmentListError(type(self).__name__)
        self._fitter = fitter
        self._placement = EdgePlacement(placement)
        self._reclip = reclip

    @property
    def segments(self) -> tuple[SegmentT, ...]:
        return self._segments

    @property
    def placement(self) -> EdgePlacement:
        return self._placement

    @property
    def reclip(self) -> bool:
        """Whether the host should rebuild even when nothing looks changed."""
        return self._reclip

    def build(self, size: Size) -> CurveOutline:
        """Build the clip outline for a region of the given size.

        Args:
            size: Bounding box of the region, from the host's layout pass

        Returns:
            Closed outline with one curve command per segment

        Raises:
            DegenerateSegmentError: If the builder is strict and a segment
                cannot be fitted
        """
        outline = assemble(self._segments, self._placement, size, self._fitter)
        if not outline.is_finite():
            logger.warning(
                "%s produced non-finite coordinates; check for degenerate segments",
                type(self).__name__,
            )
        return outline

    def should_rebuild(self, previous: "_OutlineBuilder | bool | None" = None) -> bool:  # noqa: ARG002
        """Tell the host whether to rebuild the outline.

        Always returns the stored redraw flag; the previous builder (or its
        flag) is accepted for symmetry with host clip callbacks and ignored.
        """
        return self._reclip

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(segments={len(self._segments)}, "
            f"placement={self._placement.value!r}, reclip={self._reclip})"
        )


class QuadraticOutlineBuilder(_OutlineBuilder[QuadraticSegment]):
    """Builds outlines whose curved edge is a chain of quadratic Béziers.

    Example:
        builder = QuadraticOutlineBuilder(
            [QuadraticSegment(Point(0, 30), Point(50, 10), Point(100, 30))],
            placement=EdgePlacement.TOP,
        )
        outline = builder.build(Size(100, 100))
    """

    def __init__(
        self,
        segments: Iterable[QuadraticSegment],
        placement: EdgePlacement = EdgePlacement.LEFT,
        reclip: bool = True,
        strict: bool = False,
    ) -> None:
        super().__init__(segments, QuadraticFitter(strict=strict), placement, reclip)


class CubicOutlineBuilder(_OutlineBuilder[CubicSegment]):
    """Builds outlines whose curved edge is a chain of smoothed cubic Béziers."""

    def __init__(
        self,
        segments: Iterable[CubicSegment],
        placement: EdgePlacement = EdgePlacement.LEFT,
        reclip: bool = True,
        strict: bool = False,
    ) -> None:
        super().__init__(segments, CubicFitter(strict=strict), placement, reclip)


def create_builder(
    segments: Sequence[QuadraticSegment] | Sequence[CubicSegment],
    placement: EdgePlacement = EdgePlacement.LEFT,
    reclip: bool = True,
    strict: bool = False,
) -> QuadraticOutlineBuilder | CubicOutlineBuilder:
    """Pick the builder matching the segment type.

    Raises:
        EmptySegmentListError: If segments is empty
        SegmentTypeError: If segments mix kinds or contain unknown types
    """
    if not segments:
        raise EmptySegmentListError("create_builder")
    if all(isinstance(s, QuadraticSegment) for s in segments):
        return QuadraticOutlineBuilder(segments, placement, reclip, strict)  # type: ignore[arg-type]
    if all(isinstance(s, CubicSegment) for s in segments):
        return CubicOutlineBuilder(segments, placement, reclip, strict)  # type: ignore[arg-type]
    kinds = sorted({type(s).__name__ for s in segments})
    raise SegmentTypeError(f"expected a single segment kind, got {', '.join(kinds)}")


def build_outline(
    segments: Sequence[QuadraticSegment] | Sequence[CubicSegment],
    placement: EdgePlacement,
    size: Size,
    strict: bool = False,
) -> CurveOutline:
    """One-shot helper: choose a builder by segment type and build."""
    return create_builder(segments, placement, strict=strict).build(size)
