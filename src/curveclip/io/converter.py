"""Conversion between JSON segment documents and domain models.

Segment documents are validated with Pydantic and converted into the frozen
domain dataclasses used by the builders. A document looks like:

    {
        "kind": "quadratic",
        "placement": "top",
        "size": {"width": 100, "height": 100},
        "reclip": true,
        "segments": [
            {"start": {"x": 0, "y": 30}, "hint": {"x": 50, "y": 10},
             "end": {"x": 100, "y": 30}, "proportion": 0.5}
        ]
    }
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from curveclip.domain import CubicSegment, EdgePlacement, Point, QuadraticSegment, Size

SegmentKind = Literal["quadratic", "cubic"]


class PointModel(BaseModel):
    """A point in a segment document."""

    x: float
    y: float

    def to_domain(self) -> Point:
        return Point(self.x, self.y)


class SizeModel(BaseModel):
    """Region size in a segment document."""

    width: float = Field(ge=0.0)
    height: float = Field(ge=0.0)

    def to_domain(self) -> Size:
        return Size(self.width, self.height)


class QuadraticSegmentModel(BaseModel):
    """A quadratic segment in a segment document."""

    start: PointModel
    hint: PointModel
    end: PointModel
    proportion: float = 0.5

    def to_domain(self) -> QuadraticSegment:
        return QuadraticSegment(
            start=self.start.to_domain(),
            hint=self.hint.to_domain(),
            end=self.end.to_domain(),
            proportion=self.proportion,
        )


class CubicSegmentModel(BaseModel):
    """A cubic segment in a segment document."""

    p1: PointModel
    p2: PointModel
    p3: PointModel
    p4: PointModel
    smooth: float = 0.5

    def to_domain(self) -> CubicSegment:
        return CubicSegment(
            p1=self.p1.to_domain(),
            p2=self.p2.to_domain(),
            p3=self.p3.to_domain(),
            p4=self.p4.to_domain(),
            smooth=self.smooth,
        )


class SegmentDocument(BaseModel):
    """A complete outline definition loaded from JSON."""

    kind: SegmentKind
    placement: EdgePlacement = EdgePlacement.LEFT
    reclip: bool = True
    size: SizeModel | None = None
    segments: list[QuadraticSegmentModel] | list[CubicSegmentModel]

    @model_validator(mode="after")
    def _check_segments(self) -> "SegmentDocument":
        if not self.segments:
            raise ValueError("segments must not be empty")
        expected = QuadraticSegmentModel if self.kind == "quadratic" else CubicSegmentModel
        if not all(isinstance(s, expected) for s in self.segments):
            raise ValueError(f"segments do not match kind '{self.kind}'")
        return self


def document_to_segments(
    document: SegmentDocument,
) -> list[QuadraticSegment] | list[CubicSegment]:
    """Convert the document's segments to domain segments.

    Args:
        document: Validated segment document

    Returns:
        Domain segments in document order
    """
    return [s.to_domain() for s in document.segments]  # type: ignore[return-value]


def segments_to_document(
    segments: list[QuadraticSegment] | list[CubicSegment],
    placement: EdgePlacement = EdgePlacement.LEFT,
    size: Size | None = None,
    reclip: bool = True,
) -> SegmentDocument:
    """Build a segment document from domain segments.

    Raises:
        ValueError: If segments is empty or mixes kinds
    """
    if not segments:
        raise ValueError("segments must not be empty")
    kind: SegmentKind = "quadratic" if isinstance(segments[0], QuadraticSegment) else "cubic"
    return SegmentDocument.model_validate(
        {
            "kind": kind,
            "placement": placement,
            "reclip": reclip,
            "size": size.to_dict() if size is not None else None,
            "segments": [s.to_dict() for s in segments],
        }
    )
