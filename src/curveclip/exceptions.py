"""Exception hierarchy for Curveclip."""


class CurveClipError(Exception):
    """Base exception for all Curveclip errors."""

    pass


class SegmentError(CurveClipError):
    """Errors related to curve segment definitions."""

    pass


class EmptySegmentListError(SegmentError):
    """A builder was given no segments to draw."""

    def __init__(self, builder: str) -> None:
        self.builder = builder
        super().__init__(f"{builder} requires at least one segment")


class SegmentTypeError(SegmentError):
    """Segment list mixes or contains unsupported segment kinds."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unsupported segment list: {reason}")


class DegenerateSegmentError(SegmentError):
    """Segment would divide by zero while fitting control points."""

    def __init__(self, index: int | None, reason: str) -> None:
        self.index = index
        self.reason = reason
        where = f"Segment {index}" if index is not None else "Segment"
        super().__init__(f"{where} is degenerate: {reason}")


class DocumentError(CurveClipError):
    """Errors related to reading or writing outline documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a segment document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving an outline document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")
