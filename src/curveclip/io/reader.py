"""Document reader for loading segment definitions.

This module provides the DocumentReader class for loading JSON segment
documents and turning them into outline builders.
"""

from pathlib import Path

from curveclip.core import CubicOutlineBuilder, QuadraticOutlineBuilder, create_builder
from curveclip.domain import CubicSegment, EdgePlacement, QuadraticSegment, Size
from curveclip.io.converter import SegmentDocument, document_to_segments


class DocumentReader:
    """Loads JSON segment documents.

    Example:
        reader = DocumentReader(Path("wave.json"))
        reader.load()
        outline = reader.builder().build(reader.size or Size(200, 100))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the document reader.

        Args:
            path: Path to the JSON document
        """
        self._path = path
        self._document: SegmentDocument | None = None

    def load(self) -> None:
        """Load and validate the document.

        Raises:
            FileNotFoundError: If the document does not exist
            pydantic.ValidationError: If the document is malformed
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Document not found: {self._path}")

        self._document = SegmentDocument.model_validate_json(
            self._path.read_text(encoding="utf-8")
        )

    @property
    def document(self) -> SegmentDocument:
        """Return the validated document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document

    @property
    def kind(self) -> str:
        return self.document.kind

    @property
    def placement(self) -> EdgePlacement:
        return self.document.placement

    @property
    def size(self) -> Size | None:
        """Region size declared in the document, if any."""
        size = self.document.size
        return size.to_domain() if size is not None else None

    @property
    def segments(self) -> list[QuadraticSegment] | list[CubicSegment]:
        return document_to_segments(self.document)

    def builder(
        self,
        placement: EdgePlacement | None = None,
        strict: bool = False,
    ) -> QuadraticOutlineBuilder | CubicOutlineBuilder:
        """Create a builder for the loaded segments.

        Args:
            placement: Override for the document's placement
            strict: Raise on degenerate segments

        Returns:
            Builder matching the document kind
        """
        return create_builder(
            self.segments,
            placement=placement or self.placement,
            reclip=self.document.reclip,
            strict=strict,
        )
