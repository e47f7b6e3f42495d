"""Document I/O layer for curveclip.

This module reads JSON segment documents and writes outlines as SVG. It keeps
JSON validation (Pydantic) out of the domain models.

Key classes:
- DocumentReader: Load segment documents and create builders
- SvgWriter: Save outlines as SVG clip paths
- SegmentDocument: Validated document schema
"""

from curveclip.io.converter import SegmentDocument, segments_to_document
from curveclip.io.reader import DocumentReader
from curveclip.io.writer import SvgWriter

__all__ = [
    "DocumentReader",
    "SegmentDocument",
    "SvgWriter",
    "segments_to_document",
]
