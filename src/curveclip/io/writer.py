"""SVG writer for produced outlines.

This module provides the SvgWriter class, which renders an outline as a
standalone SVG document: a clipPath definition plus a filled preview path.
"""

from pathlib import Path
from xml.sax.saxutils import quoteattr

from curveclip.domain import CurveOutline, Size, format_number


class SvgWriter:
    """Writes outlines as SVG documents.

    Example:
        writer = SvgWriter(precision=2)
        writer.write(outline, Size(200, 100), Path("wave.svg"))
    """

    def __init__(self, precision: int = 3, fill: str = "#3b82f6") -> None:
        """Initialize the SVG writer.

        Args:
            precision: Decimals kept in path coordinates
            fill: Fill colour of the preview path
        """
        self._precision = precision
        self._fill = fill

    def render(self, outline: CurveOutline, size: Size, clip_id: str = "curveclip") -> str:
        """Render the outline as SVG markup.

        Args:
            outline: Outline to render
            size: Region size, used for the viewBox
            clip_id: Id of the generated clipPath element

        Returns:
            SVG document text
        """
        width = format_number(size.width, self._precision)
        height = format_number(size.height, self._precision)
        data = quoteattr(outline.to_svg_path(self._precision))
        return (
            '<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">\n'
            f"  <defs>\n"
            f"    <clipPath id={quoteattr(clip_id)}>\n"
            f"      <path d={data}/>\n"
            f"    </clipPath>\n"
            f"  </defs>\n"
            f"  <path d={data} fill={quoteattr(self._fill)}/>\n"
            "</svg>\n"
        )

    def write(self, outline: CurveOutline, size: Size, output_path: Path) -> None:
        """Write the rendered SVG to a file.

        Raises:
            OSError: If the file cannot be written
        """
        output_path.write_text(self.render(outline, size), encoding="utf-8")

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a segment document.

        Converts: wave.json -> wave-outline.svg

        Args:
            input_path: Segment document path

        Returns:
            Path next to the input with an -outline.svg suffix
        """
        return input_path.parent / f"{input_path.stem}-outline.svg"
