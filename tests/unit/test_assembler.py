"""Unit tests for outline assembly."""

import pytest

from curveclip.core.assembler import assemble
from curveclip.core.fitting import CubicFitter, QuadraticFitter
from curveclip.domain import (
    CommandKind,
    CubicSegment,
    EdgePlacement,
    PathCommand,
    Point,
    QuadraticSegment,
    Size,
)


def _lines(outline) -> list[tuple[float, float]]:
    """End points of the LINE_TO commands, in order."""
    return [c.end.to_tuple() for c in outline.commands if c.kind is CommandKind.LINE_TO]


class TestAssemblePlacements:
    """Tests for the per-placement traversal."""

    @pytest.fixture
    def size(self) -> Size:
        return Size(200.0, 100.0)

    @pytest.fixture
    def fitter(self) -> QuadraticFitter:
        return QuadraticFitter()

    def test_left(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test LEFT runs the curve down the left edge."""
        segs = [QuadraticSegment(Point(20, 0), Point(10, 50), Point(20, 100))]
        outline = assemble(segs, EdgePlacement.LEFT, size, fitter)

        kinds = [c.kind for c in outline.commands]
        assert kinds == [
            CommandKind.MOVE_TO,
            CommandKind.LINE_TO,
            CommandKind.QUAD_TO,
            CommandKind.LINE_TO,
            CommandKind.LINE_TO,
            CommandKind.LINE_TO,
            CommandKind.LINE_TO,
            CommandKind.CLOSE,
        ]
        assert _lines(outline) == [
            (20.0, 0.0),
            (0.0, 100.0),
            (200.0, 100.0),
            (200.0, 0.0),
            (20.0, 0.0),
        ]

    def test_bottom(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test BOTTOM draws the left side down to the curve start."""
        segs = [QuadraticSegment(Point(0, 80), Point(100, 95), Point(200, 80))]
        outline = assemble(segs, EdgePlacement.BOTTOM, size, fitter)

        assert outline.commands[3].kind is CommandKind.QUAD_TO
        assert _lines(outline) == [
            (0.0, 0.0),
            (0.0, 80.0),
            (200.0, 100.0),
            (200.0, 0.0),
            (0.0, 0.0),
        ]

    def test_right(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test RIGHT draws along the bottom to the curve start."""
        segs = [QuadraticSegment(Point(180, 100), Point(190, 50), Point(180, 0))]
        outline = assemble(segs, EdgePlacement.RIGHT, size, fitter)

        assert outline.commands[4].kind is CommandKind.QUAD_TO
        assert _lines(outline) == [
            (0.0, 0.0),
            (0.0, 100.0),
            (180.0, 100.0),
            (200.0, 0.0),
            (0.0, 0.0),
        ]

    def test_top(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test TOP draws three sides and then the curve."""
        segs = [QuadraticSegment(Point(200, 20), Point(100, 5), Point(0, 20))]
        outline = assemble(segs, EdgePlacement.TOP, size, fitter)

        assert outline.commands[5].kind is CommandKind.QUAD_TO
        assert _lines(outline) == [
            (0.0, 0.0),
            (0.0, 100.0),
            (200.0, 100.0),
            (200.0, 20.0),
            (0.0, 0.0),
        ]

    def test_top_end_to_end(self, fitter: QuadraticFitter) -> None:
        """Test the full command list for a single TOP segment."""
        segs = [QuadraticSegment(Point(0, 30), Point(50, 10), Point(100, 30), 0.5)]
        outline = assemble(segs, EdgePlacement.TOP, Size(100, 100), fitter)

        assert outline.commands == (
            PathCommand.move_to(0.0, 0.0),
            PathCommand.line_to(0.0, 0.0),
            PathCommand.line_to(0.0, 100.0),
            PathCommand.line_to(100.0, 100.0),
            PathCommand.line_to(100.0, 30.0),
            PathCommand.quad_to(Point(50.0, -10.0), Point(100, 30)),
            PathCommand.line_to(0.0, 0.0),
            PathCommand.close(),
        )
        assert outline.to_svg_path() == (
            "M0 0 L0 0 L0 100 L100 100 L100 30 Q50 -10 100 30 L0 0 Z"
        )

    def test_placement_as_string(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test plain string placements are accepted."""
        segs = [QuadraticSegment(Point(200, 20), Point(100, 5), Point(0, 20))]
        by_enum = assemble(segs, EdgePlacement.TOP, size, fitter)
        by_str = assemble(segs, "top", size, fitter)  # type: ignore[arg-type]
        assert by_enum == by_str

    def test_unknown_placement_rejected(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test invalid placement values raise ValueError."""
        segs = [QuadraticSegment(Point(0, 0), Point(1, 1), Point(2, 0))]
        with pytest.raises(ValueError, match="not a valid EdgePlacement"):
            assemble(segs, "middle", size, fitter)  # type: ignore[arg-type]

    def test_every_placement_has_its_own_traversal(
        self, size: Size, fitter: QuadraticFitter
    ) -> None:
        """Test each placement, TOP included, produces a distinct closed outline."""
        segs = [QuadraticSegment(Point(10, 20), Point(50, 40), Point(90, 20))]
        outlines = {p: assemble(segs, p, size, fitter) for p in EdgePlacement}
        assert len({o.to_svg_path() for o in outlines.values()}) == len(EdgePlacement)
        assert all(o.is_closed for o in outlines.values())
        assert _lines(outlines[EdgePlacement.TOP])[:3] == [
            (0.0, 0.0),
            (0.0, 100.0),
            (200.0, 100.0),
        ]

    def test_empty_segments_rejected(self, size: Size, fitter: QuadraticFitter) -> None:
        """Test assembling nothing is a contract violation."""
        with pytest.raises(ValueError, match="without segments"):
            assemble([], EdgePlacement.LEFT, size, fitter)


class TestLeadInClamping:
    """Tests for clamping the straight lead-in to the rectangle."""

    @pytest.fixture
    def size(self) -> Size:
        return Size(200.0, 100.0)

    def _quad(self, x: float, y: float) -> list[QuadraticSegment]:
        return [QuadraticSegment(Point(x, y), Point(50, 50), Point(100, 100))]

    def test_left_negative_x_clamped_to_zero(self, size: Size) -> None:
        """Test a first anchor left of the rectangle starts the curve at x=0."""
        outline = assemble(self._quad(-30, 0), EdgePlacement.LEFT, size, QuadraticFitter())
        lines = _lines(outline)
        assert lines[0] == (0.0, 0.0)
        assert lines[-1] == (0.0, 0.0)

    def test_bottom_y_beyond_height_clamped(self, size: Size) -> None:
        """Test a first anchor below the rectangle is clamped to the height."""
        outline = assemble(self._quad(0, 150), EdgePlacement.BOTTOM, size, QuadraticFitter())
        assert _lines(outline)[1] == (0.0, 100.0)

    def test_right_x_beyond_width_clamped(self, size: Size) -> None:
        """Test a first anchor right of the rectangle is clamped to the width."""
        outline = assemble(self._quad(260, 100), EdgePlacement.RIGHT, size, QuadraticFitter())
        assert _lines(outline)[2] == (200.0, 100.0)

    def test_top_negative_y_clamped_to_zero(self, size: Size) -> None:
        """Test a first anchor above the rectangle is clamped to y=0."""
        outline = assemble(self._quad(200, -5), EdgePlacement.TOP, size, QuadraticFitter())
        assert _lines(outline)[3] == (200.0, 0.0)

    def test_in_range_values_untouched(self, size: Size) -> None:
        """Test anchors inside the rectangle are used as-is."""
        outline = assemble(self._quad(0, 42.5), EdgePlacement.BOTTOM, size, QuadraticFitter())
        assert _lines(outline)[1] == (0.0, 42.5)

    def test_only_first_segment_is_read(self, size: Size) -> None:
        """Test later segment starts do not affect the lead-in."""
        segs = [
            QuadraticSegment(Point(10, 0), Point(5, 25), Point(10, 50)),
            QuadraticSegment(Point(-99, 50), Point(15, 75), Point(10, 100)),
        ]
        outline = assemble(segs, EdgePlacement.LEFT, size, QuadraticFitter())
        assert _lines(outline)[0] == (10.0, 0.0)


class TestCubicAssembly:
    """Tests for assembling cubic outlines with the same traversal."""

    def test_cubic_bottom(self) -> None:
        """Test cubic segments use CUBIC_TO and p1 for clamping."""
        segs = [
            CubicSegment(Point(0, 80), Point(50, 100), Point(100, 60), Point(150, 80)),
            CubicSegment(Point(150, 80), Point(170, 90), Point(190, 70), Point(200, 80)),
        ]
        outline = assemble(segs, EdgePlacement.BOTTOM, Size(200, 100), CubicFitter())

        curves = outline.curves
        assert [c.kind for c in curves] == [CommandKind.CUBIC_TO, CommandKind.CUBIC_TO]
        assert [c.end for c in curves] == [Point(150, 80), Point(200, 80)]
        assert _lines(outline)[1] == (0.0, 80.0)
        assert outline.is_closed
