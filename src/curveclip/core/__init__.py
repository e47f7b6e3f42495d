"""Core algorithms for curveclip.

This module contains:

- Control point fitting (quadratic hint solving, cubic chord blending)
- Outline assembly (three straight sides plus one curved side)
- Host-facing builders with a redraw flag
- Polygon utilities (flattening, signed area, bounds)

All services are:
- Stateless (safe to call from several threads)
- Pure (no side effects besides debug logging)

Key functions:
- fit_quadratic: Solve for the quadratic control point through a hint
- fit_cubic: Blend anchors into cubic control points
- assemble: Build an outline for one edge placement with a given fitter
- build_outline: Pick a builder by segment type and build
- flatten_outline: Convert an outline to a polygon

Key classes:
- QuadraticFitter, CubicFitter: Fitter strategies for the assembler
- QuadraticOutlineBuilder, CubicOutlineBuilder: Host-facing builders
"""

from curveclip.core.assembler import assemble
from curveclip.core.builder import (
    CubicOutlineBuilder,
    QuadraticOutlineBuilder,
    build_outline,
    create_builder,
)
from curveclip.core.fitting import (
    CubicFitter,
    QuadraticFitter,
    SegmentFitter,
    fit_cubic,
    fit_quadratic,
)
from curveclip.core.geometry import bounding_box, flatten_outline, signed_area

__all__ = [
    # Builders
    "CubicOutlineBuilder",
    "QuadraticOutlineBuilder",
    # Fitters
    "CubicFitter",
    "QuadraticFitter",
    "SegmentFitter",
    # Functions
    "assemble",
    "bounding_box",
    "build_outline",
    "create_builder",
    "fit_cubic",
    "fit_quadratic",
    "flatten_outline",
    "signed_area",
]
