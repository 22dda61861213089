"""Core rendering algorithms for glyphbold.

This module contains the core algorithms for:

- Geometry operations (distance, interpolation, signed area, containment)
- Contour building (Bezier flattening, contour closure)
- Contour classification (solids vs holes)
- Outline offsetting (deduplication, miter normals, displacement)
- Render pass orchestration

All algorithms except the Renderer are stateless.

Key functions:
- signed_area: Calculate polygon area using shoelace formula
- point_in_polygon: Test if point is inside polygon
- build_contours: Convert path commands into closed polygons
- deduplicate: Merge near-coincident vertices on a grid
- polyline_normals: Per-vertex miter normals
- offset_outline: Displace a contour along its normals
- paint: Replay a render result on a painter

Key classes:
- ContourBuilder: Accumulates points for one contour
- ContourClassifier: Builds the contour forest
- Renderer: Runs render passes
"""

from glyphbold.core.builder import ContourBuilder, build_contours
from glyphbold.core.classifier import ContourClassifier, classify_contours
from glyphbold.core.geometry import (
    cross,
    distance,
    lerp,
    point_in_polygon,
    signed_area,
)
from glyphbold.core.offset import deduplicate, offset_outline, polyline_normals
from glyphbold.core.renderer import (
    Painter,
    PathProvider,
    Renderer,
    paint,
    validate_parameters,
)

__all__ = [
    # Builder
    "ContourBuilder",
    # Classifier
    "ContourClassifier",
    # Renderer
    "Painter",
    "PathProvider",
    "Renderer",
    "build_contours",
    "classify_contours",
    # Geometry functions
    "cross",
    "deduplicate",
    "distance",
    "lerp",
    "offset_outline",
    "paint",
    "point_in_polygon",
    "polyline_normals",
    "signed_area",
    "validate_parameters",
]
