"""Domain models for glyphbold.

This module contains the data passed between the render stages. Value types
are frozen dataclasses; contours are mutable only while they are being built
and classified.

Key classes:
- Point: An immutable 2D point
- Polygon: A closed, flattened contour
- ContourForest: Classified root contours with their holes
- PathCommand: One outline command from a path provider
- PaintCommand: One polygon fill for a painter
- RenderResult: Output of a render pass
"""

from glyphbold.domain.commands import CommandType, PathCommand
from glyphbold.domain.contour import ContourForest, Point, Polygon, WindingDirection
from glyphbold.domain.paint import CompositeMode, PaintCommand, RenderResult

__all__: list[str] = [
    # Enums
    "CommandType",
    "CompositeMode",
    "WindingDirection",
    # Core types
    "ContourForest",
    "PaintCommand",
    "PathCommand",
    "Point",
    "Polygon",
    "RenderResult",
]
