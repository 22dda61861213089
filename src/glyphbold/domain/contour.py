"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout glyphbold:
- Point: An immutable 2D point
- Polygon: A closed, flattened contour with its signed area and holes
- ContourForest: The classified roots of one render request
- WindingDirection: Enum for contour winding direction
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto


class WindingDirection(Enum):
    """Contour winding direction derived from the sign of the signed area.

    Only the relative sign matters for classification: a hole is a contour
    whose winding differs from its parent's, whichever convention the font
    uses. DEGENERATE marks zero-area contours.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()
    DEGENERATE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(eq=False)
class Polygon:
    """A closed, flattened contour.

    Points are kept in insertion order, which is the winding order. The
    signed area is computed once by the contour builder when the contour is
    closed; its sign is only ever compared against other contours.

    Polygons compare by identity, since two contours may share coordinates
    and still be different subpaths of a glyph.

    Attributes:
        points: Flattened points forming the contour
        area: Signed area (shoelace formula)
        children: Holes directly contained by this contour
        closed: True once the builder has closed the contour
    """

    points: list[Point] = field(default_factory=list)
    area: float = 0.0
    children: list["Polygon"] = field(default_factory=list, repr=False)
    closed: bool = False

    @property
    def winding(self) -> WindingDirection:
        """Winding direction implied by the area sign."""
        if self.area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if self.area < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.DEGENERATE

    def is_degenerate(self) -> bool:
        """Check if the contour cannot enclose anything.

        Returns:
            True for contours with fewer than 3 points or zero area
        """
        return len(self.points) < 3 or self.area == 0.0

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))


@dataclass
class ContourForest:
    """Classified contours of one render request.

    Each root is a contour with no enclosing contour of opposite winding.
    Holes hang off their parent's ``children`` list.

    Attributes:
        roots: Top-level contours, largest area first
    """

    roots: list[Polygon] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.roots)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.roots)

    def all_contours(self) -> Iterator[Polygon]:
        """Iterate over every contour in the forest, depth first."""
        stack = list(reversed(self.roots))
        while stack:
            polygon = stack.pop()
            yield polygon
            stack.extend(reversed(polygon.children))

    @property
    def hole_count(self) -> int:
        """Number of non-root contours in the forest."""
        return sum(1 for _ in self.all_contours()) - len(self.roots)
