"""Geometric operations for contour building and classification.

This module provides the scalar vector math used by every render stage:
- Distance, linear interpolation and 2D cross product
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (crossing number)

All functions are pure and stateless.
"""

import math

from glyphbold.domain import Point

# Vertical nudge applied to the test point so that rays never pass exactly
# through a vertex. Glyph coordinates have finite resolution, so a tiny value
# suffices.
INSIDE_EPSILON = 1e-6


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def lerp(a: Point, b: Point, t: float) -> Point:
    """Linearly interpolate from a to b.

    ``t`` is not clamped, so values outside [0, 1] extrapolate.
    """
    return Point((1 - t) * a.x + t * b.x, (1 - t) * a.y + t * b.y)


def cross(a: Point, b: Point) -> float:
    """2D cross product (z component of a x b)."""
    return a.x * b.y - a.y * b.x


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a closed polygon using the shoelace formula.

    The polygon is treated as cyclic: the last point connects back to the
    first. The sign encodes the winding direction.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area. Returns 0.0 for fewer than 2 points.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(list(reversed(square)))
        -1.0
    """
    if len(points) < 2:
        return 0.0

    area = 0.0
    current = points[-1]
    for nxt in points:
        area += 0.5 * cross(current, nxt)
        current = nxt
    return area


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """Determine if a point is inside a polygon by counting crossings.

    For every edge of the cyclic polyline the endpoints are ordered by y. An
    edge counts when the (slightly raised) test height falls strictly between
    its endpoints and the point lies to the left of the upward edge. Odd
    count means inside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> point_in_polygon(Point(1, 1), square)
        True
        >>> point_in_polygon(Point(3, 3), square)
        False
    """
    if not polygon:
        return False

    count = 0
    test_y = point.y + INSIDE_EPSILON
    current = polygon[-1]

    for nxt in polygon:
        if current.y < nxt.y:
            p0, p1 = current, nxt
        else:
            p0, p1 = nxt, current

        if p0.y < test_y < p1.y:
            if (p1.x - p0.x) * (point.y - p0.y) > (point.x - p0.x) * (p1.y - p0.y):
                count += 1

        current = nxt

    return count % 2 == 1
