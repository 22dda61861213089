"""Outline offsetting for artificial emboldening.

Each contour is thinned out on a sampling grid, given a normal at every
vertex, and every vertex is pushed along that normal by the boldness
magnitude. Solids grow; holes are painted subtractively with the same
displacement convention, so they shrink.

Key functions:
- deduplicate: Keep one vertex per sampling grid cell
- polyline_normals: Per-vertex miter normals of a polyline
- offset_outline: Displaced, closed outline ready for filling
"""

import math

from glyphbold.config import OffsetConfig
from glyphbold.domain import Point
from glyphbold.exceptions import DegenerateContourError, InvalidParameterError

Vector = tuple[float, float]


def deduplicate(points: list[Point], resolution: float) -> list[Point]:
    """Drop vertices that share a sampling grid cell with an earlier vertex.

    Each point maps to the cell ``(floor(x / resolution), floor(y /
    resolution))``; only the first point seen per cell is kept and order is
    preserved. Running it twice with the same resolution changes nothing.

    Args:
        points: Contour points in winding order
        resolution: Grid cell size, must be positive

    Returns:
        Deduplicated points

    Raises:
        InvalidParameterError: If resolution is not a positive finite number, or so
            small that a cell index overflows
    """
    if not resolution > 0 or math.isinf(resolution):
        raise InvalidParameterError("sampling_resolution", resolution, "must be a positive number")

    seen: set[tuple[int, int]] = set()
    result: list[Point] = []
    for point in points:
        try:
            key = (math.floor(point.x / resolution), math.floor(point.y / resolution))
        except OverflowError as e:
            raise InvalidParameterError(
                "sampling_resolution", resolution, "is too small for the outline coordinates"
            ) from e
        if key not in seen:
            seen.add(key)
            result.append(point)
    return result


def _direction(to: Point, frm: Point) -> Vector:
    dx = to.x - frm.x
    dy = to.y - frm.y
    length = math.hypot(dx, dy)
    if length == 0:
        return (0.0, 0.0)
    return (dx / length, dy / length)


def _normal(direction: Vector) -> Vector:
    return (-direction[1], direction[0])


def _miter(line_a: Vector, line_b: Vector) -> tuple[Vector, float]:
    """Miter direction and length at the joint of two unit directions.

    A full reversal has no tangent; the incoming normal is used instead with
    a unit length.
    """
    tx = line_a[0] + line_b[0]
    ty = line_a[1] + line_b[1]
    length = math.hypot(tx, ty)
    normal_a = _normal(line_a)
    if length < 1e-12:
        return normal_a, 1.0

    miter = (-ty / length, tx / length)
    dot = miter[0] * normal_a[0] + miter[1] * normal_a[1]
    if abs(dot) < 1e-12:
        return normal_a, 1.0
    return miter, 1.0 / dot


def polyline_normals(points: list[Point], closed: bool = True) -> list[tuple[Vector, float]]:
    """Compute a unit normal and a miter length for every vertex.

    Interior vertices get the miter between their incoming and outgoing
    segments. For an open polyline the end vertices get their segment's
    normal. For a closed polyline the seam vertex (index 0) gets the miter
    between the wrap edge and the first edge.

    Args:
        points: Polyline vertices, without a repeated closing point
        closed: Treat the last vertex as connected to the first

    Returns:
        One ``((nx, ny), miter_length)`` pair per input vertex
    """
    if len(points) < 2:
        return []

    path = list(points)
    if closed:
        path.append(points[0])

    out: list[tuple[Vector, float]] = []
    total = len(path)

    for i in range(1, total):
        last = path[i - 1]
        cur = path[i]
        line_a = _direction(cur, last)

        if i == 1:
            out.append((_normal(line_a), 1.0))

        if i == total - 1:
            out.append((_normal(line_a), 1.0))
        else:
            line_b = _direction(path[i + 1], cur)
            out.append(_miter(line_a, line_b))

    if closed:
        line_a = _direction(path[0], path[total - 2])
        line_b = _direction(path[1], path[0])
        seam = _miter(line_a, line_b)
        out[0] = seam
        out.pop()

    return out


def _first_edge_normal(points: list[Point]) -> Vector:
    return _normal(_direction(points[1], points[0]))


def offset_outline(
    points: list[Point],
    magnitude: float,
    resolution: float,
    baseline: float = 0.0,
    config: OffsetConfig | None = None,
) -> list[Point]:
    """Build the displaced outline of one contour.

    Vertices are deduplicated on the sampling grid, then each moves opposite
    its normal by ``magnitude``. The first vertex uses the first edge's normal
    unless ``config.seam_miter`` is set. The outline is closed by repeating
    the first displaced vertex and shifted down by ``baseline``.

    Args:
        points: Contour points in winding order
        magnitude: Boldness; negative values thin the glyph
        resolution: Sampling grid cell size
        baseline: Vertical translation applied to every output point
        config: Seam and miter options; defaults reproduce the plain behaviour

    Returns:
        Closed list of displaced points

    Raises:
        InvalidParameterError: If resolution is not positive
        DegenerateContourError: If fewer than 2 points survive deduplication
    """
    config = config or OffsetConfig()
    unique = deduplicate(points, resolution)
    if len(unique) < 2:
        raise DegenerateContourError(len(unique))

    normals = polyline_normals(unique, closed=True)
    outline: list[Point] = []

    for i, point in enumerate(unique):
        normal, miter_length = normals[i]
        if i == 0 and not config.seam_miter:
            normal, miter_length = _first_edge_normal(unique), 1.0

        scale = magnitude
        if config.scale_by_miter:
            scale *= max(-config.miter_limit, min(config.miter_limit, miter_length))

        outline.append(Point(point.x - normal[0] * scale, point.y + baseline - normal[1] * scale))

    outline.append(outline[0])
    return outline
