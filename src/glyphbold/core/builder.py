"""Contour building from path commands.

The ContourBuilder accumulates flattened points for one subpath and closes
it into a Polygon. build_contours walks a provider's command stream and
starts a new builder for every subpath.
"""

from collections.abc import Iterable

import structlog

from glyphbold.config import TessellationConfig
from glyphbold.core._bezier import flatten_cubic, flatten_quadratic
from glyphbold.core.geometry import signed_area
from glyphbold.domain import CommandType, PathCommand, Point, Polygon
from glyphbold.exceptions import ContourError

logger = structlog.get_logger(__name__)


class ContourBuilder:
    """Accumulates points for a single contour.

    Straight segments and subpath starts both reduce to appending a raw
    point; deciding where a subpath starts is the caller's job.

    Example:
        builder = ContourBuilder()
        builder.append(Point(0, 0))
        builder.quadratic_to(Point(10, 0), Point(5, 5))
        polygon = builder.close()
    """

    def __init__(self, config: TessellationConfig | None = None) -> None:
        self._config = config or TessellationConfig()
        self._points: list[Point] = []
        self._closed = False

    @property
    def points(self) -> list[Point]:
        """Points accumulated so far."""
        return self._points

    def append(self, point: Point) -> None:
        """Append a raw point to the contour."""
        self._check_open()
        self._points.append(point)

    def quadratic_to(self, target: Point, control: Point) -> None:
        """Append a flattened quadratic segment ending at target."""
        p0 = self._current_point()
        self._points.extend(
            flatten_quadratic(
                p0,
                control,
                target,
                step_size=self._config.step_size,
                max_steps=self._config.max_steps,
            )
        )

    def cubic_to(self, target: Point, control1: Point, control2: Point) -> None:
        """Append a flattened cubic segment ending at target."""
        p0 = self._current_point()
        self._points.extend(
            flatten_cubic(
                p0,
                control1,
                control2,
                target,
                step_size=self._config.step_size,
                max_steps=self._config.max_steps,
            )
        )

    def close(self) -> Polygon:
        """Close the contour and compute its signed area.

        Walks the points as a cyclic polyline, accumulating half the cross
        product of every consecutive pair including the wrap edge.

        Returns:
            The closed Polygon

        Raises:
            ContourError: If the contour was already closed
        """
        self._check_open()
        self._closed = True

        return Polygon(points=self._points, area=signed_area(self._points), closed=True)

    def _current_point(self) -> Point:
        self._check_open()
        if not self._points:
            raise ContourError("Curve segment has no start point")
        return self._points[-1]

    def _check_open(self) -> None:
        if self._closed:
            raise ContourError("Contour is already closed")


def build_contours(
    commands: Iterable[PathCommand],
    config: TessellationConfig | None = None,
) -> list[Polygon]:
    """Convert a path command stream into closed polygons.

    Every MOVE starts a new contour. A contour that is still open when the
    next MOVE arrives, or when the stream ends, is closed implicitly.

    Args:
        commands: Path commands in drawing order
        config: Curve flattening settings

    Returns:
        One closed Polygon per subpath, in stream order

    Raises:
        ContourError: If a drawing command appears before any MOVE
    """
    polygons: list[Polygon] = []
    builder: ContourBuilder | None = None

    for command in commands:
        if command.type == CommandType.MOVE:
            if builder is not None:
                polygons.append(builder.close())
            builder = ContourBuilder(config)
            builder.append(command.target)
            continue

        if command.type == CommandType.CLOSE:
            if builder is not None:
                polygons.append(builder.close())
                builder = None
            continue

        if builder is None:
            raise ContourError(f"Path command {command.type.name} before any move")

        if command.type == CommandType.LINE:
            builder.append(command.target)
        elif command.type == CommandType.QUADRATIC:
            if command.control1 is None:
                raise ContourError("Quadratic command without a control point")
            builder.quadratic_to(command.target, command.control1)
        elif command.type == CommandType.CUBIC:
            if command.control1 is None or command.control2 is None:
                raise ContourError("Cubic command without both control points")
            builder.cubic_to(command.target, command.control1, command.control2)

    if builder is not None:
        polygons.append(builder.close())

    logger.debug("Contours built", count=len(polygons))
    return polygons
