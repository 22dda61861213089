"""Path commands produced by a font path provider.

A glyph outline arrives as an ordered stream of commands: move, line,
quadratic curve, cubic curve and close. Coordinates are already scaled and
placed by the provider.
"""

from dataclasses import dataclass
from enum import Enum

from glyphbold.domain.contour import Point


class CommandType(str, Enum):
    """Kind of path command."""

    MOVE = "M"
    LINE = "L"
    QUADRATIC = "Q"
    CUBIC = "C"
    CLOSE = "Z"


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single outline drawing command.

    Attributes:
        type: Command kind
        x: Target X coordinate (unused for CLOSE)
        y: Target Y coordinate (unused for CLOSE)
        control1: Quadratic control point, or first cubic control point
        control2: Second cubic control point
    """

    type: CommandType
    x: float = 0.0
    y: float = 0.0
    control1: Point | None = None
    control2: Point | None = None

    @property
    def target(self) -> Point:
        """Target point of the command."""
        return Point(self.x, self.y)

    @classmethod
    def move(cls, x: float, y: float) -> "PathCommand":
        return cls(CommandType.MOVE, x, y)

    @classmethod
    def line(cls, x: float, y: float) -> "PathCommand":
        return cls(CommandType.LINE, x, y)

    @classmethod
    def quadratic(cls, x: float, y: float, cx: float, cy: float) -> "PathCommand":
        return cls(CommandType.QUADRATIC, x, y, control1=Point(cx, cy))

    @classmethod
    def cubic(
        cls,
        x: float,
        y: float,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
    ) -> "PathCommand":
        return cls(
            CommandType.CUBIC,
            x,
            y,
            control1=Point(c1x, c1y),
            control2=Point(c2x, c2y),
        )

    @classmethod
    def close(cls) -> "PathCommand":
        return cls(CommandType.CLOSE)
