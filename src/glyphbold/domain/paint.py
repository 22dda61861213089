"""Paint commands handed to a filled-polygon painter."""

from dataclasses import dataclass, field
from enum import Enum

from glyphbold.domain.contour import Point


class CompositeMode(str, Enum):
    """How a filled polygon is combined with the surface.

    NORMAL paints the polygon over the surface. SUBTRACTIVE erases the
    polygon's area from whatever has been painted so far.
    """

    NORMAL = "normal"
    SUBTRACTIVE = "subtractive"


@dataclass(frozen=True)
class PaintCommand:
    """One filled polygon to paint.

    Attributes:
        points: Closed point sequence (first point repeated at the end)
        mode: Compositing mode
    """

    points: tuple[Point, ...]
    mode: CompositeMode


@dataclass
class RenderResult:
    """Output of one render pass.

    Attributes:
        commands: Paint commands in paint order
        contour_count: Contours built from the path
        root_count: Contours classified as roots
        skipped: Contours dropped as degenerate
    """

    commands: list[PaintCommand] = field(default_factory=list)
    contour_count: int = 0
    root_count: int = 0
    skipped: int = 0

    def is_empty(self) -> bool:
        """Check if the pass produced nothing to paint."""
        return len(self.commands) == 0
