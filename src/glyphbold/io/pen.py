"""fontTools pen that records an outline as PathCommand objects.

BasePen already splits multi-point quadratic runs (TrueType's implied
on-curve points) and poly-cubic runs into single segments, so every recorded
curve command has exactly one or two control points.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from glyphbold.domain import PathCommand


class PathCommandPen(BasePen):
    """Collects drawing calls as a flat list of PathCommand.

    Example:
        pen = PathCommandPen(glyph_set)
        glyph_set["O"].draw(pen)
        commands = pen.commands
    """

    def __init__(self, glyphSet: Any = None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self.commands: list[PathCommand] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(PathCommand.move(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(PathCommand.line(*pt))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.commands.append(PathCommand.quadratic(pt2[0], pt2[1], pt1[0], pt1[1]))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.commands.append(PathCommand.cubic(pt3[0], pt3[1], pt1[0], pt1[1], pt2[0], pt2[1]))

    def _closePath(self) -> None:
        self.commands.append(PathCommand.close())

    def _endPath(self) -> None:
        # Open subpaths are filled as if closed.
        self.commands.append(PathCommand.close())
