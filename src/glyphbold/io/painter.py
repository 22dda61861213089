"""Filled-polygon painters.

A painter receives closed point sequences together with a compositing mode.
RasterPainter draws them into a Pillow mask image; RecordingPainter keeps
them in memory.
"""

from pathlib import Path

from PIL import Image, ImageDraw

from glyphbold.domain import CompositeMode, Point

INK = 255
PAPER = 0


class RasterPainter:
    """Paints polygons into a single-channel coverage mask.

    NORMAL fills with ink; SUBTRACTIVE clears back to paper, erasing what
    earlier fills left under the polygon.
    """

    def __init__(self, width: int, height: int) -> None:
        self._image = Image.new("L", (width, height), PAPER)
        self._draw = ImageDraw.Draw(self._image)

    @property
    def image(self) -> Image.Image:
        return self._image

    def fill(self, points: list[Point], mode: CompositeMode) -> None:
        """Fill a closed polygon."""
        if len(points) < 2:
            return
        value = PAPER if mode == CompositeMode.SUBTRACTIVE else INK
        self._draw.polygon([p.to_tuple() for p in points], fill=value)

    def ink_count(self) -> int:
        """Number of inked pixels."""
        return self._image.histogram()[INK]

    def save(self, path: Path) -> None:
        """Write the mask as black text on white."""
        inverted = self._image.point(lambda v: 255 - v)
        inverted.save(path)


class RecordingPainter:
    """Keeps every fill call for later inspection."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[Point], CompositeMode]] = []

    def fill(self, points: list[Point], mode: CompositeMode) -> None:
        self.calls.append((list(points), mode))

    @property
    def modes(self) -> list[CompositeMode]:
        return [mode for _, mode in self.calls]
