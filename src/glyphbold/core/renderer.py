"""Render pass orchestration.

A render pass turns text into paint commands:

    path commands -> contours -> contour forest -> offset outlines

Key components:
- PathProvider / Painter: protocols for the font and the drawing surface
- Renderer: runs passes one at a time against a shared path provider
- paint: replays a RenderResult on a Painter
"""

import math
import threading
import time
from typing import Protocol

import structlog

from glyphbold.config import GlyphboldSettings
from glyphbold.core.builder import build_contours
from glyphbold.core.classifier import ContourClassifier
from glyphbold.core.offset import offset_outline
from glyphbold.domain import CompositeMode, PaintCommand, PathCommand, Point, Polygon, RenderResult
from glyphbold.exceptions import DegenerateContourError, GeometryError, InvalidParameterError
from glyphbold.utils import RenderLogger, RenderStats


class PathProvider(Protocol):
    """Source of outline commands for a run of text."""

    def get_path(self, text: str, x: float, y: float, font_size: float) -> list[PathCommand]:
        ...


class Painter(Protocol):
    """Surface that fills closed polygons."""

    def fill(self, points: list[Point], mode: CompositeMode) -> None:
        ...


def validate_parameters(boldness: float, sampling_resolution: float) -> None:
    """Reject tunables that cannot produce a render.

    Raises:
        InvalidParameterError: If boldness is not finite or the sampling
            resolution is not a positive finite number
    """
    if not math.isfinite(boldness):
        raise InvalidParameterError("boldness", boldness, "must be a finite number")
    if not math.isfinite(sampling_resolution) or sampling_resolution <= 0:
        raise InvalidParameterError(
            "sampling_resolution", sampling_resolution, "must be a positive number"
        )


class Renderer:
    """Runs render passes against a shared, read-only path provider.

    Passes never interleave: each one holds a lock from path extraction to
    the last paint command. The renderer also remembers the last successful
    result so an event-driven shell can fall back to it when a parameter
    change is rejected.

    Example:
        renderer = Renderer(FontReader(Path("font.ttf")).load())
        result = renderer.render("Hello", boldness=2.0, sampling_resolution=1.0)
        paint(result, RasterPainter(800, 200))
    """

    def __init__(
        self,
        provider: PathProvider,
        settings: GlyphboldSettings | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        self._provider = provider
        self._settings = settings or GlyphboldSettings()
        self._classifier = ContourClassifier()
        self._logger = render_logger or RenderLogger(structlog.get_logger(__name__))
        self._lock = threading.Lock()
        self._last_result: RenderResult | None = None

    @property
    def last_result(self) -> RenderResult | None:
        """Result of the most recent successful pass."""
        return self._last_result

    @property
    def stats(self) -> RenderStats:
        """Accumulated statistics from the render logger."""
        return self._logger.stats

    def render(self, text: str, boldness: float, sampling_resolution: float) -> RenderResult:
        """Run one render pass.

        Degenerate contours are skipped and counted; the rest of the text
        still renders.

        Args:
            text: Text to render; empty text yields an empty result
            boldness: Offset magnitude, negative to thin
            sampling_resolution: Vertex deduplication grid size

        Returns:
            RenderResult with paint commands in paint order

        Raises:
            InvalidParameterError: If a parameter is out of range
        """
        validate_parameters(boldness, sampling_resolution)

        with self._lock:
            start = time.perf_counter()
            self._logger.log_pass_start(text, boldness, sampling_resolution)

            layout = self._settings.layout
            commands = self._provider.get_path(text, layout.origin_x, 0.0, layout.font_size)
            polygons = build_contours(commands, self._settings.tessellation)
            forest = self._classifier.classify(polygons)

            result = RenderResult(contour_count=len(polygons), root_count=len(forest.roots))
            for root in forest:
                self._emit(root, CompositeMode.NORMAL, boldness, sampling_resolution, result)

            self._logger.log_pass_complete(result, (time.perf_counter() - start) * 1000)
            self._last_result = result
            return result

    def update(self, text: str, boldness: float, sampling_resolution: float) -> RenderResult:
        """Render for an interactive shell.

        Same as render, but a rejected parameter or a malformed outline
        returns the previous valid result (or an empty one) instead of raising.
        """
        try:
            return self.render(text, boldness, sampling_resolution)
        except InvalidParameterError as e:
            self._logger.log_rejected_parameter(e)
        except GeometryError as e:
            self._logger.log_pass_failed(text, e)
        return self._last_result or RenderResult()

    def _emit(
        self,
        polygon: Polygon,
        mode: CompositeMode,
        boldness: float,
        sampling_resolution: float,
        result: RenderResult,
    ) -> None:
        """Append paint commands for a contour and everything nested in it.

        A contour's holes follow it with the opposite mode; contours nested
        inside a hole follow that hole, alternating again.
        """
        try:
            outline = offset_outline(
                polygon.points,
                boldness,
                sampling_resolution,
                baseline=self._settings.layout.baseline_y,
                config=self._settings.offset,
            )
        except DegenerateContourError as e:
            self._logger.log_contour_skipped(len(polygon.points), e)
            result.skipped += 1
        else:
            result.commands.append(PaintCommand(points=tuple(outline), mode=mode))

        child_mode = (
            CompositeMode.SUBTRACTIVE if mode == CompositeMode.NORMAL else CompositeMode.NORMAL
        )
        for child in polygon.children:
            self._emit(child, child_mode, boldness, sampling_resolution, result)


def paint(result: RenderResult, painter: Painter) -> int:
    """Replay a render result on a painter.

    Args:
        result: Output of a render pass
        painter: Target surface

    Returns:
        Number of fill calls issued
    """
    for command in result.commands:
        painter.fill(list(command.points), command.mode)
    return len(result.commands)
