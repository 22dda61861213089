"""Font and surface I/O for glyphbold.

This module handles reading fonts with fonttools and painting results with
Pillow, keeping both libraries out of the core algorithms.

Key classes:
- FontReader: Load fonts and lay out text as path commands
- PathCommandPen: fontTools pen producing PathCommand objects
- RasterPainter: Pillow-backed filled-polygon painter
- RecordingPainter: In-memory painter
"""

from glyphbold.io.painter import RasterPainter, RecordingPainter
from glyphbold.io.pen import PathCommandPen
from glyphbold.io.reader import FontReader

__all__ = [
    "FontReader",
    "PathCommandPen",
    "RasterPainter",
    "RecordingPainter",
]
