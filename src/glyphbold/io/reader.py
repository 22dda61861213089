"""Font reader and path provider.

This module provides the FontReader class for loading TTF/OTF fonts and
laying out a run of text as scaled outline commands.
"""

from pathlib import Path

import structlog
from fontTools.pens.reverseContourPen import ReverseContourPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from glyphbold.domain import PathCommand
from glyphbold.exceptions import FontLoadError, GlyphNotFoundError
from glyphbold.io.pen import PathCommandPen

logger = structlog.get_logger(__name__)

NOTDEF = ".notdef"


class FontReader:
    """Loads a TTF/OTF font and turns text into path commands.

    Glyphs are placed left to right by advance width, scaled from font units
    to ``font_size`` pixels per em, with the y axis flipped so that y grows
    downwards like a canvas. CFF outlines are reversed on the way out so both
    flavours reach the classifier with TrueType winding.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            commands = reader.get_path("Hello", 0, 0, 72)
    """

    def __init__(self, font_path: Path, strict: bool = False) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            strict: Raise GlyphNotFoundError for unmapped characters instead
                of drawing .notdef
        """
        self._font_path = font_path
        self._strict = strict
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file is missing or is not a readable font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
            self._font.getGlyphSet()
        except Exception as e:
            self._font = None
            raise FontLoadError(str(self._font_path), str(e)) from e

        logger.debug(
            "Font loaded",
            path=str(self._font_path),
            format=self.format,
            upm=self.units_per_em,
        )

    @property
    def font(self) -> TTFont:
        """The loaded fontTools font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-flavoured fonts, 'TrueType' otherwise."""
        if self._is_cff():
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self.font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self.font["maxp"].numGlyphs

    def glyph_name(self, char: str) -> str:
        """Map a character to a glyph name.

        Args:
            char: A single character

        Returns:
            Glyph name, or .notdef when the font has no glyph for it

        Raises:
            GlyphNotFoundError: In strict mode, for unmapped characters
        """
        cmap = self.font.getBestCmap() or {}
        name = cmap.get(ord(char))
        if name is None:
            if self._strict:
                raise GlyphNotFoundError(char)
            return NOTDEF
        return name

    def get_path(self, text: str, x: float, y: float, font_size: float) -> list[PathCommand]:
        """Lay out text and return its outline commands.

        Args:
            text: Text to lay out
            x: X position of the first glyph origin
            y: Baseline Y position
            font_size: Size in pixels per em

        Returns:
            Path commands for every glyph, in drawing order
        """
        glyph_set = self.font.getGlyphSet()
        scale = font_size / self.units_per_em
        reverse = self._is_cff()

        pen = PathCommandPen(glyph_set)
        cursor = x

        for char in text:
            name = self.glyph_name(char)
            if name not in glyph_set:
                continue

            glyph = glyph_set[name]
            out_pen = TransformPen(pen, (scale, 0, 0, -scale, cursor, y))
            glyph.draw(ReverseContourPen(out_pen) if reverse else out_pen)
            cursor += glyph.width * scale

        logger.debug("Path extracted", text=text, commands=len(pen.commands))
        return pen.commands

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def _is_cff(self) -> bool:
        return "CFF " in self.font or "CFF2" in self.font

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
