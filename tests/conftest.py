"""Shared fixtures: a tiny TrueType font built in memory with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000


def _draw_o(pen: TTGlyphPen) -> None:
    # Outer ring, clockwise (TrueType outer), four quadratic quarters
    pen.moveTo((500, 1000))
    pen.qCurveTo((1000, 1000), (1000, 500))
    pen.qCurveTo((1000, 0), (500, 0))
    pen.qCurveTo((0, 0), (0, 500))
    pen.qCurveTo((0, 1000), (500, 1000))
    pen.closePath()
    # Counter, counter-clockwise square
    pen.moveTo((300, 300))
    pen.lineTo((700, 300))
    pen.lineTo((700, 700))
    pen.lineTo((300, 700))
    pen.closePath()


def _draw_i(pen: TTGlyphPen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((300, 700))
    pen.lineTo((300, 0))
    pen.closePath()


def _draw_notdef(pen: TTGlyphPen) -> None:
    pen.moveTo((50, 0))
    pen.lineTo((50, 600))
    pen.lineTo((450, 600))
    pen.lineTo((450, 0))
    pen.closePath()


def build_test_font(path: Path) -> Path:
    """Write a TrueType font with .notdef, space, O and I glyphs."""
    drawers = {".notdef": _draw_notdef, "space": None, "O": _draw_o, "I": _draw_i}
    advances = {".notdef": 500, "space": 250, "O": 1100, "I": 400}
    # hmtx left side bearings must match each outline's xMin
    lsbs = {".notdef": 50, "space": 0, "O": 0, "I": 100}

    glyphs = {}
    for name, draw in drawers.items():
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(list(drawers))
    fb.setupCharacterMap({32: "space", ord("O"): "O", ord("I"): "I"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (advances[name], lsbs[name]) for name in drawers})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "GlyphboldTest", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_test_font(tmp_path / "GlyphboldTest-Regular.ttf")
