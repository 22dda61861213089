"""Glyphbold - Render artificially boldened glyph outlines.

Glyphbold flattens a glyph's curved outline into polygons, works out which
contours are solid fills and which are holes, and offsets every contour along
its vertex normals so the filled result looks heavier (or lighter, for a
negative boldness).

Example:
    $ glyphbold Roboto-Regular.ttf "Hello" --boldness 2 -o hello.png
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
