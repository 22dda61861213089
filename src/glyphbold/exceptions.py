"""Exception hierarchy for Glyphbold."""


class GlyphboldError(Exception):
    """Base exception for all Glyphbold errors."""

    pass


class ResourceError(GlyphboldError):
    """Errors related to external resources such as font files."""

    pass


class FontLoadError(ResourceError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(ResourceError):
    """Requested character has no glyph in the font."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"No glyph for character {char!r} in font")


class GeometryError(GlyphboldError):
    """Errors in geometric calculations."""

    pass


class ContourError(GeometryError):
    """Error with contour data or path command streams."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DegenerateContourError(GeometryError):
    """Contour collapsed to fewer than two distinct points."""

    def __init__(self, point_count: int) -> None:
        self.point_count = point_count
        super().__init__(
            f"Degenerate contour: {point_count} point(s) left after deduplication"
        )


class InvalidParameterError(GlyphboldError):
    """A tunable render parameter is out of range."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")
