"""Configuration settings for Glyphbold."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class TessellationConfig(BaseModel):
    """Configuration for Bezier curve flattening.

    Lengths are in the same units as the path commands (scaled font units
    once the path provider has applied the font size).
    """

    step_size: float = Field(
        default=3.0,
        gt=0.0,
        description="Control-polygon length covered by one flattening step",
    )
    max_steps: int = Field(
        default=10,
        ge=2,
        le=1000,
        description="Upper bound on points emitted per curve segment",
    )


class OffsetConfig(BaseModel):
    """Configuration for the outline offsetter."""

    boldness: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Offset distance along vertex normals (negative thins)",
    )
    sampling_resolution: float = Field(
        default=1.0,
        gt=0.0,
        description="Grid cell size used to merge near-coincident vertices",
    )
    seam_miter: bool = Field(
        default=False,
        description="Use the true miter at the first vertex instead of the first edge normal",
    )
    scale_by_miter: bool = Field(
        default=False,
        description="Scale each displacement by its miter length",
    )
    miter_limit: float = Field(
        default=4.0,
        ge=1.0,
        description="Upper bound on miter length when scale_by_miter is set",
    )


class LayoutConfig(BaseModel):
    """Placement of the rendered text on the canvas."""

    font_size: float = Field(
        default=72.0,
        gt=0.0,
        description="Font size in pixels per em",
    )
    origin_x: float = Field(
        default=0.0,
        description="X position of the first glyph origin",
    )
    baseline_y: float = Field(
        default=100.0,
        description="Vertical baseline translation applied at paint time",
    )


class CanvasConfig(BaseModel):
    """Raster surface dimensions."""

    width: int = Field(default=800, ge=1, le=16384)
    height: int = Field(default=200, ge=1, le=16384)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class GlyphboldSettings(BaseModel):
    """Main application settings."""

    tessellation: TessellationConfig = Field(default_factory=TessellationConfig)
    offset: OffsetConfig = Field(default_factory=OffsetConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphboldSettings:
    """Get default application settings."""
    return GlyphboldSettings()
