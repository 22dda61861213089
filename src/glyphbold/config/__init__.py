"""Configuration management for glyphbold.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TessellationConfig: Bezier flattening settings
- OffsetConfig: Boldness and vertex sampling settings
- LayoutConfig: Font size and placement
- CanvasConfig: Raster surface size
- LoggingConfig: Logging settings
- GlyphboldSettings: Main application settings
"""

from glyphbold.config.settings import (
    CanvasConfig,
    GlyphboldSettings,
    LayoutConfig,
    LoggingConfig,
    OffsetConfig,
    TessellationConfig,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "GlyphboldSettings",
    "LayoutConfig",
    "LoggingConfig",
    "OffsetConfig",
    "TessellationConfig",
    "get_default_settings",
]
